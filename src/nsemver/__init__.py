# SPDX-License-Identifier: MIT
"""Semantic versions with any number of segments, and range constraints.

This package parses versions such as ``1.2``, ``v1.2.3-beta.1+build.7`` or
``1.2.3.4``, orders them following SemVer 2.0.0 generalized to N numeric
segments, and evaluates npm-style range constraints against them.

Example:
    >>> from nsemver import parse_version, parse_constraint_set
    >>>
    >>> version = parse_version("v1.2.3-alpha.1+build.456")
    >>> version.major, version.prerelease, str(version)
    (1, 'alpha.1', '1.2.3-alpha.1+build.456')
    >>>
    >>> parse_version("1.1") == parse_version("1.1.0.0")
    True
    >>>
    >>> str(parse_version("1.2.3").increment_minor())
    '1.3.0'
    >>>
    >>> constraints = parse_constraint_set(">=1.0, <2.0 || 3.x")
    >>> constraints.check("1.4"), constraints.check("2.1"), constraints.check("3.7.1")
    (True, False, True)
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    parse_version_strict,
    is_valid_semver,
    compare_versions,
    validate_prerelease,
    validate_metadata,
    InvalidVersionError,
    EmptyVersionError,
    InvalidCharactersError,
    SegmentStartsWithZeroError,
    InvalidPrereleaseError,
    InvalidMetadataError,
    SegmentOverflowError,
)
from .compare import (
    compare_prerelease,
    compare_segments,
)
from .constraint import (
    Constraint,
    ConstraintSet,
    parse_constraint_set,
    rewrite_ranges,
    ConstraintError,
    ConstraintParserError,
)
from .violations import (
    ConstraintViolation,
    ViolationKind,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "parse_version_strict",
    "is_valid_semver",
    "validate_prerelease",
    "validate_metadata",
    "InvalidVersionError",
    "EmptyVersionError",
    "InvalidCharactersError",
    "SegmentStartsWithZeroError",
    "InvalidPrereleaseError",
    "InvalidMetadataError",
    "SegmentOverflowError",
    # Version comparison
    "compare_versions",
    "compare_prerelease",
    "compare_segments",
    # Constraints
    "Constraint",
    "ConstraintSet",
    "parse_constraint_set",
    "rewrite_ranges",
    "ConstraintError",
    "ConstraintParserError",
    "ConstraintViolation",
    "ViolationKind",
]
