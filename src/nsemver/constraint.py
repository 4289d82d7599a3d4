# SPDX-License-Identifier: MIT
"""Range constraints over semantic versions.

A constraint string is a list of OR-groups separated by ``||``; each group is
a list of comparators separated by commas or whitespace, all of which must
hold. Supported comparators:

- ``=``, (none): exact match, or a wildcard range for ``1.2.x``
- ``!=``: anything but the version (or the wildcard range)
- ``>``, ``<``, ``>=`` (``=>``), ``<=`` (``=<``): ordering
- ``~`` (``~>``): segments before the last one (or the wildcard) are pinned
- ``^``: leading zero segments and the first non-zero segment are pinned
- ``A - B``: shorthand for ``>= A, <= B``

A pre-release version only satisfies a comparator whose own version carries
a pre-release, except for ``!=`` without a wildcard.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, Union

from .semver import InvalidVersionError, Version, parse_version
from .violations import ConstraintViolation, ViolationKind

logger = logging.getLogger(__name__)

WILDCARDS = frozenset({"x", "X", "*"})

# Alternation order matters: the empty operator is tried right after "="
_OPERATORS = r"=||!=|>|<|>=|=>|<=|=<|~|~>|\^"

# Whitespace as accepted in constraint text (no vertical tab, ASCII only)
_WS = r"[\t\n\f\r ]"

VERSION_PATTERN = (
    r"v?[0-9xX*]+(?:\.[0-9xX*]+)*"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
)

# A single comparator, matched against the whole token
CONSTRAINT_PATTERN = re.compile(
    rf"{_WS}*(?P<operator>{_OPERATORS}){_WS}*(?P<version>{VERSION_PATTERN}){_WS}*"
)

# Hyphen range "A - B", the hyphen must be surrounded by whitespace. A match
# may only start where a version token starts.
RANGE_PATTERN = re.compile(
    rf"(?<![0-9A-Za-z.*+-])(?P<lower>{VERSION_PATTERN}){_WS}+-{_WS}+(?P<upper>{VERSION_PATTERN})"
)

_TOKEN_PATTERN = re.compile(rf"(?P<operator>{_OPERATORS}){_WS}*(?P<version>{VERSION_PATTERN})")
_SEPARATOR_PATTERN = re.compile(rf"{_WS}*,?{_WS}*")
_LEADING_WS_PATTERN = re.compile(rf"{_WS}*")

_EQUALITY_OPERATORS = frozenset({"", "="})


class ConstraintError(ValueError):
    """Raised when a constraint string is not well formed."""

    def __init__(self, constraint: str, message: str = ""):
        self.constraint = constraint
        self.message = message or f"Improper constraint: {constraint}"
        super().__init__(self.message)


class ConstraintParserError(ConstraintError):
    """Raised when a well formed comparator holds an unparsable version."""

    pass


def rewrite_ranges(text: str) -> str:
    """Rewrite every hyphen range ``A - B`` into ``>= A, <= B``.

    Each range is replaced once; the replacement text is not scanned again.

    Examples:
        >>> rewrite_ranges("1.0 - 2.0")
        '>= 1.0, <= 2.0'
    """
    rewritten = RANGE_PATTERN.sub(
        lambda match: f">= {match.group('lower')}, <= {match.group('upper')}", text
    )
    if rewritten != text:
        logger.debug("Rewrote hyphen range %r as %r", text, rewritten)
    return rewritten


def _tokenize(segment: str) -> list[str]:
    """Split an AND-group into comparator tokens.

    The group must consist of one or more comparators, each optionally
    followed by a single comma, with whitespace allowed anywhere between.
    """
    tokens: list[str] = []
    position = _LEADING_WS_PATTERN.match(segment).end()  # type: ignore[union-attr]

    while True:
        match = _TOKEN_PATTERN.match(segment, position)
        if match is None:
            raise ConstraintError(segment)
        tokens.append(match.group(0))

        position = _SEPARATOR_PATTERN.match(segment, match.end()).end()  # type: ignore[union-attr]
        if position == len(segment):
            return tokens


def _split_suffix(version_text: str) -> tuple[str, str]:
    """Split version text into its numeric core and ``-pre+meta`` suffix."""
    for index, char in enumerate(version_text):
        if char in "-+":
            return version_text[:index], version_text[index:]
    return version_text, ""


@dataclass(frozen=True, slots=True)
class Constraint:
    """A single comparator such as ``>=1.2`` or ``~1.4.x``.

    Attributes:
        operator: Operator as written (``""`` for a bare version)
        version: Reference version, with wildcard segments removed
        original: Version text as written (e.g. ``4.x``)
        dirty_part: 1-based index of the first wildcard segment, 0 if none
    """

    operator: str
    version: Version
    original: str
    dirty_part: int = 0

    @classmethod
    def parse(cls, text: str) -> Constraint:
        """Parse a single comparator token.

        An empty token matches any release version.

        Raises:
            ConstraintError: If the token is not a valid comparator
            ConstraintParserError: If the version in the token cannot be parsed
        """
        if not text:
            return cls(operator="", version=Version((0,), original="0"), original="", dirty_part=1)

        match = CONSTRAINT_PATTERN.fullmatch(text)
        if match is None:
            raise ConstraintError(text)

        operator = match.group("operator")
        version_text = match.group("version")
        core, suffix = _split_suffix(version_text)

        segments = core.split(".")
        dirty_part = next(
            (index for index, segment in enumerate(segments, start=1) if segment in WILDCARDS),
            0,
        )
        if dirty_part:
            if not WILDCARDS.issuperset(segments[dirty_part - 1 :]):
                raise ConstraintError(text, f"Wildcards must be trailing in constraint: {text}")
            core = ".".join(segments[: dirty_part - 1]) or "0"

        try:
            version = parse_version(core + suffix)
        except InvalidVersionError as e:
            raise ConstraintParserError(
                text, f"Invalid version in constraint {text}: {e.message}"
            ) from e

        if version.metadata and operator not in _EQUALITY_OPERATORS:
            raise ConstraintError(
                text, f"Build metadata is only allowed in equality constraints: {text}"
            )

        return cls(operator=operator, version=version, original=version_text, dirty_part=dirty_part)

    def __str__(self) -> str:
        return self.operator + self.original

    def evaluate(self, version: Version) -> Optional[ConstraintViolation]:
        """Check a version, returning the reason it fails or None if it passes."""
        return _EVALUATORS[self.operator](version, self)

    def check(self, version: Version) -> bool:
        return self.evaluate(version) is None


def _violation(
    kind: ViolationKind, version: Version, constraint: Constraint, message: str
) -> ConstraintViolation:
    return ConstraintViolation(
        kind=kind, version=str(version), constraint=str(constraint), message=message
    )


def _release_only(version: Version, constraint: Constraint) -> Optional[ConstraintViolation]:
    if version.prerelease and not constraint.version.prerelease:
        return _violation(
            ViolationKind.PRERELEASE,
            version,
            constraint,
            f"{version} is a prerelease version and the constraint is only looking "
            "for release versions",
        )
    return None


def _not_equal(version: Version, constraint: Constraint) -> Optional[ConstraintViolation]:
    reference = constraint.version

    if constraint.dirty_part:
        if version.prerelease or reference.prerelease:
            return _violation(
                ViolationKind.UNSUPPORTED,
                version,
                constraint,
                f"not-equal constraint {constraint} is not applicable to pre-release versions",
            )
        for index in range(1, constraint.dirty_part):
            if version.part(index) != reference.part(index):
                return None
    elif not version.equal(reference):
        return None

    return _violation(
        ViolationKind.EQUAL, version, constraint, f"{version} is equal to {constraint.original}"
    )


def _greater_than(version: Version, constraint: Constraint) -> Optional[ConstraintViolation]:
    violation = _release_only(version, constraint)
    if violation is None and version.compare(constraint.version) != 1:
        violation = _violation(
            ViolationKind.LESS_THAN_OR_EQUAL,
            version,
            constraint,
            f"{version} is less than or equal to {constraint.original}",
        )
    return violation


def _less_than(version: Version, constraint: Constraint) -> Optional[ConstraintViolation]:
    violation = _release_only(version, constraint)
    if violation is None and version.compare(constraint.version) != -1:
        violation = _violation(
            ViolationKind.GREATER_THAN_OR_EQUAL,
            version,
            constraint,
            f"{version} is greater than or equal to {constraint.original}",
        )
    return violation


def _greater_than_or_equal(
    version: Version, constraint: Constraint
) -> Optional[ConstraintViolation]:
    violation = _release_only(version, constraint)
    if violation is None and version.compare(constraint.version) < 0:
        violation = _violation(
            ViolationKind.LESS_THAN,
            version,
            constraint,
            f"{version} is less than {constraint.original}",
        )
    return violation


def _less_than_or_equal(version: Version, constraint: Constraint) -> Optional[ConstraintViolation]:
    violation = _release_only(version, constraint)
    if violation is None and version.compare(constraint.version) > 0:
        violation = _violation(
            ViolationKind.GREATER_THAN,
            version,
            constraint,
            f"{version} is greater than {constraint.original}",
        )
    return violation


def _tilde(version: Version, constraint: Constraint) -> Optional[ConstraintViolation]:
    violation = _release_only(version, constraint)
    if violation is not None:
        return violation

    reference = constraint.version
    if version.less_than(reference):
        return _violation(
            ViolationKind.LESS_THAN,
            version,
            constraint,
            f"{version} is less than {constraint.original}",
        )

    # Only the last segment (or everything from the wildcard on) may float
    boundary = constraint.dirty_part or reference.parts_count
    for index in range(1, boundary):
        if version.part(index) != reference.part(index):
            return _violation(
                ViolationKind.PART_MISMATCH,
                version,
                constraint,
                f"{version} does not have same part {index} version as {constraint.original}",
            )
    return None


def _tilde_or_equal(version: Version, constraint: Constraint) -> Optional[ConstraintViolation]:
    violation = _release_only(version, constraint)
    if violation is not None:
        return violation

    reference = constraint.version
    if reference.metadata and version.metadata != reference.metadata:
        return _violation(
            ViolationKind.METADATA_MISMATCH,
            version,
            constraint,
            f"{version} does not have build metadata {reference.metadata}",
        )

    if constraint.dirty_part:
        return _tilde(version, constraint)

    if not version.equal(reference):
        return _violation(
            ViolationKind.NOT_EQUAL,
            version,
            constraint,
            f"{version} is not equal to {constraint.original}",
        )
    return None


def _caret(version: Version, constraint: Constraint) -> Optional[ConstraintViolation]:
    violation = _release_only(version, constraint)
    if violation is not None:
        return violation

    reference = constraint.version
    zeros = 0
    for part in reference.parts:
        if part:
            break
        zeros += 1

    if zeros == reference.parts_count:
        return _violation(
            ViolationKind.UNSUPPORTED,
            version,
            constraint,
            f"caret constraint is not supported for {constraint.original}",
        )

    if version.less_than(reference):
        return _violation(
            ViolationKind.LESS_THAN,
            version,
            constraint,
            f"{version} is less than {constraint.original}",
        )

    # Leading zeros and the first non-zero segment are pinned
    for index in range(1, zeros + 2):
        if version.part(index) != reference.part(index):
            return _violation(
                ViolationKind.PART_MISMATCH,
                version,
                constraint,
                f"{version} version's {index} part should be equal to {reference}'s",
            )
    return None


_EVALUATORS: dict[str, Callable[[Version, Constraint], Optional[ConstraintViolation]]] = {
    "": _tilde_or_equal,
    "=": _tilde_or_equal,
    "!=": _not_equal,
    ">": _greater_than,
    "<": _less_than,
    ">=": _greater_than_or_equal,
    "=>": _greater_than_or_equal,
    "<=": _less_than_or_equal,
    "=<": _less_than_or_equal,
    "~": _tilde,
    "~>": _tilde,
    "^": _caret,
}


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


@dataclass(frozen=True, slots=True)
class ConstraintSet:
    """One or more OR-groups of AND-ed constraints.

    A version satisfies the set when it satisfies every constraint of at
    least one group. Sets are immutable and can be shared between threads.

    Attributes:
        groups: OR-groups, each a non-empty tuple of constraints
        original: The text the set was parsed from
    """

    groups: tuple[tuple[Constraint, ...], ...]
    original: str = ""

    @classmethod
    def parse(cls, text: str) -> ConstraintSet:
        """Parse a constraint string such as ``>=1.0, <2.0 || ^3.1``.

        Raises:
            ConstraintError: If the text is not a valid constraint
        """
        if not isinstance(text, str):
            raise ConstraintError(
                str(text), f"Constraint must be a string, got {type(text).__name__}"
            )

        groups = tuple(
            tuple(Constraint.parse(token) for token in _tokenize(segment))
            for segment in rewrite_ranges(text).split("||")
        )
        logger.debug("Parsed constraint %r into %d group(s)", text, len(groups))
        return cls(groups=groups, original=text)

    def __str__(self) -> str:
        return " || ".join(
            " ".join(str(constraint) for constraint in group) for group in self.groups
        )

    def check(self, version: Union[str, Version]) -> bool:
        """Return True if the version satisfies the constraints."""
        version = _coerce(version)
        return any(
            all(constraint.check(version) for constraint in group) for group in self.groups
        )

    def __contains__(self, version: object) -> bool:
        if not isinstance(version, (str, Version)):
            return False
        return self.check(version)

    def validate(self, version: Union[str, Version]) -> tuple[bool, list[ConstraintViolation]]:
        """Check a version and explain why it fails.

        Every constraint of every failing group is evaluated. The pre-release
        violation is reported once even if several constraints raise it.

        Returns:
            (True, []) if a group is satisfied, else (False, violations)
        """
        version = _coerce(version)
        violations: list[ConstraintViolation] = []
        prerelease_reported = False

        for group in self.groups:
            satisfied = True
            for constraint in group:
                violation = constraint.evaluate(version)
                if violation is None:
                    continue
                satisfied = False
                if violation.kind is ViolationKind.PRERELEASE:
                    if prerelease_reported:
                        continue
                    prerelease_reported = True
                violations.append(violation)

            if satisfied:
                return True, []

        return False, violations

    def filter(self, versions: Iterable[Union[str, Version]]) -> Iterator[Version]:
        """Yield the versions satisfying the constraints, in input order."""
        for version in versions:
            version = _coerce(version)
            if self.check(version):
                yield version


def parse_constraint_set(text: str) -> ConstraintSet:
    """Parse a constraint string into a ConstraintSet.

    Examples:
        >>> constraints = parse_constraint_set("^1.2.3")
        >>> constraints.check("1.9.9"), constraints.check("2.0.0")
        (True, False)
        >>> str(parse_constraint_set("1.0 - 2.0 || >= 3"))
        '>=1.0 <=2.0 || >=3'
    """
    return ConstraintSet.parse(text)
