# SPDX-License-Identifier: MIT
"""Semantic version parsing for versions with any number of numeric segments.

Supports N.N[.N...] cores with optional pre-release and build metadata:
- Core: 1, 1.2, 1.2.3, 1.2.3.4 (no leading zeros, unsigned 64-bit values)
- Pre-release: -alpha, -alpha.1, -rc1-with-hyphen, -0.3.7
- Build metadata: +build, +build.123, +20240101, +001
- Optional leading ``v`` (lenient parser only), preserved in ``original``
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Optional, Union

from .compare import MAX_SEGMENT, compare_prerelease, compare_segments, is_numeric_identifier

_DIGITS = frozenset(string.digits)
_IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "-")


class InvalidVersionError(ValueError):
    """Raised when a version string does not follow semantic versioning."""

    reason = "Invalid semantic version"

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"{self.reason}: {version}"
        super().__init__(self.message)


class EmptyVersionError(InvalidVersionError):
    """Raised when an empty string is parsed."""

    def __init__(self, version: str = "", message: str = ""):
        super().__init__(version, message or "Version string cannot be empty")


class InvalidCharactersError(InvalidVersionError):
    """Raised when a numeric segment is not an unsigned decimal number."""

    reason = "Invalid characters in version"


class SegmentStartsWithZeroError(InvalidVersionError):
    """Raised when a numeric segment or identifier has a leading zero."""

    reason = "Version segment starts with 0"


class InvalidPrereleaseError(InvalidVersionError):
    """Raised when a pre-release identifier contains disallowed characters."""

    reason = "Invalid pre-release"


class InvalidMetadataError(InvalidVersionError):
    """Raised when a build metadata identifier contains disallowed characters."""

    reason = "Invalid build metadata"


class SegmentOverflowError(InvalidVersionError):
    """Raised when incrementing a segment that is already at its maximum."""

    reason = "Version segment overflows 64 bits"


def validate_prerelease(prerelease: str, version: Optional[str] = None) -> None:
    """Validate a dot separated pre-release string.

    Each identifier is either all digits without a leading zero, or made of
    ASCII letters, digits and hyphens.

    Args:
        prerelease: Pre-release string without the leading hyphen
        version: Version text to report in errors (defaults to the pre-release)

    Raises:
        SegmentStartsWithZeroError: If a numeric identifier has a leading zero
        InvalidPrereleaseError: If an identifier contains other characters
    """
    for identifier in prerelease.split("."):
        if _DIGITS.issuperset(identifier):
            if len(identifier) > 1 and identifier[0] == "0":
                raise SegmentStartsWithZeroError(version or prerelease)
        elif not _IDENTIFIER_CHARS.issuperset(identifier):
            raise InvalidPrereleaseError(version or prerelease)


def validate_metadata(metadata: str, version: Optional[str] = None) -> None:
    """Validate a dot separated build metadata string.

    Leading zeros are allowed in metadata identifiers.

    Raises:
        InvalidMetadataError: If an identifier contains characters other than
            ASCII letters, digits and hyphens
    """
    for identifier in metadata.split("."):
        if not _IDENTIFIER_CHARS.issuperset(identifier):
            raise InvalidMetadataError(version or metadata)


def _render(parts: tuple[int, ...], prerelease: str, metadata: str) -> str:
    text = ".".join(str(part) for part in parts)
    if prerelease:
        text += f"-{prerelease}"
    if metadata:
        text += f"+{metadata}"
    return text


@dataclass(frozen=True, slots=True, eq=False)
class Version:
    """Represents a parsed semantic version.

    Versions are immutable. Every operation that changes a component returns
    a new Version whose ``original`` text is regenerated from the components
    (keeping a leading ``v`` of the source).

    Equality and ordering follow :meth:`compare`: missing segments count as
    zero and build metadata is ignored, so ``Version.parse("1.0")`` equals
    ``Version.parse("1.0.0+build")``.

    Attributes:
        parts: Numeric segments (major, minor, patch, ...), at least one
        prerelease: Pre-release identifiers, empty for a release
        metadata: Build metadata, empty if absent
        original: The text the version was parsed from
    """

    parts: tuple[int, ...]
    prerelease: str = ""
    metadata: str = ""
    original: str = ""

    def __post_init__(self) -> None:
        parts = tuple(self.parts)
        if not parts:
            raise InvalidVersionError(self.original, "Version must have at least one segment")
        for part in parts:
            if not isinstance(part, int) or not 0 <= part <= MAX_SEGMENT:
                raise InvalidCharactersError(
                    self.original or repr(parts), f"Invalid version segment: {part!r}"
                )
        object.__setattr__(self, "parts", parts)

        if not self.original:
            object.__setattr__(self, "original", _render(parts, self.prerelease, self.metadata))

        if self.prerelease:
            validate_prerelease(self.prerelease, self.original)
        if self.metadata:
            validate_metadata(self.metadata, self.original)

    @classmethod
    def parse(cls, version_string: str, strict: bool = False) -> Version:
        """Parse a version string.

        Args:
            version_string: The text to parse
            strict: Reject a leading ``v`` when True

        Returns:
            Parsed Version
        """
        if strict:
            return parse_version_strict(version_string)
        return parse_version(version_string)

    @classmethod
    def from_parts(cls, *numbers: int) -> Version:
        """Create a release version from its numeric segments.

        Examples:
            >>> str(Version.from_parts(1, 2, 13))
            '1.2.13'
        """
        return cls(tuple(numbers))

    def __str__(self) -> str:
        """Return the version text without a leading ``v``."""
        return self.original[1:] if self.original.startswith("v") else self.original

    @property
    def major(self) -> int:
        return self.parts[0]

    @property
    def minor(self) -> int:
        return self.part(2)

    @property
    def patch(self) -> int:
        return self.part(3)

    @property
    def parts_count(self) -> int:
        return len(self.parts)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the numeric core without pre-release or build metadata."""
        return ".".join(str(part) for part in self.parts)

    def part(self, index: int) -> int:
        """Return the 1-based segment ``index``, or 0 past the last segment."""
        if index < 1:
            raise ValueError(f"Segment index must be at least 1, got {index}")
        if index <= len(self.parts):
            return self.parts[index - 1]
        return 0

    # Comparison

    def compare(self, other: Version) -> int:
        """Compare to another version.

        Returns:
            -1, 0 or 1 if this version is lower, equal or higher
        """
        result = compare_segments(self.parts, other.parts)
        if result:
            return result
        return compare_prerelease(self.prerelease, other.prerelease)

    def equal(self, other: Version) -> bool:
        return self.compare(other) == 0

    def less_than(self, other: Version) -> bool:
        return self.compare(other) < 0

    def greater_than(self, other: Version) -> bool:
        return self.compare(other) > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        parts = list(self.parts)
        while len(parts) > 1 and parts[-1] == 0:
            parts.pop()
        identifiers = self.prerelease.split(".") if self.prerelease else []
        while identifiers and not identifiers[-1]:
            identifiers.pop()
        return hash((tuple(parts), bool(self.prerelease), tuple(identifiers)))

    # Derived versions

    def _derive(self, **changes: object) -> Version:
        fields = {
            "parts": self.parts,
            "prerelease": self.prerelease,
            "metadata": self.metadata,
            **changes,
        }
        prefix = "v" if self.original.startswith("v") else ""
        return Version(original=prefix + _render(**fields), **fields)  # type: ignore[arg-type]

    def increment_part(self, index: int) -> Version:
        """Produce the next version on the 1-based segment ``index``.

        - Missing segments up to ``index`` are added as zeros first.
        - On the last segment, a pre-release is promoted to its release
          without incrementing; otherwise the segment is incremented.
        - On an earlier segment, it is incremented and all following segments
          are reset to zero.

        Pre-release and build metadata are always dropped.

        Examples:
            >>> str(Version.parse("1.2.3").increment_part(2))
            '1.3.0'
            >>> str(Version.parse("1.2.3-beta+meta").increment_part(3))
            '1.2.3'

        Raises:
            ValueError: If ``index`` is less than 1
            SegmentOverflowError: If the segment to increment is already
                2**64 - 1
        """
        if index < 1:
            raise ValueError(f"Segment index must be at least 1, got {index}")

        parts = list(self.parts)
        if len(parts) < index:
            parts.extend([0] * (index - len(parts)))

        if len(parts) == index and self.prerelease:
            return self._derive(parts=tuple(parts), prerelease="", metadata="")

        if parts[index - 1] >= MAX_SEGMENT:
            raise SegmentOverflowError(
                self.original or str(self),
                f"Segment {index} of {self.original or self} is already {MAX_SEGMENT}",
            )
        parts[index - 1] += 1
        parts[index:] = [0] * (len(parts) - index)

        return self._derive(parts=tuple(parts), prerelease="", metadata="")

    def increment_major(self) -> Version:
        return self.increment_part(1)

    def increment_minor(self) -> Version:
        return self.increment_part(2)

    def increment_patch(self) -> Version:
        return self.increment_part(3)

    def increment_last(self) -> Version:
        return self.increment_part(len(self.parts))

    def with_prerelease(self, prerelease: str) -> Version:
        """Return a copy with the pre-release replaced (empty to remove it).

        Raises:
            InvalidPrereleaseError: If the pre-release is invalid
            SegmentStartsWithZeroError: If a numeric identifier has a leading zero
        """
        return self._derive(prerelease=prerelease)

    def with_metadata(self, metadata: str) -> Version:
        """Return a copy with the build metadata replaced (empty to remove it).

        Raises:
            InvalidMetadataError: If the metadata is invalid
        """
        return self._derive(metadata=metadata)


def _parse_segment(segment: str, version_string: str) -> int:
    if not is_numeric_identifier(segment):
        raise InvalidCharactersError(version_string)
    if len(segment) > 1 and segment[0] == "0":
        raise SegmentStartsWithZeroError(version_string)
    return int(segment)


def _parse(text: str, original: str) -> Version:
    if not text:
        raise EmptyVersionError(original)

    core, _, metadata = text.partition("+")
    core, _, prerelease = core.partition("-")

    parts = tuple(_parse_segment(segment, original) for segment in core.split("."))
    return Version(parts=parts, prerelease=prerelease, metadata=metadata, original=original)


def _check_type(version_string: object) -> None:
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )


def parse_version_strict(version_string: str) -> Version:
    """Parse a semantic version string, rejecting a leading ``v``.

    Args:
        version_string: N.N[.N...][-prerelease][+build]

    Returns:
        A Version object with parsed components

    Raises:
        EmptyVersionError: If the string is empty
        InvalidCharactersError: If a numeric segment is not a decimal number
        SegmentStartsWithZeroError: If a segment or numeric pre-release
            identifier has a leading zero
        InvalidPrereleaseError: If the pre-release is invalid
        InvalidMetadataError: If the build metadata is invalid

    Examples:
        >>> parse_version_strict("1.2.3.4").parts
        (1, 2, 3, 4)
        >>> parse_version_strict("1.0-alpha.1+build.456").prerelease
        'alpha.1'
    """
    _check_type(version_string)
    return _parse(version_string, version_string)


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string, accepting one leading ``v``.

    The ``v`` is kept in :attr:`Version.original` but not in ``str()``.

    Examples:
        >>> version = parse_version("v1.2.3-beta")
        >>> version.original, str(version)
        ('v1.2.3-beta', '1.2.3-beta')
    """
    _check_type(version_string)
    text = version_string[1:] if version_string.startswith("v") else version_string
    return _parse(text, version_string)


def is_valid_semver(version_string: str, strict: bool = False) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0")
        True
        >>> is_valid_semver("v1.0", strict=True)
        False
        >>> is_valid_semver("1.2.beta")
        False
    """
    try:
        Version.parse(version_string, strict=strict)
    except InvalidVersionError:
        return False
    return True


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.1", "1.1.0.0")
        0
        >>> compare_versions("4.2-alpha.9", "4.2-alpha.10")
        -1
        >>> compare_versions("1.0", "1.0-hello")
        1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2
    return v1.compare(v2)
