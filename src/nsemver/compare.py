# SPDX-License-Identifier: MIT
"""Ordering rules for N-segment semantic versions.

Numeric segments are compared left to right with virtual zero padding, so
``1.1``, ``1.1.0`` and ``1.1.0.0`` are equal. When the numeric core ties, a
release sorts above any pre-release and two pre-releases are compared
identifier by identifier. Build metadata never takes part in ordering.

These functions work on plain tuples and strings so that both the
:class:`~nsemver.semver.Version` type and callers holding raw components can
use them.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Sequence

# Largest value accepted for a numeric segment or numeric identifier
MAX_SEGMENT = 2**64 - 1

_DIGITS = frozenset("0123456789")


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if the identifier is an unsigned 64-bit decimal number.

    Only ASCII digits count; ``-1`` or ``+1`` are alphanumeric identifiers.
    Digit runs too large for 64 bits are treated as alphanumeric as well.
    """
    if not identifier or not _DIGITS.issuperset(identifier):
        return False
    return int(identifier) <= MAX_SEGMENT


def compare_segments(parts1: Sequence[int], parts2: Sequence[int]) -> int:
    """Compare two numeric cores, padding the shorter one with zeros.

    Returns:
        -1, 0 or 1
    """
    for p1, p2 in zip_longest(parts1, parts2, fillvalue=0):
        if p1 != p2:
            return -1 if p1 < p2 else 1
    return 0


def compare_prerelease_identifier(id1: str, id2: str) -> int:
    """Compare a single pair of pre-release identifiers.

    An empty identifier stands for a position past the end of the shorter
    list and sorts lower. Numeric identifiers sort below alphanumeric ones,
    two numeric identifiers compare by value and two alphanumeric ones
    compare as strings.
    """
    if id1 == id2:
        return 0
    if not id1:
        return -1
    if not id2:
        return 1

    is_num1 = is_numeric_identifier(id1)
    is_num2 = is_numeric_identifier(id2)

    if is_num1 and is_num2:
        return _sign(int(id1) - int(id2))
    if is_num1:
        return -1
    if is_num2:
        return 1
    return 1 if id1 > id2 else -1


def compare_prerelease(pre1: str, pre2: str) -> int:
    """Compare two pre-release strings.

    An empty string means "no pre-release": a release has higher precedence
    than any pre-release of the same core (``1.0 > 1.0-alpha``).

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Examples:
        >>> compare_prerelease("alpha.9", "alpha.10")
        -1
        >>> compare_prerelease("beta2", "beta1")
        1
        >>> compare_prerelease("", "rc.1")
        1
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    for id1, id2 in zip_longest(pre1.split("."), pre2.split("."), fillvalue=""):
        result = compare_prerelease_identifier(id1, id2)
        if result:
            return result

    return 0
