# SPDX-License-Identifier: MIT
"""Reasons a version fails a constraint.

Violations are returned, not raised: :meth:`ConstraintSet.check` discards
them and :meth:`ConstraintSet.validate` collects them for diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ViolationKind(str, Enum):
    """Why a version did not satisfy a single constraint."""

    PRERELEASE = "prerelease"
    EQUAL = "equal"
    NOT_EQUAL = "not_equal"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    PART_MISMATCH = "part_mismatch"
    METADATA_MISMATCH = "metadata_mismatch"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True, slots=True)
class ConstraintViolation:
    """A failed constraint check.

    Attributes:
        kind: Category of the failure
        version: The checked version, as text
        constraint: The constraint that failed, as written
        message: Human readable explanation
    """

    kind: ViolationKind
    version: str
    constraint: str
    message: str

    def __str__(self) -> str:
        return self.message
