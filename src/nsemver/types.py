# SPDX-License-Identifier: MIT
"""Pydantic field types for versions and constraints.

Example:
    >>> from pydantic import BaseModel
    >>> class Release(BaseModel):
    ...     version: SemVer
    ...     requires: SemVerConstraint
    >>> release = Release(version="v1.4.0", requires=">=1.0, <2.0")
    >>> release.model_dump(mode="json")
    {'version': '1.4.0', 'requires': '>=1.0 <2.0'}
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from .constraint import ConstraintSet
from .semver import Version, parse_version


def validate_version_field(value: Any) -> Version:
    """Validate a version field value.

    Args:
        value: A Version or version string

    Returns:
        The parsed Version

    Raises:
        ValueError: If the value is not a valid version
    """
    if isinstance(value, Version):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Version must be a string, got {type(value).__name__}")
    return parse_version(value)


def validate_constraint_field(value: Any) -> ConstraintSet:
    """Validate a constraint field value.

    Raises:
        ValueError: If the value is not a valid constraint
    """
    if isinstance(value, ConstraintSet):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Constraint must be a string, got {type(value).__name__}")
    return ConstraintSet.parse(value)


SemVer = Annotated[
    Version,
    PlainValidator(validate_version_field),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "format": "semver"}),
]

SemVerConstraint = Annotated[
    ConstraintSet,
    PlainValidator(validate_constraint_field),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string"}),
]
