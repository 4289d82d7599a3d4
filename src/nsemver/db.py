# SPDX-License-Identifier: MIT
"""SQLAlchemy column types storing versions and constraints as strings.

Example:
    >>> from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
    >>> class Base(DeclarativeBase):
    ...     pass
    >>> class Release(Base):
    ...     __tablename__ = "releases"
    ...     id: Mapped[int] = mapped_column(primary_key=True)
    ...     version: Mapped[Version] = mapped_column(VersionType(64))
"""

from __future__ import annotations

from typing import Any, Optional

from sqlalchemy import String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from .constraint import ConstraintSet
from .semver import Version, parse_version


class VersionType(TypeDecorator):
    """Stores a Version in a string column.

    Bound values that are not Version objects are parsed first, so anything
    but valid version text fails before it is written. Loaded values are
    parsed back into Version objects.
    """

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, Version):
            value = parse_version(value)
        return str(value)

    def process_result_value(self, value: Optional[str], dialect: Dialect) -> Optional[Version]:
        if value is None:
            return None
        return parse_version(value)

    @property
    def python_type(self) -> type:
        return Version


class ConstraintSetType(TypeDecorator):
    """Stores a ConstraintSet in a string column, in its normalized form."""

    impl = String
    cache_ok = True

    def process_bind_param(self, value: Any, dialect: Dialect) -> Optional[str]:
        if value is None:
            return None
        if not isinstance(value, ConstraintSet):
            value = ConstraintSet.parse(value)
        return str(value)

    def process_result_value(
        self, value: Optional[str], dialect: Dialect
    ) -> Optional[ConstraintSet]:
        if value is None:
            return None
        return ConstraintSet.parse(value)

    @property
    def python_type(self) -> type:
        return ConstraintSet
