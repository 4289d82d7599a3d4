# SPDX-License-Identifier: MIT
"""Tests for the SQLAlchemy column types."""

from __future__ import annotations

from collections.abc import Generator
from typing import Optional

import pytest
from sqlalchemy import String, create_engine, select, text
from sqlalchemy.exc import StatementError
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column

from nsemver import ConstraintError, ConstraintSet, InvalidVersionError, Version, parse_version
from nsemver.db import ConstraintSetType, VersionType


class Base(DeclarativeBase):
    pass


class Release(Base):
    __tablename__ = "releases"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column(String(64))
    version: Mapped[Version] = mapped_column(VersionType(64))
    requires: Mapped[Optional[ConstraintSet]] = mapped_column(ConstraintSetType(255), nullable=True)


@pytest.fixture
def session() -> Generator[Session, None, None]:
    """Create a session on an in-memory SQLite database."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        yield session
    engine.dispose()


class TestVersionType:
    """Tests for VersionType."""

    def test_round_trip(self, session: Session):
        """Test that a version is stored as text and loaded back."""
        session.add(Release(name="core", version=parse_version("v1.2.3-rc.1+b7")))
        session.commit()
        session.expunge_all()

        release = session.scalars(select(Release)).one()
        assert isinstance(release.version, Version)
        assert release.version.original == "1.2.3-rc.1+b7"

    def test_stored_as_string(self, session: Session):
        """Test the raw column value."""
        session.add(Release(name="core", version=parse_version("v2.0")))
        session.commit()

        raw = session.execute(text("SELECT version FROM releases")).scalar_one()
        assert raw == "2.0"

    def test_accepts_string(self, session: Session):
        """Test that version text is accepted when binding."""
        session.add(Release(name="core", version="3.1"))  # type: ignore[arg-type]
        session.commit()
        session.expunge_all()

        assert session.scalars(select(Release)).one().version == parse_version("3.1.0")

    def test_rejects_invalid_string(self, session: Session):
        """Test that invalid version text fails before it is written."""
        session.add(Release(name="core", version="1.beta"))  # type: ignore[arg-type]
        with pytest.raises(StatementError) as exc_info:
            session.commit()
        assert isinstance(exc_info.value.orig, InvalidVersionError)

    def test_rejects_non_string(self, session: Session):
        """Test that a value that is neither text nor a Version is not written."""
        session.add(Release(name="core", version=5))  # type: ignore[arg-type]
        with pytest.raises(StatementError) as exc_info:
            session.commit()
        assert isinstance(exc_info.value.orig, InvalidVersionError)
        session.rollback()

        assert session.scalars(select(Release)).all() == []

    def test_query_by_version(self, session: Session):
        """Test filtering on a version column."""
        session.add_all(
            [
                Release(name="a", version=parse_version("1.0")),
                Release(name="b", version=parse_version("2.0")),
            ]
        )
        session.commit()

        stmt = select(Release.name).where(Release.version == parse_version("2.0"))
        assert session.scalars(stmt).one() == "b"


class TestConstraintSetType:
    """Tests for ConstraintSetType."""

    def test_round_trip(self, session: Session):
        """Test that constraints are stored normalized and loaded back."""
        session.add(Release(name="core", version=parse_version("1.0"), requires=">= 1.0, <2"))
        session.commit()
        session.expunge_all()

        release = session.scalars(select(Release)).one()
        assert isinstance(release.requires, ConstraintSet)
        assert str(release.requires) == ">=1.0 <2"
        assert release.requires.check("1.5")

    def test_null(self, session: Session):
        """Test that NULL passes through."""
        session.add(Release(name="core", version=parse_version("1.0"), requires=None))
        session.commit()
        session.expunge_all()

        assert session.scalars(select(Release)).one().requires is None

    def test_rejects_invalid(self, session: Session):
        """Test that invalid constraints and non-string values are not written."""
        for requires in ["1.x.3", 5]:
            session.add(Release(name="core", version=parse_version("1.0"), requires=requires))
            with pytest.raises(StatementError) as exc_info:
                session.commit()
            assert isinstance(exc_info.value.orig, ConstraintError)
            session.rollback()

        assert session.scalars(select(Release)).all() == []
