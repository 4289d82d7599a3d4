# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Generator

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory with pyproject.toml."""
    project_dir = tmp_path / "test_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "test-project"
version = "v1.4.2"

[tool.nsemver]
constraint = ">=1.0, <2.0"
"""
    )

    yield project_dir


@pytest.fixture
def strict_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a project that requires strict version parsing."""
    project_dir = tmp_path / "strict_project"
    project_dir.mkdir()

    pyproject = project_dir / "pyproject.toml"
    pyproject.write_text(
        """[project]
name = "strict-project"
version = "2.0.0-rc.1"

[tool.nsemver]
strict = true
constraint = "^2.0.0-rc.1"
"""
    )

    yield project_dir


@pytest.fixture
def bare_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a project without version or nsemver configuration."""
    project_dir = tmp_path / "bare_project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text('[project]\nname = "bare"\n')
    yield project_dir
