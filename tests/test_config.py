# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from nsemver.cli.config import CLIConfig, ConfigError, find_project_root, load_config


class TestCLIConfig:
    """Tests for CLIConfig."""

    def test_from_pyproject(self, temp_project: Path):
        """Test loading project metadata and tool settings."""
        config = CLIConfig.from_pyproject(temp_project)
        assert config.name == "test-project"
        assert config.version == "v1.4.2"
        assert config.constraint == ">=1.0, <2.0"
        assert config.strict is False

    def test_strict(self, strict_project: Path):
        """Test the strict flag."""
        assert CLIConfig.from_pyproject(strict_project).strict is True

    def test_defaults(self, bare_project: Path):
        """Test defaults when keys are missing."""
        config = CLIConfig.from_pyproject(bare_project)
        assert config.version == ""
        assert config.constraint == ""

    def test_missing_file(self, tmp_path: Path):
        """Test that a missing pyproject.toml raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            CLIConfig.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path):
        """Test that invalid TOML raises ConfigError."""
        (tmp_path / "pyproject.toml").write_text("[project\n")
        with pytest.raises(ConfigError):
            CLIConfig.from_pyproject(tmp_path)

    def test_wrong_types(self, tmp_path: Path):
        """Test that ill-typed settings raise ConfigError."""
        with pytest.raises(ConfigError):
            CLIConfig.from_pyproject_dict({"tool": {"nsemver": {"strict": "yes"}}}, tmp_path)
        with pytest.raises(ConfigError):
            CLIConfig.from_pyproject_dict({"tool": {"nsemver": {"constraint": 1}}}, tmp_path)


class TestFindProjectRoot:
    """Tests for find_project_root and load_config."""

    def test_walks_up(self, temp_project: Path):
        """Test finding the root from a nested directory."""
        nested = temp_project / "src" / "pkg"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == temp_project.resolve()

    def test_load_config(self, temp_project: Path):
        """Test loading from an explicit directory."""
        assert load_config(temp_project).version == "v1.4.2"

    def test_load_config_without_pyproject(self, tmp_path: Path):
        """Test that a directory without pyproject.toml gives defaults."""
        config = load_config(tmp_path)
        assert config.project_dir == tmp_path
        assert config.constraint == ""
