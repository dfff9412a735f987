"""Shared pytest fixtures for changelog-py tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from changelog_py.fs import MemoryFilesystem

if TYPE_CHECKING:
    from pathlib import Path


FULL_CHANGELOG = """\
# Changelog

All notable changes to this project will be documented in this file.

## [Unreleased]

### Added
- Feature in progress

## [0.0.2] - 2021-05-22 [YANKED]

Notice

### Added
- Change 1
- Change 2

### Fixed
- Change 3

## [0.0.1] - 2021-05-19
### Security
- Change 4

[Unreleased]: https://github.com/example/project/compare/v0.0.2...HEAD
[0.0.2]: https://github.com/example/project/compare/v0.0.1...v0.0.2
[0.0.1]: https://github.com/example/project/releases/tag/v0.0.1"""


@pytest.fixture
def full_changelog_text() -> str:
    """A changelog exercising title, description, unreleased and releases."""
    return FULL_CHANGELOG


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    """An empty in-memory filesystem."""
    return MemoryFilesystem()


@pytest.fixture
def temp_project_with_pyproject(tmp_path: Path) -> Path:
    """A project directory with a pyproject.toml and a changelog."""
    (tmp_path / "pyproject.toml").write_text(
        """\
[project]
name = "test-project"
version = "1.0.0"

[tool.changelog-py]
path = "docs/CHANGES.md"
"""
    )
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "CHANGES.md").write_text(FULL_CHANGELOG + "\n")
    return tmp_path
