"""Core changelog model, parser and renderer.

This module contains the fundamental building blocks:
- Line grammar for Keep a Changelog Markdown
- SemVer 2 version parsing and precedence
- Changelog, Release and Changes model with mutators
- Two-pass parser and deterministic renderer
"""

from __future__ import annotations

from changelog_py.core.changelog import Changelog, new_changelog
from changelog_py.core.changes import Changes, Scope
from changelog_py.core.parser import ChangelogParser, parse_lines, parse_text
from changelog_py.core.release import Release, Releases
from changelog_py.core.render import render, render_changes, render_release
from changelog_py.core.version import Version, compare_versions

__all__ = [
    "Changelog",
    "ChangelogParser",
    "Changes",
    "Release",
    "Releases",
    "Scope",
    "Version",
    "compare_versions",
    "new_changelog",
    "parse_lines",
    "parse_text",
    "render",
    "render_changes",
    "render_release",
]
