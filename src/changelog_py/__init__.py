"""Parse, edit and render "Keep a Changelog" Markdown files."""

from __future__ import annotations

import logging

from changelog_py.core import (
    Changelog,
    ChangelogParser,
    Changes,
    Release,
    Releases,
    Scope,
    Version,
    new_changelog,
    parse_lines,
    parse_text,
    render,
)
from changelog_py.files import Parser, load_changelog, save_changelog
from changelog_py.fs import Filesystem, MemoryFilesystem, OsFilesystem

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Changelog",
    "ChangelogParser",
    "Changes",
    "Filesystem",
    "MemoryFilesystem",
    "OsFilesystem",
    "Parser",
    "Release",
    "Releases",
    "Scope",
    "Version",
    "__version__",
    "load_changelog",
    "new_changelog",
    "parse_lines",
    "parse_text",
    "render",
    "save_changelog",
]
