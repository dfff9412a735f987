"""Line-shape recognizers for "Keep a Changelog" Markdown.

Every structural line the parser understands is described here, each
pattern anchored to a full line. The bare fragments (SEMVER, DATE, URL)
are reused by the mutators for input validation.
"""

from __future__ import annotations

import re

DATE_FORMAT = "%Y-%m-%d"
DATE_FORMAT_DISPLAY = "YYYY-MM-DD"

# Fragments

SEMVER = (
    r"(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)\.(?:0|[1-9]\d*)"
    r"(?:-(?:(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?:[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)
DATE = r"[0-9]{4}-[0-9]{2}-[0-9]{2}"
# Permissive: optional scheme, a host, then anything but whitespace and parens
URL = (
    r"(?:[a-zA-Z][a-zA-Z0-9+.\-]*://)?"
    r"[\w\-]+(?:\.[\w\-]+)*(?::\d+)?"
    r"(?:[/?#][^\s()<>]*)?"
)

SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)\.(?P<minor>0|[1-9]\d*)\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$"
)
DATE_PATTERN = re.compile(rf"^{DATE}$")

# Document structure

BLANK = re.compile(r"^\s*$")
TITLE = re.compile(r"^#\s*(?P<title>\S+)\s*$")

UNRELEASED_HEADER = re.compile(r"^## \[Unreleased\]$")
UNRELEASED_HEADER_INLINE = re.compile(rf"^## \[Unreleased\]\((?P<url>{URL})\)$")

VERSION_HEADER = re.compile(
    rf"^## \[(?P<version>{SEMVER})\] - (?P<date>{DATE})(?P<yanked> \[YANKED\])?$"
)
VERSION_HEADER_INLINE = re.compile(
    rf"^## \[(?P<version>{SEMVER})\]\((?P<url>{URL})\) - (?P<date>{DATE})(?P<yanked> \[YANKED\])?$"
)

UNRELEASED_LINK_DEF = re.compile(rf"^\[Unreleased\]: (?P<url>{URL})$")
VERSION_LINK_DEF = re.compile(rf"^\[(?P<version>{SEMVER})\]: (?P<url>{URL})$")

# Changes

ADDED_HEADER = re.compile(r"^### Added$")
CHANGED_HEADER = re.compile(r"^### Changed$")
DEPRECATED_HEADER = re.compile(r"^### Deprecated$")
REMOVED_HEADER = re.compile(r"^### Removed$")
FIXED_HEADER = re.compile(r"^### Fixed$")
SECURITY_HEADER = re.compile(r"^### Security$")

ENTRY = re.compile(r"^[-*+]\s*(?P<entry>.*)$")


def is_blank(line: str) -> bool:
    """Return True if the line holds only whitespace."""
    return BLANK.match(line) is not None


def trim_blank_lines(lines: list[str]) -> list[str]:
    """Drop leading and trailing blank lines, keeping inner ones."""
    start = 0
    end = len(lines)
    while start < end and is_blank(lines[start]):
        start += 1
    while end > start and is_blank(lines[end - 1]):
        end -= 1
    return lines[start:end]
