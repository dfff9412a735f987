"""Two-pass line-oriented changelog parser.

Pass 1 walks the buffer once and records the index of every structural
line ("margin"): the title, release headers, link definitions and
category headers. Pass 2 uses those indices to slice out the title,
description, releases and their changes.

Lines that match nothing are never an error: they end up in the
description, a notice, or an entry continuation depending on where
they sit, or are dropped.
"""

from __future__ import annotations

import io
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field

from changelog_py.core import grammar
from changelog_py.core.changelog import Changelog
from changelog_py.core.changes import Changes, Scope
from changelog_py.core.release import Release, Releases, parse_date

logger = logging.getLogger(__name__)

SCOPE_HEADERS: dict[Scope, re.Pattern[str]] = {
    Scope.ADDED: grammar.ADDED_HEADER,
    Scope.CHANGED: grammar.CHANGED_HEADER,
    Scope.DEPRECATED: grammar.DEPRECATED_HEADER,
    Scope.REMOVED: grammar.REMOVED_HEADER,
    Scope.FIXED: grammar.FIXED_HEADER,
    Scope.SECURITY: grammar.SECURITY_HEADER,
}


@dataclass
class Margins:
    """Indices of structural lines found in pass 1."""

    lines: list[int] = field(default_factory=list)
    title: int | None = None
    unreleased: int | None = None
    releases: list[int] = field(default_factory=list)
    links: list[int] = field(default_factory=list)
    scopes: dict[Scope, list[int]] = field(default_factory=lambda: {s: [] for s in Scope})

    def next_after(self, index: int) -> int | None:
        """Return the first margin line after index, if any."""
        for n in self.lines:
            if n > index:
                return n
        return None

    def boundaries(self) -> list[int]:
        """Lines that terminate a release: title, headers and link definitions."""
        result = list(self.releases) + list(self.links)
        if self.title is not None:
            result.append(self.title)
        if self.unreleased is not None:
            result.append(self.unreleased)
        return sorted(result)


class ChangelogParser:
    """Parse a buffer of lines into a Changelog.

    A parser instance holds the buffer and its margins for the duration of
    one parse; call parse() to get a fresh Changelog.
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self.buffer: list[str] = list(lines)
        self.margins = Margins()

    def parse(self) -> Changelog:
        self.margins = self._identify_margins()
        logger.debug(
            "Identified %d margins in %d lines (%d releases)",
            len(self.margins.lines),
            len(self.buffer),
            len(self.margins.releases),
        )

        changelog = Changelog(
            title=self._parse_title(),
            description=self._parse_description(),
            unreleased=self._parse_unreleased(),
            releases=self._parse_releases(),
        )
        return changelog

    # Pass 1

    def _identify_margins(self) -> Margins:
        margins = Margins()

        for i, line in enumerate(self.buffer):
            if grammar.TITLE.match(line):
                # Only the first title counts
                if margins.title is None:
                    margins.title = i
            elif grammar.UNRELEASED_HEADER.match(line) or grammar.UNRELEASED_HEADER_INLINE.match(
                line
            ):
                if margins.unreleased is None:
                    margins.unreleased = i
            elif grammar.VERSION_HEADER.match(line) or grammar.VERSION_HEADER_INLINE.match(line):
                margins.releases.append(i)
            elif grammar.UNRELEASED_LINK_DEF.match(line) or grammar.VERSION_LINK_DEF.match(line):
                margins.links.append(i)
            else:
                scope = _match_scope_header(line)
                if scope is None:
                    continue
                margins.scopes[scope].append(i)

            margins.lines.append(i)

        return margins

    # Pass 2

    def _parse_title(self) -> str | None:
        if self.margins.title is None:
            return None

        match = grammar.TITLE.match(self.buffer[self.margins.title])
        return match.group("title") if match else None

    def _parse_description(self) -> str | None:
        margins = self.margins

        if margins.title is not None:
            start = margins.title + 1
            end = margins.next_after(margins.title)
            block = self.buffer[start : len(self.buffer) if end is None else end]
        elif margins.lines:
            first = margins.lines[0]
            if first == 0:
                return None
            # The line right before the first margin is its separator
            block = self.buffer[0 : first - 1]
        else:
            block = self.buffer

        return _join(block)

    def _parse_unreleased(self) -> Release | None:
        header = self.margins.unreleased
        if header is None:
            return None

        release = Release()
        inline = grammar.UNRELEASED_HEADER_INLINE.match(self.buffer[header])
        if inline:
            release.url = inline.group("url")
        else:
            release.url = self._find_link_url(None)

        release.changes = self._parse_release_changes(header)
        return release

    def _parse_releases(self) -> Releases:
        releases = Releases()

        for header in self.margins.releases:
            line = self.buffer[header]
            match = grammar.VERSION_HEADER_INLINE.match(line) or grammar.VERSION_HEADER.match(line)
            if match is None:
                continue

            version = match.group("version")
            release = Release(
                version=version,
                date=parse_date(match.group("date")),
                yanked=match.group("yanked") is not None,
            )

            if "url" in match.groupdict():
                release.url = match.group("url")
            else:
                release.url = self._find_link_url(version)

            release.changes = self._parse_release_changes(header)
            releases.append(release)

        logger.debug("Parsed %d releases", len(releases))
        return releases

    def _find_link_url(self, version: str | None) -> str | None:
        """Look up a "[<version>]: <url>" definition; None means Unreleased."""
        for n in self.margins.links:
            line = self.buffer[n]
            if version is None:
                match = grammar.UNRELEASED_LINK_DEF.match(line)
                if match:
                    return match.group("url")
            else:
                match = grammar.VERSION_LINK_DEF.match(line)
                if match and match.group("version") == version:
                    return match.group("url")
        return None

    def _release_end_line(self, header: int) -> int:
        for n in self.margins.boundaries():
            if n > header:
                return n - 1
        return len(self.buffer) - 1

    def _parse_release_changes(self, header: int) -> Changes | None:
        end = self._release_end_line(header)
        if end <= header:
            return None
        return self._parse_changes(header, end)

    def _parse_changes(self, header: int, end: int) -> Changes | None:
        """Extract notice and scoped entries from lines (header, end]."""
        scope_starts: dict[Scope, int] = {}
        for scope in Scope:
            candidates = [n for n in self.margins.scopes[scope] if header < n <= end]
            # Ambiguous duplicates are dropped rather than guessed at
            if len(candidates) == 1:
                scope_starts[scope] = candidates[0]

        starts = sorted(scope_starts.values())
        changes = Changes()

        notice_end = starts[0] if starts else end + 1
        changes.notice = _join(self.buffer[header + 1 : notice_end])

        for scope, start in scope_starts.items():
            later = [n for n in starts if n > start]
            scope_end = later[0] - 1 if later else end
            entries = self._parse_entries(start, scope_end)
            changes.set_entries(scope, entries)

        if changes.is_empty():
            return None
        return changes

    def _parse_entries(self, header: int, end: int) -> list[str]:
        """Collect bullet entries from lines (header, end], keeping continuations."""
        entries: list[str] = []
        current: list[str] | None = None

        for line in self.buffer[header + 1 : end + 1]:
            match = grammar.ENTRY.match(line)
            if match:
                if current is not None:
                    entries.append("\n".join(grammar.trim_blank_lines(current)))
                current = [match.group("entry")]
            elif current is not None:
                current.append(line)

        if current is not None:
            entries.append("\n".join(grammar.trim_blank_lines(current)))

        return entries


def _match_scope_header(line: str) -> Scope | None:
    for scope, pattern in SCOPE_HEADERS.items():
        if pattern.match(line):
            return scope
    return None


def _join(lines: list[str]) -> str | None:
    text = "\n".join(grammar.trim_blank_lines(lines))
    return text or None


def parse_lines(lines: Iterable[str]) -> Changelog:
    """Parse a sequence of lines (without line terminators)."""
    return ChangelogParser(lines).parse()


def parse_text(text: str) -> Changelog:
    """Parse Markdown text.

    Lines break on LF, CRLF or CR only; other separators such as form feeds
    stay inside their line. A trailing newline does not add an empty line.
    """
    return parse_lines(line.removesuffix("\n") for line in io.StringIO(text, newline=None))
