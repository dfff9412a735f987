"""Deterministic Markdown rendering of a Changelog.

Layout: title, description, Unreleased, versioned releases by descending
SemVer precedence, then one reference-style link definition per release
that has a URL, in the same order. Categories are always emitted in the
canonical order of Scope.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from changelog_py.core.grammar import DATE_FORMAT

if TYPE_CHECKING:
    from changelog_py.core.changelog import Changelog
    from changelog_py.core.changes import Changes
    from changelog_py.core.release import Release


def render(changelog: Changelog) -> str:
    """Render a changelog to Markdown.

    Blocks are separated by a single blank line. The result does not end
    with a newline after the last link definition; callers persisting it
    may add one.

    Args:
        changelog: Changelog to render

    Returns:
        Markdown text
    """
    blocks: list[str] = []
    definitions: list[str] = []

    if changelog.title is not None:
        blocks.append(f"# {changelog.title}\n")

    if changelog.description is not None:
        blocks.append(f"{changelog.description}\n")

    releases: list[Release] = []
    if changelog.unreleased is not None:
        releases.append(changelog.unreleased)
    releases.extend(changelog.releases.sorted_descending())

    for release in releases:
        text, definition = render_release(release)
        blocks.append(text)
        if definition is not None:
            definitions.append(definition)

    blocks.extend(definitions)
    return "\n".join(blocks)


def render_release(release: Release) -> tuple[str, str | None]:
    """Render one release block and its link definition.

    A versioned release without a date renders as "## [x.y.z]". The header
    grammar requires a date, so such a block is not read back as a release.

    Returns:
        Tuple of (block text ending in a newline, link definition or None)
    """
    if release.version is None:
        header = "## [Unreleased]"
        label = "Unreleased"
    else:
        header = f"## [{release.version}]"
        if release.date is not None:
            header += f" - {release.date.strftime(DATE_FORMAT)}"
        if release.yanked:
            header += " [YANKED]"
        label = release.version

    text = header + "\n"
    if release.changes is not None and not release.changes.is_empty():
        text += "\n" + render_changes(release.changes)

    definition = f"[{label}]: {release.url}" if release.url is not None else None
    return text, definition


def render_changes(changes: Changes) -> str:
    """Render the notice and categories of a changeset.

    Each category is a "### <Category>" header, a blank line, one bullet
    per entry (embedded newlines kept verbatim), and a blank line between
    categories.
    """
    lines: list[str] = []

    if changes.notice is not None:
        lines.extend([changes.notice, ""])

    for scope, entries in changes.items():
        lines.extend([f"### {scope.heading}", ""])
        lines.extend(f"- {entry}" for entry in entries)
        lines.append("")

    # Drop the separator after the last section; the block ends in one newline
    while lines and lines[-1] == "":
        lines.pop()
    return "\n".join(lines) + "\n"
