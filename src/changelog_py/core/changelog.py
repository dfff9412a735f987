"""The changelog document and its mutators.

A Changelog owns an optional title and description, an optional
Unreleased slot, and the collection of versioned releases. Every
mutator validates its input completely before touching the document,
so a raised error leaves it unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from changelog_py.core.changes import Scope
from changelog_py.core.release import Release, Releases, validate_url
from changelog_py.exceptions import MissingUnreleasedError

if TYPE_CHECKING:
    from changelog_py.fs import Filesystem


@dataclass
class Changelog:
    """Content of a complete changelog file.

    Attributes:
        title: Single-word title from the "# <title>" line
        description: Free-form text between the title and the first release
        unreleased: The Unreleased slot, if present
        releases: Versioned releases
    """

    title: str | None = None
    description: str | None = None
    unreleased: Release | None = None
    releases: Releases = field(default_factory=Releases)

    def __post_init__(self) -> None:
        if not isinstance(self.releases, Releases):
            self.releases = Releases(self.releases)

    def set_title(self, title: str) -> None:
        self.title = title or None

    def set_description(self, description: str) -> None:
        self.description = description or None

    def set_unreleased_url(self, link: str) -> None:
        """Set the URL of the Unreleased section, creating it if absent.

        Raises:
            InvalidURLError: If the URL cannot be parsed
        """
        validate_url(link)
        if self.unreleased is None:
            self.unreleased = Release(url=link)
        else:
            self.unreleased.url = link

    def add_unreleased_change(self, scope: str | Scope, change: str) -> None:
        """Add a scoped change to the Unreleased section.

        Supported scopes: added, changed, deprecated, removed, fixed, security.
        An empty change is a no-op.

        Raises:
            UnknownScopeError: If the scope is not supported
        """
        resolved = Scope.parse(scope)
        if change == "":
            return

        if self.unreleased is None:
            self.unreleased = Release()
        self.unreleased.add_change(resolved, change)

    def get_release(self, version: str) -> Release | None:
        return self.releases.get_release(version)

    def create_release(self, version: str, date: str) -> Release:
        """Create a new empty release.

        Raises:
            DuplicateVersionError: If the version already exists
            InvalidDateError: If the date is not YYYY-MM-DD
            InvalidVersionError: If the version is not SemVer 2
        """
        return self.releases.create_release(version, date)

    def create_release_with_url(self, version: str, date: str, url: str) -> Release:
        """Identical to create_release, plus a URL for the release."""
        return self.releases.create_release_with_url(version, date, url)

    def create_release_from_unreleased(self, version: str, date: str) -> Release:
        """Create a release holding all changes from the Unreleased section.

        The changeset is moved, not copied, and the Unreleased section is
        left without changes.

        Raises:
            MissingUnreleasedError: If the Unreleased section has no changes
            DuplicateVersionError: If the version already exists
            InvalidSyntaxError: If the version or date is malformed
        """
        return self._promote(version, date, None)

    def create_release_from_unreleased_with_url(self, version: str, date: str, url: str) -> Release:
        """Identical to create_release_from_unreleased, plus a URL for the release."""
        return self._promote(version, date, url)

    def promote_unreleased(self, version: str, date: str, url: str | None = None) -> Release:
        return self._promote(version, date, url)

    def _promote(self, version: str, date: str, url: str | None) -> Release:
        if self.unreleased is None or self.unreleased.changes is None:
            raise MissingUnreleasedError()

        if url is None:
            release = self.releases.create_release(version, date)
        else:
            release = self.releases.create_release_with_url(version, date, url)

        release.changes = self.unreleased.changes
        self.unreleased.changes = None
        return release

    def render(self) -> str:
        """Return the Markdown representation of the changelog."""
        from changelog_py.core.render import render

        return render(self)

    def save_to_file(self, filesystem: Filesystem, filepath: str) -> None:
        """Render the changelog and write it through the given filesystem.

        Raises:
            ChangelogIOError: If creating, writing or committing the file fails
        """
        from changelog_py.files import write_text

        write_text(filesystem, filepath, self.render())

    def __str__(self) -> str:
        return self.render()


def new_changelog() -> Changelog:
    """Return an empty changelog."""
    return Changelog()
