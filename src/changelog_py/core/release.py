"""Releases and the sortable release collection.

A Release is either a versioned entry of the changelog or, when its
version is None, the "Unreleased" slot.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from changelog_py.core.changes import Changes, Scope
from changelog_py.core.grammar import (
    DATE_FORMAT,
    DATE_FORMAT_DISPLAY,
    DATE_PATTERN,
)
from changelog_py.core.version import Version
from changelog_py.exceptions import (
    DuplicateVersionError,
    InvalidDateError,
    InvalidURLError,
    InvalidVersionError,
)

_url_adapter: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def parse_date(value: str) -> datetime.date | None:
    """Strictly parse YYYY-MM-DD, returning None when malformed."""
    try:
        return datetime.datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def validate_date(value: str) -> datetime.date:
    """Validate and parse a release date.

    Raises:
        InvalidDateError: If the shape or the calendar date is invalid
    """
    if DATE_PATTERN.match(value) is None:
        raise InvalidDateError(
            f"invalid date {value}, expected to match regex {DATE_PATTERN.pattern}"
        )

    parsed = parse_date(value)
    if parsed is None:
        raise InvalidDateError(f"invalid date {value}, expected format {DATE_FORMAT_DISPLAY}")
    return parsed


def validate_version(value: str) -> str:
    """Validate a SemVer 2 version string.

    Raises:
        InvalidVersionError: If the string is not SemVer 2
    """
    Version.parse(value)
    return value


def validate_url(value: str) -> str:
    """Validate URL syntax. The original string is returned untouched.

    Raises:
        InvalidURLError: If the URL cannot be parsed
    """
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError as e:
        reason = e.errors()[0]["msg"] if e.errors() else str(e)
        raise InvalidURLError(f"invalid url {value}: {reason}") from e
    return value


@dataclass
class Release:
    """A single changelog version, or the Unreleased slot.

    Attributes:
        version: Semantic version; None for the Unreleased slot
        date: Release date; always None for the Unreleased slot
        yanked: Whether the release was retracted
        url: Link target rendered as a reference-style definition
        changes: Notice and categorized entries
    """

    version: str | None = None
    date: datetime.date | None = None
    yanked: bool = False
    url: str | None = None
    changes: Changes | None = None

    @property
    def is_unreleased(self) -> bool:
        return self.version is None

    @property
    def semver(self) -> Version | None:
        return Version.parse(self.version) if self.version is not None else None

    def set_version(self, version: str) -> None:
        self.version = validate_version(version)

    def set_date(self, value: str) -> None:
        """Set the release date. Expected format: YYYY-MM-DD."""
        self.date = validate_date(value)

    def set_url(self, link: str) -> None:
        self.url = validate_url(link)

    def add_notice(self, notice: str) -> None:
        """Set the notice; an empty notice on a release without changes is a no-op."""
        if self.changes is None:
            if not notice:
                return
            self.changes = Changes()
        self.changes.add_notice(notice)

    def add_change(self, scope: str | Scope, change: str) -> None:
        """Add a scoped change, creating the changeset on first use.

        An empty change is a no-op.

        Raises:
            UnknownScopeError: If the scope is not supported
        """
        resolved = Scope.parse(scope)
        if change == "":
            return

        if self.changes is None:
            self.changes = Changes()
        self.changes.add_change(resolved, change)


class Releases(list[Release]):
    """Versioned releases of a changelog.

    Ordered by SemVer precedence: less/swap compare and exchange by index,
    sort_descending() sorts in place for rendering order.
    """

    def less(self, i: int, j: int) -> bool:
        """Return True if release i has lower precedence than release j."""
        return _sort_key(self[i]) < _sort_key(self[j])

    def swap(self, i: int, j: int) -> None:
        self[i], self[j] = self[j], self[i]

    def sort_descending(self) -> None:
        self.sort(key=_sort_key, reverse=True)

    def sorted_descending(self) -> list[Release]:
        return sorted(self, key=_sort_key, reverse=True)

    def get_release(self, version: str) -> Release | None:
        """Return the release with the given version, or None."""
        for release in self:
            if release.version == version:
                return release
        return None

    def create_release(self, version: str, release_date: str) -> Release:
        """Append a new empty release.

        Raises:
            DuplicateVersionError: If the version already exists
            InvalidDateError: If the date is not YYYY-MM-DD
            InvalidVersionError: If the version is not SemVer 2
        """
        release = self._new_release(version, release_date)
        self.append(release)
        return release

    def create_release_with_url(self, version: str, release_date: str, url: str) -> Release:
        """Append a new empty release with a URL.

        All inputs are validated before anything is appended.
        """
        release = self._new_release(version, release_date)
        release.url = validate_url(url)
        self.append(release)
        return release

    def _new_release(self, version: str, release_date: str) -> Release:
        if self.get_release(version) is not None:
            raise DuplicateVersionError(version)

        parsed_date = validate_date(release_date)
        validate_version(version)

        return Release(version=version, date=parsed_date, changes=Changes())


def _sort_key(release: Release) -> Version:
    if release.version is None:
        raise InvalidVersionError("cannot order a release without a version")
    return Version.parse(release.version)
