"""Tests for Release and Releases."""

from __future__ import annotations

from datetime import date

import pytest

from changelog_py.core.changes import Changes
from changelog_py.core.release import Release, Releases
from changelog_py.core.version import Version
from changelog_py.exceptions import (
    DuplicateVersionError,
    InvalidDateError,
    InvalidURLError,
    InvalidVersionError,
    UnknownScopeError,
)


class TestReleaseSetters:
    """Tests for Release.set_version/set_date/set_url."""

    def test_set_version(self):
        """Valid SemVer is stored."""
        release = Release()
        release.set_version("1.0.0-rc.1")

        assert release.version == "1.0.0-rc.1"
        assert release.semver == Version(1, 0, 0, ("rc", "1"))

    def test_set_version_invalid(self):
        """Invalid version leaves the release unchanged."""
        release = Release(version="0.0.1")

        with pytest.raises(InvalidVersionError, match="invalid semantic version 1.0"):
            release.set_version("1.0")

        assert release.version == "0.0.1"

    def test_set_version_message_matches_parse(self):
        """Setter and Version.parse report the same error."""
        with pytest.raises(InvalidVersionError) as parse_error:
            Version.parse("v1.0.0")
        with pytest.raises(InvalidVersionError) as set_error:
            Release().set_version("v1.0.0")

        assert str(set_error.value) == str(parse_error.value)
        assert str(set_error.value).startswith(
            "invalid semantic version v1.0.0, expected to match regex "
        )

    def test_set_date(self):
        """Valid date is parsed."""
        release = Release(version="0.0.1")
        release.set_date("2021-05-19")

        assert release.date == date(2021, 5, 19)

    def test_set_date_bad_shape(self):
        """Date not matching the regex names the regex."""
        release = Release(version="0.0.1")

        with pytest.raises(InvalidDateError, match="expected to match regex"):
            release.set_date("19.05.2021")

        assert release.date is None

    def test_set_date_bad_calendar(self):
        """Date with the right shape but impossible value names the format."""
        release = Release(version="0.0.1")

        with pytest.raises(InvalidDateError, match="expected format YYYY-MM-DD"):
            release.set_date("2021-13-45")

    def test_set_url(self):
        """URL is stored verbatim."""
        release = Release()
        release.set_url("https://github.com/o/r/compare/v0.0.1...HEAD")

        assert release.url == "https://github.com/o/r/compare/v0.0.1...HEAD"

    def test_set_url_invalid(self):
        """Unparseable URL raises and leaves the release unchanged."""
        release = Release(url="https://example.com")

        with pytest.raises(InvalidURLError, match="invalid url not a url"):
            release.set_url("not a url")

        assert release.url == "https://example.com"


class TestReleaseChanges:
    """Tests for Release.add_notice/add_change."""

    def test_add_change_creates_changeset(self):
        """A release without changes gets a changeset on first change."""
        release = Release(version="0.0.1")
        release.add_change("Added", "A")

        assert release.changes == Changes(added=["A"])

    def test_add_change_unknown_scope(self):
        """Unknown scope raises without creating a changeset."""
        release = Release(version="0.0.1")

        with pytest.raises(UnknownScopeError):
            release.add_change("other", "A")

        assert release.changes is None

    def test_add_notice(self):
        """Notice is stored on the changeset."""
        release = Release(version="0.0.1")
        release.add_notice("Important")

        assert release.changes is not None
        assert release.changes.notice == "Important"

    def test_empty_change_creates_nothing(self):
        """An empty change leaves a release without changes untouched."""
        release = Release(version="0.0.1")
        release.add_change("added", "")

        assert release.changes is None

    def test_empty_notice_creates_nothing(self):
        """An empty notice leaves a release without changes untouched."""
        release = Release(version="0.0.1")
        release.add_notice("")

        assert release.changes is None

    def test_empty_notice_clears_existing(self):
        """An empty notice clears the notice of an existing changeset."""
        release = Release(version="0.0.1", changes=Changes(notice="Old", added=["A"]))
        release.add_notice("")

        assert release.changes == Changes(added=["A"])

    def test_is_unreleased(self):
        """A release without version is the Unreleased slot."""
        assert Release().is_unreleased
        assert not Release(version="0.0.1").is_unreleased


class TestReleasesSorting:
    """Tests for Releases.less/swap/sort_descending."""

    def test_less_and_swap(self):
        """less() compares by SemVer precedence; swap() exchanges."""
        releases = Releases([Release(version="0.10.0"), Release(version="0.9.0")])

        assert not releases.less(0, 1)
        assert releases.less(1, 0)

        releases.swap(0, 1)
        assert [r.version for r in releases] == ["0.9.0", "0.10.0"]

    def test_sort_descending(self):
        """Releases sort newest first, pre-releases below their release."""
        releases = Releases(
            [
                Release(version="1.0.0-rc.1"),
                Release(version="0.0.1"),
                Release(version="1.0.0"),
                Release(version="0.2.0"),
            ]
        )
        releases.sort_descending()

        assert [r.version for r in releases] == ["1.0.0", "1.0.0-rc.1", "0.2.0", "0.0.1"]

    def test_sorted_descending_does_not_mutate(self):
        """sorted_descending() returns a new list."""
        releases = Releases([Release(version="0.0.1"), Release(version="0.0.2")])
        result = releases.sorted_descending()

        assert [r.version for r in result] == ["0.0.2", "0.0.1"]
        assert [r.version for r in releases] == ["0.0.1", "0.0.2"]


class TestReleasesCreate:
    """Tests for Releases.create_release and friends."""

    def test_get_release(self):
        """Lookup by version."""
        target = Release(version="0.0.2")
        releases = Releases([Release(version="0.0.1"), target])

        assert releases.get_release("0.0.2") is target
        assert releases.get_release("9.9.9") is None

    def test_create_release(self):
        """Creating appends an empty release."""
        releases = Releases()
        release = releases.create_release("0.0.1", "2021-05-19")

        assert releases == [release]
        assert release.version == "0.0.1"
        assert release.date == date(2021, 5, 19)
        assert release.changes == Changes()
        assert release.url is None

    def test_create_duplicate(self):
        """Duplicate versions are rejected."""
        releases = Releases()
        releases.create_release("0.0.1", "2021-05-19")

        with pytest.raises(DuplicateVersionError, match="version 0.0.1 already exists"):
            releases.create_release("0.0.1", "2021-05-20")

        assert len(releases) == 1

    def test_create_invalid_date(self):
        """Invalid date is rejected before appending."""
        releases = Releases()

        with pytest.raises(InvalidDateError):
            releases.create_release("0.0.1", "yesterday")

        assert len(releases) == 0

    def test_create_invalid_version(self):
        """Invalid version is rejected before appending."""
        releases = Releases()

        with pytest.raises(InvalidVersionError):
            releases.create_release("one", "2021-05-19")

        assert len(releases) == 0

    def test_create_with_url(self):
        """URL is set on the new release."""
        releases = Releases()
        release = releases.create_release_with_url(
            "0.0.1", "2021-05-19", "https://example.com/v0.0.1"
        )

        assert release.url == "https://example.com/v0.0.1"
        assert releases == [release]

    def test_create_with_invalid_url_is_atomic(self):
        """A bad URL leaves the collection untouched."""
        releases = Releases()

        with pytest.raises(InvalidURLError):
            releases.create_release_with_url("0.0.1", "2021-05-19", "::not a url::")

        assert len(releases) == 0
        assert releases.get_release("0.0.1") is None
