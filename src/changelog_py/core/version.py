"""Semantic Version 2.0.0 value type.

Only what the changelog needs: parsing, formatting, and precedence
comparison. Build metadata is kept for display but ignored when
comparing, as SemVer 2 requires.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import total_ordering

from changelog_py.core.grammar import SEMVER_PATTERN
from changelog_py.exceptions import InvalidVersionError


@total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A SemVer 2 version.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Dot-separated pre-release identifiers
        build: Dot-separated build metadata identifiers
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = field(default_factory=tuple)
    build: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, value: str) -> Version:
        """Parse a version string such as "1.2.3-rc.1+build.5".

        Raises:
            InvalidVersionError: If the string is not SemVer 2
        """
        match = SEMVER_PATTERN.match(value)
        if match is None:
            raise InvalidVersionError(
                f"invalid semantic version {value}, "
                f"expected to match regex {SEMVER_PATTERN.pattern}"
            )

        prerelease = match.group("prerelease")
        build = match.group("build")
        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            prerelease=tuple(prerelease.split(".")) if prerelease else (),
            build=tuple(build.split(".")) if build else (),
        )

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return SEMVER_PATTERN.match(value) is not None

    @property
    def is_prerelease(self) -> bool:
        return bool(self.prerelease)

    def _precedence_key(self) -> tuple:
        # A release ranks above any of its pre-releases. Numeric identifiers
        # rank below alphanumeric ones; a shorter identifier list ranks lower.
        identifiers = tuple(
            (0, int(part), "") if part.isdigit() else (1, 0, part) for part in self.prerelease
        )
        return (self.major, self.minor, self.patch, not self.prerelease, identifiers)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence_key() == other._precedence_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._precedence_key() < other._precedence_key()

    def __hash__(self) -> int:
        return hash(self._precedence_key())

    def __str__(self) -> str:
        result = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            result += "-" + ".".join(self.prerelease)
        if self.build:
            result += "+" + ".".join(self.build)
        return result


def compare_versions(a: str, b: str) -> int:
    """Compare two version strings by SemVer precedence.

    Returns:
        -1 if a < b, 0 if equal in precedence, 1 if a > b
    """
    va = Version.parse(a)
    vb = Version.parse(b)
    if va < vb:
        return -1
    if va > vb:
        return 1
    return 0
