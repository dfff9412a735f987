"""Categorized changes of a single release.

A changeset holds an optional free-form notice and up to six ordered
lists of entries, one per Keep a Changelog category.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum

from changelog_py.exceptions import UnknownScopeError


class Scope(StrEnum):
    """Change categories, in canonical rendering order."""

    ADDED = "added"
    CHANGED = "changed"
    DEPRECATED = "deprecated"
    REMOVED = "removed"
    FIXED = "fixed"
    SECURITY = "security"

    @classmethod
    def parse(cls, value: str | Scope) -> Scope:
        """Resolve a scope name case-insensitively.

        Raises:
            UnknownScopeError: If the name is not one of the six categories
        """
        if isinstance(value, Scope):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            raise UnknownScopeError(value, [s.value for s in cls]) from None

    @property
    def heading(self) -> str:
        """Heading text, e.g. "Added"."""
        return self.value.capitalize()


@dataclass
class Changes:
    """Notice and scoped entries of a release.

    A category that has no entries is None, never an empty list.
    """

    notice: str | None = None
    added: list[str] | None = None
    changed: list[str] | None = None
    deprecated: list[str] | None = None
    removed: list[str] | None = None
    fixed: list[str] | None = None
    security: list[str] | None = None

    def add_notice(self, notice: str) -> None:
        """Replace the notice; an empty string clears it."""
        self.notice = notice or None

    def add_change(self, scope: str | Scope, change: str) -> None:
        """Append an entry under a scope.

        Supported scopes: added, changed, deprecated, removed, fixed, security
        (case-insensitive). An empty change is ignored.

        Raises:
            UnknownScopeError: If the scope is not supported
        """
        resolved = Scope.parse(scope)
        if change == "":
            return

        entries = getattr(self, resolved.value)
        if entries is None:
            setattr(self, resolved.value, [change])
        else:
            entries.append(change)

    def get(self, scope: str | Scope) -> list[str] | None:
        return getattr(self, Scope.parse(scope).value)

    def set_entries(self, scope: str | Scope, entries: list[str] | None) -> None:
        setattr(self, Scope.parse(scope).value, entries or None)

    def items(self) -> Iterator[tuple[Scope, list[str]]]:
        """Yield present categories in canonical order."""
        for scope in Scope:
            entries = getattr(self, scope.value)
            if entries:
                yield scope, entries

    def is_empty(self) -> bool:
        return self.notice is None and not any(True for _ in self.items())

