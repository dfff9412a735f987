"""Exception hierarchy for changelog-py.

All errors raised by the library derive from ChangelogPyError, so callers
can catch a single base class. Parsing never raises for malformed lines;
only mutators and I/O helpers do.
"""

from __future__ import annotations


class ChangelogPyError(Exception):
    """Base exception for all changelog-py errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Syntax errors (mutators only)


class InvalidSyntaxError(ChangelogPyError):
    """A value passed to a mutator does not have the expected shape."""


class InvalidVersionError(InvalidSyntaxError):
    """Version string is not a valid Semantic Version 2.0.0."""


class InvalidDateError(InvalidSyntaxError):
    """Date string is not a valid YYYY-MM-DD calendar date."""


class InvalidURLError(InvalidSyntaxError):
    """URL string could not be parsed."""


# State errors


class DuplicateVersionError(ChangelogPyError):
    """A release with the same version already exists."""

    def __init__(self, version: str) -> None:
        self.version = version
        super().__init__(f"version {version} already exists")


class MissingUnreleasedError(ChangelogPyError):
    """The Unreleased section is required but has no changes."""

    def __init__(self) -> None:
        super().__init__("missing 'Unreleased' section")


class UnknownScopeError(ChangelogPyError):
    """Change category is not one of the supported scopes."""

    def __init__(self, scope: str, supported: list[str]) -> None:
        self.scope = scope
        self.supported = supported
        super().__init__(f"unexpected scope: {scope} (supported: [{','.join(supported)}])")


# I/O errors


class ChangelogIOError(ChangelogPyError):
    """Reading or writing a changelog file failed."""

    def __init__(self, action: str, reason: object) -> None:
        self.action = action
        self.reason = reason
        super().__init__(f"{action}: {reason}")


class ChangelogNotFoundError(ChangelogIOError):
    """The changelog file does not exist."""

    def __init__(self, path: object, reason: object) -> None:
        self.path = path
        super().__init__(f"file {path} not found", reason)


# Configuration errors


class ConfigError(ChangelogPyError):
    """Base class for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """No pyproject.toml could be located."""


class ConfigValidationError(ConfigError):
    """Configuration file or values are invalid."""
