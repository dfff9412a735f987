"""Reading and writing changelog files.

Glue between a Filesystem backend, the parser and the renderer. All OS
errors are wrapped in ChangelogIOError with a message naming the step
that failed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from changelog_py.core.parser import parse_text
from changelog_py.exceptions import ChangelogIOError, ChangelogNotFoundError
from changelog_py.fs import OsFilesystem

if TYPE_CHECKING:
    from changelog_py.config.models import ChangelogConfig
    from changelog_py.core.changelog import Changelog
    from changelog_py.fs import Filesystem

logger = logging.getLogger(__name__)


class Parser:
    """A changelog parser bound to a file on a filesystem.

    Args:
        filepath: Path of the changelog file
        filesystem: Backend to read from; defaults to the OS filesystem
        encoding: Encoding of the file content

    Raises:
        ChangelogNotFoundError: If the file does not exist
    """

    def __init__(
        self,
        filepath: str | Path,
        filesystem: Filesystem | None = None,
        encoding: str = "utf-8",
    ) -> None:
        self.filepath = filepath
        self.filesystem = filesystem if filesystem is not None else OsFilesystem()
        self.encoding = encoding

        try:
            self.filesystem.stat(filepath)
        except FileNotFoundError as e:
            raise ChangelogNotFoundError(filepath, e) from e

    def parse(self) -> Changelog:
        """Read the file and parse it.

        Raises:
            ChangelogIOError: If the file cannot be read
        """
        try:
            text = read_text(self.filesystem, self.filepath, self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ChangelogIOError("error loading a buffer", e) from e

        return parse_text(text)


def read_text(filesystem: Filesystem, filepath: str | Path, encoding: str = "utf-8") -> str:
    with filesystem.open(filepath) as handle:
        data = handle.read()
    logger.debug("Read %d bytes from %s", len(data), filepath)
    return data.decode(encoding)


def write_text(
    filesystem: Filesystem,
    filepath: str | Path,
    content: str,
    encoding: str = "utf-8",
) -> None:
    """Write content to a file and commit it to storage.

    Content is encoded before the file is created, so an encoding failure
    leaves an existing file untouched.

    Raises:
        ChangelogIOError: If encoding, creating, writing or committing fails
    """
    try:
        data = content.encode(encoding)
    except UnicodeEncodeError as e:
        raise ChangelogIOError("error writing to file", e) from e

    try:
        handle = filesystem.create(filepath)
    except OSError as e:
        raise ChangelogIOError("error creating a file", e) from e

    with handle:
        try:
            handle.write(data)
        except OSError as e:
            raise ChangelogIOError("error writing to file", e) from e

        try:
            handle.commit()
        except OSError as e:
            raise ChangelogIOError("error committing file content to disk", e) from e

    logger.debug("Wrote %d characters to %s", len(content), filepath)


def load_changelog(
    path: str | Path | None = None,
    *,
    filesystem: Filesystem | None = None,
    config: ChangelogConfig | None = None,
) -> Changelog:
    """Load and parse a changelog file.

    Args:
        path: Changelog path; defaults to the configured path
        filesystem: Backend to read from; defaults to the OS filesystem
        config: Configuration; loaded from pyproject.toml when omitted

    Returns:
        Parsed changelog

    Raises:
        ChangelogNotFoundError: If the file does not exist
        ChangelogIOError: If the file cannot be read
    """
    config = config if config is not None else _default_config()
    filepath = path if path is not None else config.path

    return Parser(filepath, filesystem, encoding=config.encoding).parse()


def save_changelog(
    changelog: Changelog,
    path: str | Path | None = None,
    *,
    filesystem: Filesystem | None = None,
    config: ChangelogConfig | None = None,
) -> Path:
    """Render a changelog and write it to a file.

    Returns:
        Path that was written

    Raises:
        ChangelogIOError: If the file cannot be written
    """
    config = config if config is not None else _default_config()
    filepath = Path(path) if path is not None else config.path
    filesystem = filesystem if filesystem is not None else OsFilesystem()

    content = changelog.render()
    if config.trailing_newline and content and not content.endswith("\n"):
        content += "\n"

    write_text(filesystem, filepath, content, encoding=config.encoding)
    return filepath


def _default_config() -> ChangelogConfig:
    from changelog_py.config import load_config

    return load_config()
