"""Filesystem backends used to read and write changelog files.

Two implementations are provided: OsFilesystem for real files and
MemoryFilesystem, an in-memory store handy for tests and dry runs.
"""

from __future__ import annotations

import io
import logging
import os
from pathlib import Path
from typing import IO, TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


class WritableFile(Protocol):
    """A file handle opened for writing.

    commit() must flush buffered content and make it durable.
    """

    def write(self, data: bytes) -> int: ...

    def commit(self) -> None: ...

    def close(self) -> None: ...

    def __enter__(self) -> WritableFile: ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...


class Filesystem(Protocol):
    """Capabilities the changelog needs from a filesystem."""

    def stat(self, path: str | Path) -> object:
        """Return metadata; raise FileNotFoundError if the path is missing."""
        ...

    def open(self, path: str | Path) -> IO[bytes]: ...

    def create(self, path: str | Path) -> WritableFile: ...


class _OsFile:
    def __init__(self, handle: IO[bytes]) -> None:
        self._handle = handle

    def write(self, data: bytes) -> int:
        return self._handle.write(data)

    def commit(self) -> None:
        self._handle.flush()
        os.fsync(self._handle.fileno())

    def close(self) -> None:
        self._handle.close()

    def __enter__(self) -> _OsFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class OsFilesystem:
    """Filesystem backed by the operating system."""

    def stat(self, path: str | Path) -> os.stat_result:
        return Path(path).stat()

    def open(self, path: str | Path) -> IO[bytes]:
        return Path(path).open("rb")

    def create(self, path: str | Path) -> _OsFile:
        logger.debug("Creating %s", path)
        return _OsFile(Path(path).open("wb"))


class _MemoryFile:
    def __init__(self, fs: MemoryFilesystem, key: str) -> None:
        self._fs = fs
        self._key = key
        self._buffer = io.BytesIO()

    def write(self, data: bytes) -> int:
        return self._buffer.write(data)

    def commit(self) -> None:
        self._fs.files[self._key] = self._buffer.getvalue()

    def close(self) -> None:
        self._buffer.close()

    def __enter__(self) -> _MemoryFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class MemoryFilesystem:
    """In-memory filesystem keyed by path string.

    Content becomes visible to open() once the writer commits.
    """

    def __init__(self, files: dict[str, bytes] | None = None) -> None:
        self.files: dict[str, bytes] = dict(files or {})

    def write_file(self, path: str | Path, content: str | bytes, encoding: str = "utf-8") -> None:
        data = content.encode(encoding) if isinstance(content, str) else content
        self.files[str(path)] = data

    def read_file(self, path: str | Path, encoding: str = "utf-8") -> str:
        return self._get(path).decode(encoding)

    def stat(self, path: str | Path) -> int:
        return len(self._get(path))

    def open(self, path: str | Path) -> IO[bytes]:
        return io.BytesIO(self._get(path))

    def create(self, path: str | Path) -> _MemoryFile:
        key = str(path)
        self.files[key] = b""
        return _MemoryFile(self, key)

    def _get(self, path: str | Path) -> bytes:
        try:
            return self.files[str(path)]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", str(path)) from None
