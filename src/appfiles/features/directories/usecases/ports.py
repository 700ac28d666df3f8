"""Summary: Ports defining the platform file operations the service needs.
Why: Decouple the service from the real file system so tests can swap in a fake."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..domain.models import DirectoryCategory, FileAttributes


@runtime_checkable
class FileSystemGateway(Protocol):
    """Platform file primitives.

    Implementations report failures with builtin ``OSError`` subclasses
    (``FileNotFoundError``, ``FileExistsError``, ``PermissionError``,
    ``IsADirectoryError``, ``NotADirectoryError``).
    """

    def read_bytes(self, path: Path) -> bytes:
        """Return the whole contents of the file at ``path``."""
        ...

    def write_bytes(self, path: Path, data: bytes) -> None:
        """Create or truncate ``path`` and write ``data``."""
        ...

    def exists(self, path: Path) -> bool:
        """Return True if ``path`` exists."""
        ...

    def is_file(self, path: Path) -> bool:
        """Return True when ``path`` is a regular file."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Return True when ``path`` is a directory."""
        ...

    def is_readable(self, path: Path) -> bool:
        """Return True when the current process may read ``path``."""
        ...

    def is_writable(self, path: Path) -> bool:
        """Return True when the current process may write ``path``."""
        ...

    def remove(self, path: Path) -> None:
        """Delete the file at ``path``."""
        ...

    def rename(self, source: Path, destination: Path) -> None:
        """Rename ``source`` to ``destination`` within one directory tree."""
        ...

    def move(self, source: Path, destination: Path) -> None:
        """Move ``source`` to ``destination``, possibly across volumes."""
        ...

    def copy(self, source: Path, destination: Path) -> None:
        """Duplicate ``source`` byte-for-byte at ``destination``."""
        ...

    def make_directory(self, path: Path) -> None:
        """Create ``path`` and any missing parents."""
        ...

    def list_directory(self, path: Path) -> Iterator[str]:
        """Yield the names of the immediate children of ``path``."""
        ...

    def stat(self, path: Path) -> FileAttributes:
        """Return a metadata snapshot for ``path`` without following symlinks."""
        ...


@runtime_checkable
class DirectoryResolver(Protocol):
    """Port mapping logical categories onto absolute directories."""

    def resolve(self, category: DirectoryCategory) -> Path:
        """Return the absolute directory for ``category``."""
        ...


__all__ = ["DirectoryResolver", "FileSystemGateway"]
