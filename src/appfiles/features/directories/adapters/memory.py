"""In-memory FileSystemGateway for tests and dry runs."""

from __future__ import annotations

import errno
import os
from collections.abc import Callable, Iterable, Iterator, Mapping
from datetime import datetime, timezone
from pathlib import Path

from ..domain.models import FileAttributes, FileType
from ..usecases.ports import FileSystemGateway


def _os_error(kind: type[OSError], code: int, path: Path) -> OSError:
    return kind(code, os.strerror(code), str(path))


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryFileSystemGateway(FileSystemGateway):
    """Dictionary-backed file system honoring the gateway's OSError contract.

    Directories must exist before files can be created in them, just as on
    disk. ``deny_read`` and ``deny_write`` simulate permission failures.
    """

    _files: dict[Path, bytes]
    _directories: set[Path]
    _modified: dict[Path, datetime]
    _unreadable: set[Path]
    _read_only: set[Path]
    _clock: Callable[[], datetime]

    def __init__(
        self,
        *,
        directories: Iterable[Path | str] = (),
        files: Mapping[Path | str, bytes] | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._files = {}
        self._directories = {Path("/")}
        self._modified = {}
        self._unreadable = set()
        self._read_only = set()
        self._clock = clock

        for directory in directories:
            self.make_directory(Path(directory))
        for raw_path, data in (files or {}).items():
            path = Path(raw_path)
            self.make_directory(path.parent)
            self.write_bytes(path, data)

    # Test helpers ------------------------------------------------------------

    def deny_read(self, path: Path) -> None:
        self._unreadable.add(path)

    def deny_write(self, path: Path) -> None:
        self._read_only.add(path)

    def snapshot(self) -> dict[Path, bytes]:
        """Return a copy of every stored file."""

        return dict(self._files)

    # Guards ------------------------------------------------------------------

    def _require_directory(self, path: Path) -> None:
        if path in self._files:
            raise _os_error(NotADirectoryError, errno.ENOTDIR, path)
        if path not in self._directories:
            raise _os_error(FileNotFoundError, errno.ENOENT, path)

    def _require_file(self, path: Path) -> None:
        if path in self._directories:
            raise _os_error(IsADirectoryError, errno.EISDIR, path)
        if path not in self._files:
            raise _os_error(FileNotFoundError, errno.ENOENT, path)

    def _require_writable(self, path: Path) -> None:
        if path in self._read_only or path.parent in self._read_only:
            raise _os_error(PermissionError, errno.EACCES, path)

    def _refuse_existing(self, path: Path) -> None:
        if self.exists(path):
            raise _os_error(FileExistsError, errno.EEXIST, path)

    # FileSystemGateway -------------------------------------------------------

    def read_bytes(self, path: Path) -> bytes:
        self._require_file(path)
        if path in self._unreadable:
            raise _os_error(PermissionError, errno.EACCES, path)
        return self._files[path]

    def write_bytes(self, path: Path, data: bytes) -> None:
        if path in self._directories:
            raise _os_error(IsADirectoryError, errno.EISDIR, path)
        self._require_directory(path.parent)
        self._require_writable(path)
        self._files[path] = bytes(data)
        self._modified[path] = self._clock()

    def exists(self, path: Path) -> bool:
        return path in self._files or path in self._directories

    def is_file(self, path: Path) -> bool:
        return path in self._files

    def is_dir(self, path: Path) -> bool:
        return path in self._directories

    def is_readable(self, path: Path) -> bool:
        return self.exists(path) and path not in self._unreadable

    def is_writable(self, path: Path) -> bool:
        return self.exists(path) and path not in self._read_only

    def remove(self, path: Path) -> None:
        self._require_file(path)
        self._require_writable(path)
        del self._files[path]
        _ = self._modified.pop(path, None)

    def rename(self, source: Path, destination: Path) -> None:
        self.move(source, destination)

    def move(self, source: Path, destination: Path) -> None:
        self._require_file(source)
        self._refuse_existing(destination)
        self._require_directory(destination.parent)
        self._require_writable(source)
        self._require_writable(destination)
        self._files[destination] = self._files.pop(source)
        self._modified[destination] = self._modified.pop(source, self._clock())

    def copy(self, source: Path, destination: Path) -> None:
        _ = self.read_bytes(source)
        self._refuse_existing(destination)
        self.write_bytes(destination, self._files[source])

    def make_directory(self, path: Path) -> None:
        if path in self._files:
            raise _os_error(FileExistsError, errno.EEXIST, path)
        for parent in reversed(path.parents):
            if parent in self._files:
                raise _os_error(NotADirectoryError, errno.ENOTDIR, parent)
            self._directories.add(parent)
        self._directories.add(path)

    def list_directory(self, path: Path) -> Iterator[str]:
        self._require_directory(path)
        children = [entry for entry in (*self._files, *self._directories) if entry.parent == path and entry != path]
        for child in children:
            yield child.name

    def stat(self, path: Path) -> FileAttributes:
        if path in self._directories:
            return FileAttributes(
                path=path,
                size=0,
                file_type=FileType.DIRECTORY,
                permissions=0o555 if path in self._read_only else 0o755,
                modified_at=self._modified.get(path, self._clock()),
                accessed_at=self._clock(),
            )
        self._require_file(path)
        permissions = 0o644
        if path in self._read_only:
            permissions &= ~0o222
        if path in self._unreadable:
            permissions &= ~0o444
        return FileAttributes(
            path=path,
            size=len(self._files[path]),
            file_type=FileType.REGULAR,
            permissions=permissions,
            modified_at=self._modified[path],
            accessed_at=self._clock(),
        )


__all__ = ["InMemoryFileSystemGateway"]
