"""src/appfiles/features/directories/adapters/local.py
What: FileSystemGateway implementation backed by the local file system.
Why: Keep os/shutil calls in one adapter while the service targets the port."""

from __future__ import annotations

import errno
import os
import shutil
import stat
from collections.abc import Iterator
from datetime import datetime, timezone
from pathlib import Path

from ..domain.models import FileAttributes, FileType
from ..usecases.ports import FileSystemGateway


def _refuse_existing(destination: Path) -> None:
    if os.path.lexists(destination):
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), str(destination))


def _file_type(mode: int) -> FileType:
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISREG(mode):
        return FileType.REGULAR
    return FileType.OTHER


def _timestamp(seconds: float) -> datetime:
    return datetime.fromtimestamp(seconds, tz=timezone.utc)


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around pathlib, os and shutil."""

    def read_bytes(self, path: Path) -> bytes:
        return path.read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        _ = path.write_bytes(data)

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def is_readable(self, path: Path) -> bool:
        return os.access(path, os.R_OK)

    def is_writable(self, path: Path) -> bool:
        return os.access(path, os.W_OK)

    def remove(self, path: Path) -> None:
        if path.is_dir() and not path.is_symlink():
            raise IsADirectoryError(errno.EISDIR, os.strerror(errno.EISDIR), str(path))
        path.unlink()

    def rename(self, source: Path, destination: Path) -> None:
        # os.rename silently replaces files on POSIX.
        _refuse_existing(destination)
        os.rename(source, destination)

    def move(self, source: Path, destination: Path) -> None:
        """Rename in place, or copy then delete when the volumes differ.

        The cross-volume path is not atomic. If the process dies after the
        copy the file exists twice; if it dies during the copy the
        destination may be truncated while the source is still present.
        """

        _refuse_existing(destination)
        try:
            os.rename(source, destination)
        except OSError as exc:
            if exc.errno != errno.EXDEV:
                raise
            _ = shutil.copy2(source, destination)
            os.unlink(source)

    def copy(self, source: Path, destination: Path) -> None:
        _refuse_existing(destination)
        _ = shutil.copy2(source, destination)

    def make_directory(self, path: Path) -> None:
        path.mkdir(parents=True, exist_ok=True)

    def list_directory(self, path: Path) -> Iterator[str]:
        with os.scandir(path) as entries:
            for entry in entries:
                yield entry.name

    def stat(self, path: Path) -> FileAttributes:
        info = os.lstat(path)
        birth = getattr(info, "st_birthtime", None)
        try:
            owner: str | None = path.owner()
        except (KeyError, NotImplementedError, OSError):
            owner = None
        return FileAttributes(
            path=path,
            size=info.st_size,
            file_type=_file_type(info.st_mode),
            permissions=stat.S_IMODE(info.st_mode),
            modified_at=_timestamp(info.st_mtime),
            accessed_at=_timestamp(info.st_atime),
            created_at=_timestamp(birth) if birth is not None else None,
            owner_id=info.st_uid,
            group_id=info.st_gid,
            owner=owner,
        )


__all__ = ["LocalFileSystemGateway"]
