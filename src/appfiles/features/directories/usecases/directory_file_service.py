"""Use case translating directory categories into named-file operations."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from logging import Logger, getLogger
from pathlib import Path

from ..domain.errors import (
    ConfigurationError,
    ConflictError,
    DecodeError,
    FileServiceError,
    NotFoundError,
    WriteError,
)
from ..domain.file_names import build_path, replace_extension
from ..domain.models import DirectoryCategory, FileAttributes
from .category_directory import CategoryDirectory
from .ports import DirectoryResolver, FileSystemGateway

TEXT_ENCODING = "utf-8"

_MISSING_ERRORS = (FileNotFoundError, IsADirectoryError, NotADirectoryError)


class DirectoryListing:
    """Lazy, restartable view over a directory's immediate children.

    Nothing is read until iteration starts, and every new iteration
    enumerates the directory again, so the names reflect the state of the
    file system at that moment. Names are yielded in sorted order.
    """

    __slots__ = ("_enumerate", "directory")

    def __init__(self, directory: Path, enumerate_names: Callable[[Path], Iterator[str]]) -> None:
        self.directory = directory
        self._enumerate = enumerate_names

    def __iter__(self) -> Iterator[str]:
        return self._enumerate(self.directory)

    def __repr__(self) -> str:
        return f"DirectoryListing({str(self.directory)!r})"


class DirectoryFileService:
    """Perform file operations scoped to logical directory categories.

    Every call runs synchronously against the injected gateway and holds no
    state between calls, so results always reflect the current file system.
    Operations that change the file system raise the typed errors from
    :mod:`appfiles.features.directories.domain.errors`; the ``exists``,
    ``is_readable`` and ``is_writable`` queries never raise.
    """

    _filesystem: FileSystemGateway
    _resolver: DirectoryResolver
    _logger: Logger

    def __init__(
        self,
        *,
        filesystem: FileSystemGateway,
        resolver: DirectoryResolver,
        logger: Logger | None = None,
    ) -> None:
        self._filesystem = filesystem
        self._resolver = resolver
        self._logger = logger or getLogger(__name__)

    # Paths -------------------------------------------------------------------

    def resolve(self, category: DirectoryCategory) -> Path:
        """Return the absolute directory backing ``category``.

        Raises:
            ConfigurationError: If the resolver cannot supply an absolute path.
        """

        directory = self._resolver.resolve(category)
        if not directory.is_absolute():
            raise ConfigurationError(
                f"Directory for category '{category.name.lower()}' is not absolute",
                path=directory,
            )
        return directory

    def build_path(self, category: DirectoryCategory, file_name: str) -> Path:
        """Join the category directory and ``file_name`` without checking existence."""

        return build_path(self.resolve(category), file_name)

    def bound(self, category: DirectoryCategory) -> CategoryDirectory:
        """Return a facade that performs every operation inside ``category``."""

        return CategoryDirectory(self, category)

    def ensure_directory(self, category: DirectoryCategory) -> Path:
        """Create the category directory when it does not exist yet."""

        directory = self.resolve(category)
        if self._filesystem.is_dir(directory):
            return directory
        try:
            self._filesystem.make_directory(directory)
        except OSError as exc:
            raise self._fail(WriteError, "Cannot create directory", directory, exc) from exc
        self._logger.info(
            "Created directory %s",
            directory,
            extra={"fs_event": "fs.mkdir", "path": str(directory)},
        )
        return directory

    # Contents ----------------------------------------------------------------

    def write(self, category: DirectoryCategory, file_name: str, contents: str) -> Path:
        """Create or overwrite ``file_name`` with UTF-8 encoded ``contents``.

        Raises:
            WriteError: If the text cannot be encoded or the storage rejects the write.
        """

        path = self.build_path(category, file_name)
        try:
            data = contents.encode(TEXT_ENCODING)
        except UnicodeEncodeError as exc:
            raise self._fail(WriteError, "Contents are not encodable as UTF-8", path, exc) from exc

        try:
            self._filesystem.write_bytes(path, data)
        except OSError as exc:
            raise self._fail(WriteError, "Cannot write file", path, exc) from exc

        self._logger.info(
            "Wrote %s",
            path,
            extra=self._extra("fs.write", path, category=category, size=len(data)),
        )
        return path

    def read(self, category: DirectoryCategory, file_name: str) -> str:
        """Return the whole file decoded as UTF-8.

        Raises:
            NotFoundError: If no file exists under that name.
            DecodeError: If the bytes are not valid UTF-8.
        """

        path = self.build_path(category, file_name)
        try:
            data = self._filesystem.read_bytes(path)
        except _MISSING_ERRORS as exc:
            raise self._fail(NotFoundError, "File not found", path, exc) from exc
        except OSError as exc:
            raise self._fail(FileServiceError, "Cannot read file", path, exc) from exc

        try:
            text = data.decode(TEXT_ENCODING)
        except UnicodeDecodeError as exc:
            raise self._fail(DecodeError, "File is not valid UTF-8", path, exc) from exc

        self._logger.debug(
            "Read %s",
            path,
            extra=self._extra("fs.read", path, category=category, size=len(data)),
        )
        return text

    def delete(self, category: DirectoryCategory, file_name: str) -> Path:
        """Remove ``file_name`` from ``category`` and return its former path.

        Raises:
            NotFoundError: If the file is absent.
            WriteError: If the storage refuses the removal.
        """

        path = self.build_path(category, file_name)
        try:
            self._filesystem.remove(path)
        except FileNotFoundError as exc:
            raise self._fail(NotFoundError, "File not found", path, exc) from exc
        except OSError as exc:
            raise self._fail(WriteError, "Cannot delete file", path, exc) from exc

        self._logger.info("Deleted %s", path, extra=self._extra("fs.delete", path, category=category))
        return path

    # Relocation --------------------------------------------------------------

    def rename(self, category: DirectoryCategory, old_name: str, new_name: str) -> Path:
        """Rename a file inside ``category`` and return the new path.

        Raises:
            NotFoundError: If ``old_name`` is absent.
            ConflictError: If ``new_name`` already exists; neither file is touched.
        """

        source = self.build_path(category, old_name)
        destination = self.build_path(category, new_name)
        self._relocate(self._filesystem.rename, source, destination, action="rename")
        self._logger.info(
            "Renamed %s → %s",
            source,
            destination,
            extra=self._extra("fs.rename", source, category=category, target_path=destination),
        )
        return destination

    def move(
        self,
        file_name: str,
        from_category: DirectoryCategory,
        to_category: DirectoryCategory,
    ) -> Path:
        """Move ``file_name`` between categories and return the destination path.

        Categories may sit on different volumes. The gateway then copies and
        deletes, which is not atomic: a crash in between can leave the file
        at both locations or, if the copy was incomplete, at neither in full.

        Raises:
            NotFoundError: If the source or the destination directory is absent.
            ConflictError: If the destination is occupied.
        """

        source = self.build_path(from_category, file_name)
        destination = self.build_path(to_category, file_name)
        self._relocate(self._filesystem.move, source, destination, action="move")
        self._logger.info(
            "Moved %s → %s",
            source,
            destination,
            extra=self._extra("fs.move", source, target_path=destination),
        )
        return destination

    def copy(
        self,
        file_name: str,
        from_category: DirectoryCategory,
        to_category: DirectoryCategory,
    ) -> Path:
        """Duplicate ``file_name`` into ``to_category``, leaving the source intact.

        Raises:
            NotFoundError: If the source or the destination directory is absent.
            ConflictError: If the destination is occupied.
        """

        source = self.build_path(from_category, file_name)
        destination = self.build_path(to_category, file_name)
        self._relocate(self._filesystem.copy, source, destination, action="copy")
        self._logger.info(
            "Copied %s → %s",
            source,
            destination,
            extra=self._extra("fs.copy", source, target_path=destination),
        )
        return destination

    def change_extension(
        self,
        file_name: str,
        category: DirectoryCategory,
        new_extension: str,
    ) -> Path:
        """Rename ``file_name`` so that it carries ``new_extension``.

        Raises:
            InvalidNameError: If the derived name is empty or malformed.
            NotFoundError: If ``file_name`` is absent.
            ConflictError: If the derived name already exists.
        """

        return self.rename(category, file_name, replace_extension(file_name, new_extension))

    def _relocate(
        self,
        operation: Callable[[Path, Path], None],
        source: Path,
        destination: Path,
        *,
        action: str,
    ) -> None:
        if not self._filesystem.is_file(source):
            raise self._fail(NotFoundError, f"Cannot {action}; source not found", source)
        if self._filesystem.exists(destination):
            raise self._fail(ConflictError, f"Cannot {action}; destination exists", destination)
        if not self._filesystem.is_dir(destination.parent):
            raise self._fail(
                NotFoundError, f"Cannot {action}; destination directory not found", destination.parent
            )

        try:
            operation(source, destination)
        except FileExistsError as exc:
            raise self._fail(ConflictError, f"Cannot {action}; destination exists", destination, exc) from exc
        except FileNotFoundError as exc:
            raise self._fail(NotFoundError, f"Cannot {action}; source not found", source, exc) from exc
        except OSError as exc:
            raise self._fail(WriteError, f"Cannot {action} file", source, exc) from exc

    # Queries -----------------------------------------------------------------

    def exists(self, path: Path | str) -> bool:
        """Return True if ``path`` exists; errors count as absence."""

        return self._query(self._filesystem.exists, path)

    def is_readable(self, path: Path | str) -> bool:
        """Return True if ``path`` exists and may be read."""

        return self._query(self._filesystem.is_readable, path)

    def is_writable(self, path: Path | str) -> bool:
        """Return True if ``path`` exists and may be written."""

        return self._query(self._filesystem.is_writable, path)

    def _query(self, probe: Callable[[Path], bool], path: Path | str) -> bool:
        try:
            return bool(probe(Path(path)))
        except (OSError, ValueError):
            return False

    def list(self, category: DirectoryCategory) -> DirectoryListing:
        """Return the sorted names inside the category directory.

        Raises:
            NotFoundError: If the category directory does not exist.
        """

        directory = self.resolve(category)
        if not self._filesystem.is_dir(directory):
            raise self._fail(NotFoundError, "Directory not found", directory)
        return DirectoryListing(directory, self._enumerate)

    def _enumerate(self, directory: Path) -> Iterator[str]:
        try:
            names = sorted(self._filesystem.list_directory(directory))
        except _MISSING_ERRORS as exc:
            raise self._fail(NotFoundError, "Directory not found", directory, exc) from exc
        except OSError as exc:
            raise self._fail(FileServiceError, "Cannot list directory", directory, exc) from exc

        self._logger.debug(
            "Listed %s",
            directory,
            extra={"fs_event": "fs.list", "path": str(directory), "entries": len(names)},
        )
        yield from names

    def attributes(self, path: Path | str) -> FileAttributes:
        """Return a metadata snapshot for ``path``.

        Raises:
            NotFoundError: If ``path`` does not exist.
        """

        target = Path(path)
        try:
            return self._filesystem.stat(target)
        except _MISSING_ERRORS as exc:
            raise self._fail(NotFoundError, "File not found", target, exc) from exc
        except OSError as exc:
            raise self._fail(FileServiceError, "Cannot read attributes", target, exc) from exc

    # Helpers -----------------------------------------------------------------

    def _extra(
        self,
        event: str,
        path: Path,
        *,
        category: DirectoryCategory | None = None,
        target_path: Path | None = None,
        size: int | None = None,
    ) -> dict[str, object]:
        extra: dict[str, object] = {"fs_event": event, "path": str(path)}
        if category is not None:
            extra["base_path"] = str(path.parent)
        if target_path is not None:
            extra["target_path"] = str(target_path)
        if size is not None:
            extra["size"] = size
        return extra

    def _fail(
        self,
        error_type: type[FileServiceError],
        message: str,
        path: Path,
        cause: BaseException | None = None,
    ) -> FileServiceError:
        """Log a failed operation and build the error to raise."""

        detail = str(cause) if cause is not None else message
        self._logger.warning(
            "%s: %s",
            message,
            path,
            extra={"fs_event": "fs.error", "path": str(path), "error_message": detail},
        )
        return error_type(message, path=path)


__all__ = ["DirectoryFileService", "DirectoryListing", "TEXT_ENCODING"]
