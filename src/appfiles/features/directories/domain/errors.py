"""Error taxonomy for directory file operations."""

from __future__ import annotations

from pathlib import Path


class FileServiceError(Exception):
    """Base exception for all file service failures."""

    def __init__(self, message: str, *, path: Path | str | None = None) -> None:
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.message}: {self.path}"
        return self.message


class NotFoundError(FileServiceError):
    """Target file or directory is absent."""


class ConflictError(FileServiceError):
    """Destination is already occupied."""


class WriteError(FileServiceError):
    """Permission or storage failure while mutating the file system."""


class DecodeError(FileServiceError):
    """File contents are not valid UTF-8 text."""


class InvalidNameError(FileServiceError, ValueError):
    """File name or extension is empty or malformed."""


class ConfigurationError(FileServiceError):
    """A directory location cannot be determined; fatal at startup."""


__all__ = [
    "FileServiceError",
    "NotFoundError",
    "ConflictError",
    "WriteError",
    "DecodeError",
    "InvalidNameError",
    "ConfigurationError",
]
