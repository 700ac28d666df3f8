"""Data structures describing directory categories and file attributes."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Final

from .errors import InvalidNameError


class DirectoryCategory(str, Enum):
    """Logical directory a file lives in, mapped to a real path at call time."""

    DOCUMENTS = "Documents"
    INBOX = "Inbox"
    LIBRARY = "Library"
    TEMP = "tmp"

    @staticmethod
    def from_user_input(value: str) -> "DirectoryCategory":
        """Translate a member name or value, ignoring case, into a category."""

        normalized = value.strip().lower()
        for category in DirectoryCategory:
            if normalized in (category.value.lower(), category.name.lower()):
                return category
        valid: Final[str] = ", ".join(c.name.lower() for c in DirectoryCategory)
        raise InvalidNameError(f"Unsupported directory category '{value}'. Valid options: {valid}")


class FileType(str, Enum):
    """Kind of file system entry reported by an attribute snapshot."""

    REGULAR = "regular"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    OTHER = "other"


@dataclass(slots=True, frozen=True)
class FileAttributes:
    """Snapshot of an entry's metadata at the time it was requested."""

    path: Path
    size: int
    file_type: FileType
    permissions: int
    modified_at: datetime
    accessed_at: datetime
    created_at: datetime | None = None
    owner_id: int | None = None
    group_id: int | None = None
    owner: str | None = None

    @property
    def permissions_octal(self) -> str:
        """Permission bits formatted like ``0o644``."""

        return oct(self.permissions)

    def as_dict(self) -> dict[str, object]:
        """Return the attribute-name to value mapping."""

        return asdict(self)


__all__ = ["DirectoryCategory", "FileType", "FileAttributes"]
