"""Facade bound to a single directory category."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..domain.models import DirectoryCategory, FileAttributes

if TYPE_CHECKING:
    from .directory_file_service import DirectoryFileService, DirectoryListing


@dataclass(slots=True, frozen=True)
class CategoryDirectory:
    """Working directory view: every call targets ``category``."""

    service: "DirectoryFileService"
    category: DirectoryCategory

    @property
    def directory(self) -> Path:
        return self.service.resolve(self.category)

    def path_for(self, name: str) -> Path:
        return self.service.build_path(self.category, name)

    def string_path(self) -> str:
        """Directory location as a plain string."""

        return str(self.directory)

    def full_path(self, name: str) -> str:
        """Location of ``name`` inside the directory as a plain string."""

        return str(self.path_for(name))

    def write(self, name: str, contents: str) -> Path:
        return self.service.write(self.category, name, contents)

    def read(self, name: str) -> str:
        return self.service.read(self.category, name)

    def delete(self, name: str) -> Path:
        return self.service.delete(self.category, name)

    def rename(self, old_name: str, new_name: str) -> Path:
        return self.service.rename(self.category, old_name, new_name)

    def change_extension(self, name: str, new_extension: str) -> Path:
        return self.service.change_extension(name, self.category, new_extension)

    def exists(self, name: str) -> bool:
        return self.service.exists(self.path_for(name))

    def attributes(self, name: str) -> FileAttributes:
        return self.service.attributes(self.path_for(name))

    def list(self) -> "DirectoryListing":
        return self.service.list(self.category)


__all__ = ["CategoryDirectory"]
