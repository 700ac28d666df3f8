"""Use cases for category-scoped file operations."""

from __future__ import annotations

from .category_directory import CategoryDirectory
from .directory_file_service import TEXT_ENCODING, DirectoryFileService, DirectoryListing
from .ports import DirectoryResolver, FileSystemGateway

__all__ = [
    "CategoryDirectory",
    "DirectoryFileService",
    "DirectoryListing",
    "DirectoryResolver",
    "FileSystemGateway",
    "TEXT_ENCODING",
]
