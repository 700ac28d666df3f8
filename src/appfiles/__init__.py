"""appfiles: category-scoped file operations on the local file system."""

from __future__ import annotations

from appfiles.application.services import build_directory_file_service
from appfiles.features.directories import (
    CategoryDirectory,
    ConfigurationError,
    ConflictError,
    DecodeError,
    DirectoryCategory,
    DirectoryFileService,
    DirectoryListing,
    FileAttributes,
    FileServiceError,
    FileType,
    InMemoryFileSystemGateway,
    InvalidNameError,
    LocalFileSystemGateway,
    NotFoundError,
    PlatformDirectoryResolver,
    WriteError,
)

__version__ = "0.1.0"

__all__ = [
    "CategoryDirectory",
    "ConfigurationError",
    "ConflictError",
    "DecodeError",
    "DirectoryCategory",
    "DirectoryFileService",
    "DirectoryListing",
    "FileAttributes",
    "FileServiceError",
    "FileType",
    "InMemoryFileSystemGateway",
    "InvalidNameError",
    "LocalFileSystemGateway",
    "NotFoundError",
    "PlatformDirectoryResolver",
    "WriteError",
    "build_directory_file_service",
]
