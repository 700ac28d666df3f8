"""Summary: Category-scoped file operations over a pluggable file system.
Why: Offer one import path for the service, its ports, adapters and errors."""

from __future__ import annotations

from .adapters import InMemoryFileSystemGateway, LocalFileSystemGateway, PlatformDirectoryResolver
from .domain import (
    ConfigurationError,
    ConflictError,
    DecodeError,
    DirectoryCategory,
    FileAttributes,
    FileServiceError,
    FileType,
    InvalidNameError,
    NotFoundError,
    WriteError,
)
from .usecases import (
    CategoryDirectory,
    DirectoryFileService,
    DirectoryListing,
    DirectoryResolver,
    FileSystemGateway,
)

__all__ = [
    "CategoryDirectory",
    "ConfigurationError",
    "ConflictError",
    "DecodeError",
    "DirectoryCategory",
    "DirectoryFileService",
    "DirectoryListing",
    "DirectoryResolver",
    "FileAttributes",
    "FileServiceError",
    "FileSystemGateway",
    "FileType",
    "InMemoryFileSystemGateway",
    "InvalidNameError",
    "LocalFileSystemGateway",
    "NotFoundError",
    "PlatformDirectoryResolver",
    "WriteError",
]
