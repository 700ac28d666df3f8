"""Summary: Domain types for category-scoped file operations.
Why: Keep categories, attributes and errors free of I/O concerns."""

from __future__ import annotations

from .errors import (
    ConfigurationError,
    ConflictError,
    DecodeError,
    FileServiceError,
    InvalidNameError,
    NotFoundError,
    WriteError,
)
from .file_names import build_path, replace_extension, validate_file_name
from .models import DirectoryCategory, FileAttributes, FileType

__all__ = [
    "ConfigurationError",
    "ConflictError",
    "DecodeError",
    "DirectoryCategory",
    "FileAttributes",
    "FileServiceError",
    "FileType",
    "InvalidNameError",
    "NotFoundError",
    "WriteError",
    "build_path",
    "replace_extension",
    "validate_file_name",
]
