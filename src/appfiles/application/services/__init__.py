"""Application services composing adapters into use cases."""

from __future__ import annotations

from .file_service import build_directory_file_service

__all__ = ["build_directory_file_service"]
