"""Adapters implementing the directory feature ports."""

from __future__ import annotations

from .local import LocalFileSystemGateway
from .memory import InMemoryFileSystemGateway
from .resolver import PlatformDirectoryResolver

__all__ = [
    "InMemoryFileSystemGateway",
    "LocalFileSystemGateway",
    "PlatformDirectoryResolver",
]
