"""Shared pytest fixtures for directory file service tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from appfiles.features.directories import (
    DirectoryCategory,
    DirectoryFileService,
    InMemoryFileSystemGateway,
    LocalFileSystemGateway,
    PlatformDirectoryResolver,
)

MEMORY_HOME = Path("/home/tester")
MEMORY_TEMP = Path("/var/tmp/appfiles")


@pytest.fixture
def memory_fs() -> InMemoryFileSystemGateway:
    """Provide a fake file system where every category directory exists."""

    return InMemoryFileSystemGateway(
        directories=[
            MEMORY_HOME / "Documents" / "Inbox",
            MEMORY_HOME / "Library",
            MEMORY_TEMP,
        ]
    )


@pytest.fixture
def memory_service(memory_fs: InMemoryFileSystemGateway) -> DirectoryFileService:
    """Provide a service wired to the in-memory gateway."""

    resolver = PlatformDirectoryResolver(
        home=MEMORY_HOME,
        overrides={DirectoryCategory.TEMP: MEMORY_TEMP},
    )
    return DirectoryFileService(filesystem=memory_fs, resolver=resolver)


@pytest.fixture
def local_home(tmp_path: Path) -> Path:
    """Create a fake home directory with Documents, Library and tmp folders."""

    home = tmp_path / "home"
    for folder in ("Documents", "Library", "tmp"):
        (home / folder).mkdir(parents=True)
    return home


@pytest.fixture
def local_service(local_home: Path) -> DirectoryFileService:
    """Provide a service operating on real files below ``tmp_path``."""

    resolver = PlatformDirectoryResolver(
        home=local_home,
        overrides={DirectoryCategory.TEMP: local_home / "tmp"},
    )
    return DirectoryFileService(filesystem=LocalFileSystemGateway(), resolver=resolver)
