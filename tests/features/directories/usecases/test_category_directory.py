"""Tests for the single-category facade."""

from __future__ import annotations

from pathlib import Path

import pytest

from appfiles.features.directories import (
    CategoryDirectory,
    DirectoryCategory,
    DirectoryFileService,
    NotFoundError,
)


@pytest.fixture
def documents(memory_service: DirectoryFileService) -> CategoryDirectory:
    return memory_service.bound(DirectoryCategory.DOCUMENTS)


def test_string_paths(documents: CategoryDirectory) -> None:
    assert documents.string_path() == "/home/tester/Documents"
    assert documents.full_path("myFile.txt") == "/home/tester/Documents/myFile.txt"
    assert documents.path_for("myFile.txt") == Path("/home/tester/Documents/myFile.txt")


def test_lifecycle_within_category(documents: CategoryDirectory) -> None:
    """Write, list, read, inspect and delete without repeating the category."""

    _ = documents.write("myFile3.txt", "New file created.")

    assert "myFile3.txt" in list(documents.list())
    assert documents.read("myFile3.txt") == "New file created."
    assert documents.attributes("myFile3.txt").size == len("New file created.")

    _ = documents.change_extension("myFile3.txt", "bak")
    _ = documents.rename("myFile3.bak", "final.bak")
    assert documents.exists("final.bak")

    _ = documents.delete("final.bak")
    assert not documents.exists("final.bak")
    with pytest.raises(NotFoundError):
        _ = documents.read("final.bak")


def test_category_is_fixed(documents: CategoryDirectory) -> None:
    with pytest.raises(AttributeError):
        documents.category = DirectoryCategory.TEMP  # pyright: ignore[reportAttributeAccessIssue]
