"""
Summary: Exercise the service against real files through the local gateway.
Why: The in-memory fake must not hide differences from the operating system.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from appfiles.features.directories import (
    ConflictError,
    DecodeError,
    DirectoryCategory,
    DirectoryFileService,
    FileType,
    LocalFileSystemGateway,
    NotFoundError,
    WriteError,
)

DOCS = DirectoryCategory.DOCUMENTS
TEMP = DirectoryCategory.TEMP


def test_write_read_round_trip_on_disk(local_service: DirectoryFileService, local_home: Path) -> None:
    _ = local_service.write(DOCS, "a.txt", "hello ✓")

    assert (local_home / "Documents" / "a.txt").read_bytes() == "hello ✓".encode("utf-8")
    assert local_service.read(DOCS, "a.txt") == "hello ✓"


def test_read_invalid_utf8_is_decode_error(local_service: DirectoryFileService, local_home: Path) -> None:
    _ = (local_home / "Documents" / "latin1.txt").write_bytes("café".encode("latin-1"))

    with pytest.raises(DecodeError):
        _ = local_service.read(DOCS, "latin1.txt")


def test_write_into_missing_inbox_is_write_error(local_service: DirectoryFileService) -> None:
    with pytest.raises(WriteError):
        _ = local_service.write(DirectoryCategory.INBOX, "a.txt", "text")

    _ = local_service.ensure_directory(DirectoryCategory.INBOX)
    _ = local_service.write(DirectoryCategory.INBOX, "a.txt", "text")
    assert local_service.read(DirectoryCategory.INBOX, "a.txt") == "text"


@pytest.mark.parametrize("operation", ["move", "copy"])
def test_relocation_into_missing_inbox_reports_inbox(
    local_service: DirectoryFileService, local_home: Path, operation: str
) -> None:
    source = local_service.write(DOCS, "a.txt", "stay")

    with pytest.raises(NotFoundError) as excinfo:
        _ = getattr(local_service, operation)("a.txt", DOCS, DirectoryCategory.INBOX)

    assert excinfo.value.path == local_home / "Documents" / "Inbox"
    assert source.read_text(encoding="utf-8") == "stay"


def test_delete_directory_is_write_error(local_service: DirectoryFileService, local_home: Path) -> None:
    (local_home / "Documents" / "folder").mkdir()

    with pytest.raises(WriteError):
        _ = local_service.delete(DOCS, "folder")
    assert (local_home / "Documents" / "folder").is_dir()


def test_rename_does_not_overwrite(local_service: DirectoryFileService) -> None:
    _ = local_service.write(DOCS, "old.txt", "old")
    _ = local_service.write(DOCS, "new.txt", "new")

    with pytest.raises(ConflictError):
        _ = local_service.rename(DOCS, "old.txt", "new.txt")

    assert local_service.read(DOCS, "old.txt") == "old"
    assert local_service.read(DOCS, "new.txt") == "new"


def test_copy_is_byte_identical(local_service: DirectoryFileService, local_home: Path) -> None:
    payload = bytes(range(256)) * 4
    source = local_home / "Documents" / "blob.bin"
    _ = source.write_bytes(payload)

    destination = local_service.copy("blob.bin", DOCS, TEMP)

    assert source.read_bytes() == payload
    assert destination.read_bytes() == payload


def test_move_falls_back_to_copy_across_devices(
    local_service: DirectoryFileService, mocker: MockerFixture
) -> None:
    source = local_service.write(DOCS, "a.txt", "cross device")
    _ = mocker.patch(
        "appfiles.features.directories.adapters.local.os.rename",
        side_effect=OSError(errno.EXDEV, os.strerror(errno.EXDEV)),
    )

    destination = local_service.move("a.txt", DOCS, TEMP)

    assert not source.exists()
    assert destination.read_text(encoding="utf-8") == "cross device"


def test_move_propagates_other_rename_failures(
    local_service: DirectoryFileService, mocker: MockerFixture
) -> None:
    source = local_service.write(DOCS, "a.txt", "stay")
    _ = mocker.patch(
        "appfiles.features.directories.adapters.local.os.rename",
        side_effect=PermissionError(errno.EACCES, os.strerror(errno.EACCES)),
    )

    with pytest.raises(WriteError):
        _ = local_service.move("a.txt", DOCS, TEMP)
    assert source.exists()


def test_list_returns_sorted_children(local_service: DirectoryFileService, local_home: Path) -> None:
    for name in ("b.txt", "a.txt"):
        _ = (local_home / "tmp" / name).write_text(name, encoding="utf-8")

    assert list(local_service.list(TEMP)) == ["a.txt", "b.txt"]


def test_list_of_removed_directory_is_not_found(
    local_service: DirectoryFileService, local_home: Path
) -> None:
    listing = local_service.list(DirectoryCategory.LIBRARY)
    (local_home / "Library").rmdir()

    with pytest.raises(NotFoundError):
        _ = list(listing)
    with pytest.raises(NotFoundError):
        _ = local_service.list(DirectoryCategory.LIBRARY)


def test_attributes_reflect_stat(local_service: DirectoryFileService) -> None:
    path = local_service.write(DOCS, "a.txt", "hello")
    path.chmod(0o640)

    attributes = local_service.attributes(path)

    assert attributes.size == 5
    assert attributes.file_type is FileType.REGULAR
    assert attributes.permissions == 0o640
    assert attributes.owner_id == path.stat().st_uid
    assert attributes.modified_at.tzinfo is not None


def test_attributes_of_directory(local_service: DirectoryFileService, local_home: Path) -> None:
    attributes = local_service.attributes(local_home / "Documents")

    assert attributes.file_type is FileType.DIRECTORY


def test_queries_never_raise_for_odd_paths(local_service: DirectoryFileService) -> None:
    assert local_service.exists("/definitely/not/here") is False
    assert local_service.exists("bad\x00path") is False
    assert local_service.is_readable("bad\x00path") is False
    assert local_service.is_writable("/definitely/not/here") is False


def test_gateway_refuses_existing_copy_target(tmp_path: Path) -> None:
    gateway = LocalFileSystemGateway()
    source = tmp_path / "a"
    target = tmp_path / "b"
    _ = source.write_text("a", encoding="utf-8")
    _ = target.write_text("b", encoding="utf-8")

    with pytest.raises(FileExistsError):
        gateway.copy(source, target)
    assert target.read_text(encoding="utf-8") == "b"
