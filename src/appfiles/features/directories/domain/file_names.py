"""Summary: Pure helpers for validating and deriving file names.
Why: Keep name rules testable without touching the file system."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Final

from .errors import InvalidNameError

_RESERVED_NAMES: Final[frozenset[str]] = frozenset({".", ".."})
_FORBIDDEN_CHARACTERS: Final[tuple[str, ...]] = ("/", "\x00")


def validate_file_name(name: str) -> str:
    """Return ``name`` unchanged when it is a single, usable path component.

    Raises:
        InvalidNameError: If ``name`` is empty, reserved, or contains a
            separator or NUL byte.
    """

    if not name or not name.strip():
        raise InvalidNameError("File name must not be empty")
    if name in _RESERVED_NAMES:
        raise InvalidNameError(f"'{name}' is not a valid file name")
    for char in _FORBIDDEN_CHARACTERS:
        if char in name:
            raise InvalidNameError(f"File name must not contain {char!r}")
    return name


def replace_extension(name: str, extension: str) -> str:
    """Swap the extension of ``name`` for ``extension``.

    Only the last suffix is replaced (``a.tar.gz`` becomes ``a.tar.bak``).
    Dotfiles such as ``.profile`` have no extension and gain one. A leading
    dot on ``extension`` is ignored; an empty extension strips the suffix,
    while a lone dot is rejected.

    Raises:
        InvalidNameError: If either input is malformed or the result is empty.
    """

    _ = validate_file_name(name)
    requested = extension.strip()
    cleaned = requested[1:] if requested.startswith(".") else requested
    if requested and not cleaned:
        raise InvalidNameError(f"Invalid file extension '{extension}'")
    if cleaned and (cleaned != cleaned.strip(".") or any(c in cleaned for c in _FORBIDDEN_CHARACTERS)):
        raise InvalidNameError(f"Invalid file extension '{extension}'")

    stem = PurePosixPath(name).stem if PurePosixPath(name).suffix else name
    new_name = f"{stem}.{cleaned}" if cleaned else stem
    return validate_file_name(new_name)


def build_path(directory: Path, name: str) -> Path:
    """Join ``directory`` and a validated file name without touching disk."""

    return directory / validate_file_name(name)


__all__ = ["build_path", "replace_extension", "validate_file_name"]
