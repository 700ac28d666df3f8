"""Tests for mapping directory categories onto platform locations."""

from __future__ import annotations

from pathlib import Path

import pytest

from appfiles.config.config import Config
from appfiles.features.directories import (
    ConfigurationError,
    DirectoryCategory,
    PlatformDirectoryResolver,
)


def test_defaults_follow_home_layout(tmp_path: Path) -> None:
    resolver = PlatformDirectoryResolver(home=tmp_path, temp_dir=lambda: str(tmp_path / "t"))

    assert resolver.resolve(DirectoryCategory.DOCUMENTS) == tmp_path / "Documents"
    assert resolver.resolve(DirectoryCategory.INBOX) == tmp_path / "Documents" / "Inbox"
    assert resolver.resolve(DirectoryCategory.LIBRARY) == tmp_path / "Library"
    assert resolver.resolve(DirectoryCategory.TEMP) == (tmp_path / "t").resolve()


def test_inbox_follows_documents_override(tmp_path: Path) -> None:
    resolver = PlatformDirectoryResolver(
        home=tmp_path,
        overrides={DirectoryCategory.DOCUMENTS: tmp_path / "docs"},
    )

    assert resolver.resolve(DirectoryCategory.INBOX) == tmp_path / "docs" / "Inbox"


def test_relative_override_is_configuration_error(tmp_path: Path) -> None:
    resolver = PlatformDirectoryResolver(
        home=tmp_path,
        overrides={DirectoryCategory.LIBRARY: "relative/lib"},
    )

    with pytest.raises(ConfigurationError):
        _ = resolver.resolve(DirectoryCategory.LIBRARY)


def test_missing_home_is_configuration_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def _no_home() -> Path:
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", _no_home)
    resolver = PlatformDirectoryResolver()

    with pytest.raises(ConfigurationError):
        _ = resolver.resolve(DirectoryCategory.DOCUMENTS)


def test_missing_temp_dir_is_configuration_error(tmp_path: Path) -> None:
    def _no_temp() -> str:
        raise FileNotFoundError("No usable temporary directory found")

    resolver = PlatformDirectoryResolver(home=tmp_path, temp_dir=_no_temp)

    with pytest.raises(ConfigurationError):
        _ = resolver.resolve(DirectoryCategory.TEMP)


def test_from_config_applies_overrides(tmp_path: Path) -> None:
    config = Config(library_dir=str(tmp_path / "lib"), temp_dir=tmp_path / "scratch")

    resolver = PlatformDirectoryResolver.from_config(config, home=tmp_path)

    assert resolver.resolve(DirectoryCategory.LIBRARY) == tmp_path / "lib"
    assert resolver.resolve(DirectoryCategory.TEMP) == tmp_path / "scratch"
    assert resolver.resolve(DirectoryCategory.DOCUMENTS) == tmp_path / "Documents"
