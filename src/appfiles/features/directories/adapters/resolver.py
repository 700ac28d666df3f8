"""Adapter resolving directory categories against the running platform."""

from __future__ import annotations

import tempfile
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Final

from ..domain.errors import ConfigurationError
from ..domain.models import DirectoryCategory
from ..usecases.ports import DirectoryResolver

if TYPE_CHECKING:
    from appfiles.config.config import Config


DOCUMENTS_DIR_NAME: Final[str] = "Documents"
INBOX_DIR_NAME: Final[str] = "Inbox"
LIBRARY_DIR_NAME: Final[str] = "Library"


class PlatformDirectoryResolver(DirectoryResolver):
    """Map categories onto home-relative folders and the system temp dir.

    Defaults:
    - Documents: ``~/Documents``
    - Inbox: ``<Documents>/Inbox``
    - Library: ``~/Library``
    - Temp: :func:`tempfile.gettempdir`

    Explicit overrides win over the defaults and must be absolute.
    """

    _overrides: dict[DirectoryCategory, Path]
    _home: Path | None
    _temp_dir: Callable[[], str]

    def __init__(
        self,
        *,
        overrides: Mapping[DirectoryCategory, Path | str] | None = None,
        home: Path | None = None,
        temp_dir: Callable[[], str] = tempfile.gettempdir,
    ) -> None:
        self._overrides = {
            category: Path(value).expanduser() for category, value in (overrides or {}).items()
        }
        self._home = home
        self._temp_dir = temp_dir

    @classmethod
    def from_config(cls, config: "Config", *, home: Path | None = None) -> "PlatformDirectoryResolver":
        """Build a resolver honoring the directory overrides in ``config``."""

        return cls(overrides=config.directory_overrides(), home=home)

    def resolve(self, category: DirectoryCategory) -> Path:
        override = self._overrides.get(category)
        if override is not None:
            if not override.is_absolute():
                raise ConfigurationError(
                    f"Override for '{category.name.lower()}' must be an absolute path",
                    path=override,
                )
            return override

        if category is DirectoryCategory.DOCUMENTS:
            return self._home_dir() / DOCUMENTS_DIR_NAME
        if category is DirectoryCategory.INBOX:
            return self.resolve(DirectoryCategory.DOCUMENTS) / INBOX_DIR_NAME
        if category is DirectoryCategory.LIBRARY:
            return self._home_dir() / LIBRARY_DIR_NAME
        return self._temp_path()

    def _home_dir(self) -> Path:
        if self._home is not None:
            return self._home
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as exc:
            raise ConfigurationError("Cannot determine the home directory") from exc
        if not home.is_absolute():
            raise ConfigurationError("Home directory is not absolute", path=home)
        return home

    def _temp_path(self) -> Path:
        try:
            raw = self._temp_dir()
        except OSError as exc:
            raise ConfigurationError("No usable temporary directory") from exc
        return Path(raw).resolve()


__all__ = ["PlatformDirectoryResolver"]
