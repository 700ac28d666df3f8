"""Configuration management for appfiles."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from appfiles.config.paths import default_config_path
from appfiles.features.directories.domain.errors import ConfigurationError
from appfiles.features.directories.domain.models import DirectoryCategory
from appfiles.platform.logging import logger


# Environment variables that take precedence over values read from the file.
ENV_OVERRIDES: Final[dict[str, str]] = {
    "documents_dir": "APPFILES_DOCUMENTS_DIR",
    "inbox_dir": "APPFILES_INBOX_DIR",
    "library_dir": "APPFILES_LIBRARY_DIR",
    "temp_dir": "APPFILES_TEMP_DIR",
}

_CATEGORY_FIELDS: Final[dict[DirectoryCategory, str]] = {
    DirectoryCategory.DOCUMENTS: "documents_dir",
    DirectoryCategory.INBOX: "inbox_dir",
    DirectoryCategory.LIBRARY: "library_dir",
    DirectoryCategory.TEMP: "temp_dir",
}


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Directory overrides and logging destination."""

    # Per-category directory overrides; None keeps the platform default
    documents_dir: Path | None = _path_field()
    inbox_dir: Path | None = _path_field()
    library_dir: Path | None = _path_field()
    temp_dir: Path | None = _path_field()

    # Log file path; file_logging alone writes to default_log_file()
    log_file: Path | None = _path_field()
    file_logging: bool = False

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata.

        Only fields flagged with ``metadata={"path": True}`` are converted;
        empty strings become ``None``.
        """
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                stripped = value.strip()
                setattr(self, f.name, Path(stripped).expanduser() if stripped else None)

    def directory_overrides(self) -> dict[DirectoryCategory, Path]:
        """Return the categories whose location is pinned by configuration."""

        overrides: dict[DirectoryCategory, Path] = {}
        for category, name in _CATEGORY_FIELDS.items():
            value = getattr(self, name)
            if value is not None:
                overrides[category] = value
        return overrides

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, object],
        *,
        env: Mapping[str, str] | None = None,
    ) -> "Config":
        """Build a config from raw TOML values and apply environment overrides.

        Raises:
            ConfigurationError: If ``values`` carries unknown keys or mistyped values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(unknown)}")

        merged: dict[str, object] = dict(values)
        mapping = env if env is not None else os.environ
        for key, env_var in ENV_OVERRIDES.items():
            candidate = (mapping.get(env_var) or "").strip()
            if candidate:
                merged[key] = candidate

        path_keys = {f.name for f in fields(cls) if f.metadata.get("path", False)}
        for key, value in merged.items():
            if key in path_keys:
                if value is not None and not isinstance(value, (str, Path)):
                    raise ConfigurationError(
                        f"Configuration value '{key}' must be a path string, got {type(value).__name__}"
                    )
            elif not isinstance(value, bool):
                raise ConfigurationError(
                    f"Configuration value '{key}' must be a boolean, got {type(value).__name__}"
                )
        return cls(**merged)  # pyright: ignore[reportArgumentType]

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        *,
        env: Mapping[str, str] | None = None,
    ) -> "Config":
        """Load configuration from a TOML file.

        The default location is cached after the first load; explicit paths
        or environments are always read fresh. A missing file yields the
        defaults. Nothing is written back to disk.

        Args:
            path: Explicit config file. Defaults to :func:`default_config_path`.
            env: Environment mapping used for overrides. Defaults to ``os.environ``.

        Returns:
            Config: Loaded configuration object.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        use_cache = path is None and env is None
        if use_cache and cls._instance is not None:
            return cls._instance

        config_file = Path(path).expanduser().resolve() if path is not None else default_config_path(env)

        values: dict[str, object] = {}
        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    values = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise ConfigurationError(f"Invalid configuration file: {e}", path=config_file) from e
            logger.debug("Configuration loaded from %s", config_file)
        else:
            logger.debug("No configuration file at %s; using defaults", config_file)

        instance = cls.from_mapping(values, env=env)
        if use_cache:
            cls._instance = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget the cached default configuration."""

        cls._instance = None


__all__ = ["Config", "ENV_OVERRIDES"]
