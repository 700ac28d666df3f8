"""Application service wiring configuration and adapters into the file service."""

from __future__ import annotations

from logging import Logger

from appfiles.config.config import Config
from appfiles.config.paths import default_log_file
from appfiles.features.directories import (
    DirectoryCategory,
    DirectoryFileService,
    DirectoryResolver,
    FileSystemGateway,
    LocalFileSystemGateway,
    PlatformDirectoryResolver,
)
from appfiles.platform.logging import logger as default_logger
from appfiles.platform.logging import setup_logger


def build_directory_file_service(
    config: Config | None = None,
    *,
    filesystem: FileSystemGateway | None = None,
    resolver: DirectoryResolver | None = None,
    logger: Logger | None = None,
) -> DirectoryFileService:
    """Build a service backed by the local file system.

    Every category is resolved once up front so that a missing home or
    temp directory fails here with ``ConfigurationError`` instead of on the
    first file operation.

    Args:
        config: Loaded configuration. Defaults to :meth:`Config.load`.
        filesystem: Gateway override, e.g. an in-memory fake.
        resolver: Resolver override; otherwise built from ``config``.
        logger: Logger override; otherwise the shared ``appfiles`` logger,
            writing to ``config.log_file`` or, with ``file_logging`` set, to
            :func:`default_log_file`.

    Raises:
        ConfigurationError: If the configuration or a category location is unusable.
    """

    active_config = config or Config.load()
    service_logger = logger
    if service_logger is None:
        if active_config.log_file is not None:
            service_logger = setup_logger(log_file=active_config.log_file)
        elif active_config.file_logging:
            service_logger = setup_logger(log_file=default_log_file())
        else:
            service_logger = default_logger

    service = DirectoryFileService(
        filesystem=filesystem or LocalFileSystemGateway(),
        resolver=resolver or PlatformDirectoryResolver.from_config(active_config),
        logger=service_logger,
    )
    for category in DirectoryCategory:
        _ = service.resolve(category)
    return service


__all__ = ["build_directory_file_service"]
