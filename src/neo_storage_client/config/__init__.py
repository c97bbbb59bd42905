"""Configuration and logging for the storage client."""

from .logging_config import (
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    LogFormat,
    setup_logging,
    get_logger,
)
from .settings import (
    ClientSettings,
    get_settings,
    DEFAULT_API_BASE,
    DEFAULT_MAX_FILE_SIZE_BYTES,
)

__all__ = [
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "LogFormat",
    "setup_logging",
    "get_logger",
    "ClientSettings",
    "get_settings",
    "DEFAULT_API_BASE",
    "DEFAULT_MAX_FILE_SIZE_BYTES",
]
