"""Logging setup for the storage client.

The client is a library embedded in UI processes, so configuration is
scoped to the ``neo_storage_client`` logger tree and never touches the
root logger. Verbosity, format and level come from
``STORAGE_CLIENT_LOG_VERBOSITY``, ``STORAGE_CLIENT_LOG_FORMAT`` and
``STORAGE_CLIENT_LOG_LEVEL``.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Optional

PACKAGE_LOGGER = "neo_storage_client"
ENV_PREFIX = "STORAGE_CLIENT_LOG_"


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Warnings and above
    VERBOSE = "VERBOSE"  # Session and upload lifecycle
    DEBUG = "DEBUG"      # Every request, handle and stale response


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMATS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def get_log_level_from_verbosity(verbosity: str) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: LogLevel.ERROR.value,
        LogVerbosity.NORMAL: LogLevel.WARNING.value,
        LogVerbosity.VERBOSE: LogLevel.INFO.value,
        LogVerbosity.DEBUG: LogLevel.DEBUG.value,
    }
    try:
        return verbosity_map[LogVerbosity(verbosity.upper())]
    except ValueError:
        return LogLevel.WARNING.value


class LoggingConfig:
    """Builds and applies the client's logging configuration."""

    # Per-request chatter (handles, correlation ids), quieted unless debugging
    PER_REQUEST_MODULES = [
        f"{PACKAGE_LOGGER}.platform.resources",
        f"{PACKAGE_LOGGER}.platform.gateway",
    ]

    # Third-party transports only report errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
    ]

    @classmethod
    def build(
        cls,
        verbosity: Optional[str] = None,
        log_format: Optional[str] = None,
        level: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build a dictConfig mapping; arguments override the environment."""
        verbosity = (verbosity or os.getenv(f"{ENV_PREFIX}VERBOSITY", LogVerbosity.NORMAL.value)).upper()
        log_format = (log_format or os.getenv(f"{ENV_PREFIX}FORMAT", LogFormat.SIMPLE.value)).lower()
        level = level or os.getenv(f"{ENV_PREFIX}LEVEL")

        effective_level = get_log_level_from_verbosity(verbosity)
        if level and level.upper() in LogLevel.__members__:
            effective_level = level.upper()

        try:
            format_string = FORMATS[LogFormat(log_format)]
        except ValueError:
            format_string = FORMATS[LogFormat.SIMPLE]

        per_request_level = LogLevel.DEBUG.value if effective_level == LogLevel.DEBUG.value else LogLevel.WARNING.value
        loggers: Dict[str, Any] = {
            PACKAGE_LOGGER: {
                "level": effective_level,
                "handlers": ["client_console"],
                "propagate": False,
            },
        }
        for module in cls.PER_REQUEST_MODULES:
            loggers[module] = {"level": per_request_level}
        for module in cls.ERROR_ONLY_MODULES:
            loggers[module] = {"level": LogLevel.ERROR.value}

        return {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "client": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "client_console": {
                    "class": "logging.StreamHandler",
                    "formatter": "client",
                    "stream": "ext://sys.stderr",
                },
            },
            "loggers": loggers,
        }

    @classmethod
    def configure(cls, **overrides: Optional[str]) -> None:
        """Apply the configuration built from the environment and ``overrides``."""
        config = cls.build(**overrides)
        logging.config.dictConfig(config)
        logging.getLogger(__name__).debug(
            f"Logging configured: level={config['loggers'][PACKAGE_LOGGER]['level']}"
        )


def setup_logging(**overrides: Optional[str]) -> None:
    """Configure client logging; runs once when the package is imported."""
    LoggingConfig.configure(**overrides)


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the client's logger tree."""
    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
