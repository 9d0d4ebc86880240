"""Configuration helpers for realbrand-commons."""

from .logging_config import (
    LogFormat,
    LogLevel,
    LogVerbosity,
    LoggingConfig,
    get_logger,
    setup_logging,
)

__all__ = [
    "LogFormat",
    "LogLevel",
    "LogVerbosity",
    "LoggingConfig",
    "get_logger",
    "setup_logging",
]
