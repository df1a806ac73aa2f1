"""Configuration for shared-session: settings and logging."""

from .logging_config import LogFormat, LogLevel, LoggingConfig, get_logger, setup_logging
from .settings import SharedSessionSettings, get_settings

__all__ = [
    "SharedSessionSettings",
    "get_settings",
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    "setup_logging",
    "get_logger",
]
