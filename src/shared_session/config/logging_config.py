"""Centralized logging configuration for shared-session.

Provides consistent, configurable logging with environment-based control
over log level and format.
"""

import logging
import logging.config
import os
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "redis",
        "asyncio",
    ]
    
    @classmethod
    def build_config(cls, level: str, log_format: str) -> Dict[str, Any]:
        """Build a dictConfig mapping for the given level and format.
        
        Args:
            level: Log level name
            log_format: One of simple, detailed or json
            
        Returns:
            Logging configuration dictionary
        """
        level = LogLevel(level.upper()).value
        format_string = FORMAT_STRINGS[LogFormat(log_format.lower())]
        
        logging_config = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": format_string,
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                "shared_session": {
                    "level": level,
                    "handlers": ["console"],
                    "propagate": False,
                },
            },
        }
        
        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }
        
        return logging_config
    
    @classmethod
    def configure(cls, level: Optional[str] = None, log_format: Optional[str] = None) -> None:
        """Configure logging from arguments, falling back to environment variables."""
        level = level or os.getenv("LOG_LEVEL", LogLevel.INFO.value)
        log_format = log_format or os.getenv("LOG_FORMAT", LogFormat.SIMPLE.value)
        
        logging.config.dictConfig(cls.build_config(level, log_format))
        
        logger = logging.getLogger(__name__)
        logger.debug(f"Logging configured: level={level}, format={log_format}")
    
    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.
        
        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))


def setup_logging(settings=None) -> None:
    """Setup logging configuration.
    
    Uses the given SharedSessionSettings when provided, environment
    variables otherwise. Call once at application startup.
    """
    if settings is not None:
        LoggingConfig.configure(settings.log_level.value, settings.log_format.value)
    else:
        LoggingConfig.configure()


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name."""
    return logging.getLogger(name)
