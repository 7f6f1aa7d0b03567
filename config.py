"""Configuration settings for datetasks."""
import logging
import os
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

import structlog
from dateutil import tz


@dataclass
class Config:
    """Application configuration settings.

    Centralized configuration to avoid hardcoded values throughout the codebase.
    """
    # Zone used for date strings and datetimes that carry no offset
    naive_timezone: str = "UTC"

    log_level: str = "WARNING"

    # Colors
    color_primary: str = "#0abdc6"  # Cyan - primary accent
    color_accent: str = "#ff006e"  # Pink - errors
    color_secondary: str = "#8b5cf6"  # Purple - secondary accent
    color_bg_dark: str = "#1a1a2e"  # Dark background
    color_bg_medium: str = "#2d2d44"  # Medium background
    color_text: str = "#e2e8f0"  # Light text

    @property
    def naive_tzinfo(self) -> tzinfo:
        """Resolve naive_timezone, falling back to UTC for unknown names."""
        return tz.gettz(self.naive_timezone) or tz.UTC

    @classmethod
    def load(cls) -> 'Config':
        """
        Load configuration.

        Defaults can be overridden with the DATETASKS_NAIVE_TZ and
        DATETASKS_LOG_LEVEL environment variables.

        Returns:
            Config instance with default or loaded values
        """
        defaults = cls()
        return cls(
            naive_timezone=os.environ.get("DATETASKS_NAIVE_TZ", defaults.naive_timezone),
            log_level=os.environ.get("DATETASKS_LOG_LEVEL", defaults.log_level).upper(),
        )


# stdlib loggers that structlog events are routed to
LOGGER_NAMES = ("app", "business_logic")


def configure_logging(level: Optional[str] = None) -> None:
    """
    Route structlog through stdlib logging at the given level.

    The package loggers only carry a NullHandler, so nothing is printed
    unless the host application attaches a handler of its own.
    """
    level_name = (level or config.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    for name in LOGGER_NAMES:
        stdlib_logger = logging.getLogger(name)
        stdlib_logger.setLevel(numeric_level)
        if not any(isinstance(handler, logging.NullHandler) for handler in stdlib_logger.handlers):
            stdlib_logger.addHandler(logging.NullHandler())


# Global config instance
config = Config.load()
configure_logging()
