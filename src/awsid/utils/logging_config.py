"""Logging configuration for awsid."""

import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

ROOT_LOGGER_NAME = "awsid"

# Third-party loggers that are too chatty below WARNING.
NOISY_LOGGERS = ("boto3", "botocore", "urllib3")


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class LoggingConfig:
    """Configuration for logging system."""

    level: LogLevel = LogLevel.WARNING
    console_colors: bool = True

    @classmethod
    def from_level_name(cls, name: str, verbose: bool = False) -> "LoggingConfig":
        """Build a config from a level name, with --verbose forcing DEBUG."""
        if verbose:
            return cls(level=LogLevel.DEBUG)
        try:
            return cls(level=LogLevel(name.upper()))
        except ValueError:
            return cls()


class ColoredConsoleFormatter(logging.Formatter):
    """Console formatter with colors for different log levels."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def __init__(self, use_colors: bool = True) -> None:
        super().__init__()
        self.use_colors = use_colors and self._supports_color()

    def _supports_color(self) -> bool:
        """Check if the terminal supports colors."""
        return (
            hasattr(sys.stderr, "isatty")
            and sys.stderr.isatty()
            and os.environ.get("TERM") != "dumb"
        )

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")
        if self.use_colors:
            color = self.COLORS.get(record.levelname, "")
            reset = self.COLORS["RESET"]
            formatted = (
                f"{color}[{timestamp}] {record.levelname:<8}{reset} - "
                f"{record.name} - {record.getMessage()}"
            )
        else:
            formatted = f"[{timestamp}] {record.levelname:<8} - {record.name} - {record.getMessage()}"

        if record.exc_info:
            formatted += f"\n{self.formatException(record.exc_info)}"

        return formatted


def setup_logging(config: LoggingConfig) -> logging.Logger:
    """
    Configure the ``awsid`` logger hierarchy.

    A single stderr handler is installed, replacing any earlier one, so
    repeated calls (as in tests) do not duplicate output.

    Returns:
        The configured root ``awsid`` logger
    """
    level = getattr(logging, config.level.value)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.propagate = False

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(ColoredConsoleFormatter(use_colors=config.console_colors))
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    return root_logger
