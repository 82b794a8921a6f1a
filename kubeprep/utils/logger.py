"""Centralized logging for kubeprep.

Every step of a provisioning run reports through here so the console
transcript reads as one sequence. The logger must be configured once, by
the CLI, before any step runs.

Usage:
    from kubeprep.utils.logger import Logger

    Logger.configure(level="INFO", timestamps=False)

    log = Logger.get("network")
    log.info("Guessing network interfaces...")
"""

import logging
import sys
from enum import Enum
from typing import TextIO


class LogLevel(Enum):
    """Log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

    def to_logging_level(self) -> int:
        """Convert to Python logging level."""
        level: int = getattr(logging, self.value)
        return level


class LoggerNotConfiguredError(Exception):
    """Raised when trying to use Logger before calling Logger.configure()."""

    def __init__(self) -> None:
        super().__init__(
            "Logger not configured. Call Logger.configure() before provisioning."
        )


class Logger:
    """Centralized logging for kubeprep.

    Example:
        >>> Logger.configure(level="DEBUG")
        >>> Logger.get("probe").debug("ping -W 1 -c1 -I eth0 10.0.0.5")
    """

    _configured: bool = False
    _root_name: str = "kubeprep"

    @classmethod
    def configure(
        cls,
        level: str = "INFO",
        output: TextIO | None = None,
        timestamps: bool = False,
    ) -> None:
        """Configure the logger. Must be called before any logging.

        Args:
            level: "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL",
                case-insensitive.
            output: None for stdout, or any file-like object.
            timestamps: Prefix each line with the time (default False).
        """
        log_level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(log_level.to_logging_level())

        for existing_handler in logger.handlers[:]:
            logger.removeHandler(existing_handler)
            existing_handler.close()

        new_handler: logging.Handler
        if output is None:
            new_handler = logging.StreamHandler(sys.stdout)
        elif hasattr(output, "write"):
            new_handler = logging.StreamHandler(output)
        else:
            raise ValueError(f"Invalid output: {type(output)}")

        new_handler.setLevel(log_level.to_logging_level())

        parts = []
        if timestamps:
            parts.append("%(asctime)s")
        parts.append("%(levelname)s")
        parts.append("[%(name)s]")
        parts.append("%(message)s")

        new_handler.setFormatter(logging.Formatter(" ".join(parts)))
        logger.addHandler(new_handler)
        logger.propagate = False

        cls._configured = True

    @classmethod
    def get(cls, name: str | None = None) -> logging.Logger:
        """Get a logger instance.

        Args:
            name: Logger name (appended to "kubeprep."). If None, returns
                the root logger.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        if name:
            return logging.getLogger(f"{cls._root_name}.{name}")
        return logging.getLogger(cls._root_name)

    @classmethod
    def set_level(cls, level: str) -> None:
        """Change log level without reconfiguring.

        Raises:
            LoggerNotConfiguredError: If configure() hasn't been called.
        """
        if not cls._configured:
            raise LoggerNotConfiguredError()

        log_level = LogLevel(level.upper())

        logger = logging.getLogger(cls._root_name)
        logger.setLevel(log_level.to_logging_level())
        for handler in logger.handlers:
            handler.setLevel(log_level.to_logging_level())

    @classmethod
    def is_configured(cls) -> bool:
        """Check if logger has been configured."""
        return cls._configured
