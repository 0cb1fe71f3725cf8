"""
Logger implementation for flexsum internal diagnostics.

Wraps stdlib logging with an optional stderr handler.
"""

import logging
import sys
from typing import Any, ClassVar

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig


class FlexsumLogger(ILogger):
    """Logger implementation using stdlib logging."""

    LEVEL_MAP: ClassVar[dict[str, int]] = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
    }

    def __init__(
        self,
        name: str = "flexsum",
        level: str = "warning",
        console_enabled: bool = False,
    ) -> None:
        """
        Initialize logger.

        Args:
            name: Logger name
            level: Initial log level (debug, info, warning, error)
            console_enabled: Enable stderr output
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(self.LEVEL_MAP.get(level.lower(), logging.WARNING))

        self._console_handler: logging.Handler | None = None

        if console_enabled:
            self._logger.handlers.clear()
            self._logger.propagate = False
            console = logging.StreamHandler(sys.stderr)
            console.setFormatter(
                logging.Formatter(
                    "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            self._logger.addHandler(console)
            self._console_handler = console

    @classmethod
    def from_config(cls, config: LoggingConfig, name: str = "flexsum") -> "FlexsumLogger":
        """Build a logger from the logging config section."""
        return cls(name=name, level=config.level, console_enabled=config.console)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an info-level message."""
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error-level message."""
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        """Set log level."""
        self._logger.setLevel(self.LEVEL_MAP.get(level.lower(), logging.WARNING))


class NullLogger(ILogger):
    """No-op logger for testing or when logging is disabled."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """No-op."""
        pass

    def set_level(self, level: str) -> None:
        """No-op."""
        pass


_default_logger: ILogger | None = None


def set_default_logger(logger: ILogger | None) -> None:
    """Install the logger used where none is injected; None restores the no-op."""
    global _default_logger
    _default_logger = logger


def get_default_logger() -> ILogger:
    """Return the installed default logger, or a NullLogger."""
    return _default_logger if _default_logger is not None else NullLogger()
