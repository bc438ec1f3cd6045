"""
Log sinks for podbuild.

podman's stdout and stderr are streamed line by line into an ILogger, so the
console handler is the user's live view of a build. The optional file
handler keeps a rotating history of every podman run.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import IO, Any

from ..core.interfaces.logger import ILogger
from ..core.models.config import LoggingConfig

DEFAULT_LOG_FILE = Path.home() / ".podbuild" / "podbuild.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 3

# podman output is relayed to the console verbatim
CONSOLE_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"


def _parse_level(level: str) -> int:
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


class PodbuildLogger(ILogger):
    """
    ILogger backed by a stdlib logger with its own handlers.

    The logger itself passes everything; each handler filters by level so
    that set_level() can raise or lower verbosity after construction.
    """

    def __init__(
        self,
        name: str = "podbuild",
        level: str = "info",
        console_enabled: bool = True,
        file_enabled: bool = False,
        log_file: Path | None = None,
        stream: IO[str] | None = None,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()

        self._handlers: list[logging.Handler] = []
        threshold = _parse_level(level)

        if console_enabled:
            self._add(logging.StreamHandler(stream or sys.stderr), CONSOLE_FORMAT, threshold)

        if file_enabled:
            path = log_file or DEFAULT_LOG_FILE
            path.parent.mkdir(parents=True, exist_ok=True)
            rotating = RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS)
            self._add(rotating, FILE_FORMAT, threshold)

    @classmethod
    def from_config(cls, config: LoggingConfig, log_file: Path | None = None) -> PodbuildLogger:
        """Build a logger from the [logging] config section."""
        return cls(
            level=config.level,
            console_enabled=config.console,
            file_enabled=config.file,
            log_file=log_file,
        )

    def _add(self, handler: logging.Handler, fmt: str, level: int) -> None:
        handler.setFormatter(logging.Formatter(fmt))
        handler.setLevel(level)
        self._logger.addHandler(handler)
        self._handlers.append(handler)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        threshold = _parse_level(level)
        for handler in self._handlers:
            handler.setLevel(threshold)

    def close(self) -> None:
        """Flush and detach all handlers."""
        for handler in self._handlers:
            self._logger.removeHandler(handler)
            handler.close()
        self._handlers.clear()


class NullLogger(ILogger):
    """Discards everything. Used when a host tool wants podbuild silent."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
