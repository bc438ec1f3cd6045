"""
Logger interface for diagnostic and process output.

The process runner writes podman's stdout to the info channel and,
depending on the command, its stderr to either the info or the error
channel.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """
    Interface for podbuild logging.

    Used for diagnostics and for streaming podman's own output.
    """

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug-level message."""
        pass

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an info-level message."""
        pass

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning-level message."""
        pass

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        """Log an error-level message."""
        pass

    @abstractmethod
    def set_level(self, level: str) -> None:
        """
        Set the logging level.

        Args:
            level: One of 'debug', 'info', 'warning', 'error'
        """
        pass
