"""
Logger interface for envlayer.

Abstract base class defining the logging contract used by the overlay
engine, so tests and host applications can plug in their own logger.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Abstract base class for logging interface.

    Example:
        class ListLogger(Logger):
            def debug(self, message: str, **kwargs: Any) -> None:
                self.records.append(("DEBUG", message, kwargs))
            # ... implement other methods
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Log a debug message.

        Args:
            message: The message to log
            **kwargs: Additional key-value pairs to include in the log
        """

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        """Log an info message."""

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        """Log a warning message."""

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        """Log an error message."""

    @abstractmethod
    def get_session_id(self) -> str:
        """Get the session ID attached to every record of this logger."""
