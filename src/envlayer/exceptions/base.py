"""Base exception classes for envlayer.

Every envlayer exception carries structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context (key names, paths, line numbers)
"""

from typing import Any, Dict, Optional


class EnvlayerError(Exception):
    """Base exception for all envlayer errors.

    Attributes:
        code: Machine-readable error code (e.g., "ENV_KEY_NOT_FOUND")
        message: Human-readable error message
        details: Optional additional context for debugging
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(EnvlayerError):
    """A key is absent from the current environment view."""

    def __init__(self, key: str):
        super().__init__(
            code="ENV_KEY_NOT_FOUND",
            message=f"could not find ENV var with {key}",
            details={"key": key},
        )
        self.key = key


class FileAccessError(EnvlayerError):
    """An env file is missing or cannot be accessed.

    The underlying ``OSError`` (if any) is available as ``__cause__``.
    """

    def __init__(self, path: str, reason: str, code: str = "ENV_FILE_ACCESS"):
        super().__init__(
            code=code,
            message=f"cannot access env file {path}: {reason}",
            details={"path": path},
        )
        self.path = path


class ParseError(EnvlayerError):
    """An env file contains lines that are not valid ``KEY=VALUE`` statements."""

    def __init__(self, path: str, lines: list[int]):
        super().__init__(
            code="ENV_FILE_PARSE",
            message=f"could not parse env file {path}",
            details={"path": path, "lines": lines},
        )
        self.path = path
        self.lines = lines


class OSWriteError(EnvlayerError):
    """The OS rejected a write to the process environment."""

    def __init__(self, key: str, reason: str):
        super().__init__(
            code="ENV_OS_WRITE",
            message=f"could not set ENV var {key!r}: {reason}",
            details={"key": key},
        )
        self.key = key


class ModuleIdentityError(EnvlayerError):
    """The module manifest (pyproject.toml) cannot be read or names no project."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(
            code="MODULE_IDENTITY",
            message=message,
            details={"path": path} if path else None,
        )
