"""Exceptions raised by envlayer.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context for debugging

Usage:
    from envlayer.exceptions import EnvlayerError, NotFoundError

    try:
        token = envlayer.must_get("API_TOKEN")
    except NotFoundError as e:
        print(e.to_dict())
"""

from envlayer.exceptions.base import (
    EnvlayerError,
    FileAccessError,
    ModuleIdentityError,
    NotFoundError,
    OSWriteError,
    ParseError,
)

__all__ = [
    "EnvlayerError",
    "NotFoundError",
    "FileAccessError",
    "ParseError",
    "OSWriteError",
    "ModuleIdentityError",
]
