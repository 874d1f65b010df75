"""envlayer - an overridable view of environment variables layered over env files.

This package provides:
- facade: process-wide get/set/load/temp functions (re-exported here)
- overlay: the OverlayEngine behind those functions
- store: thread-safe key/value store holding one environment snapshot
- config: typed settings and the python-dotenv backed env file loader
- logger: structured logging with session tracking and JSON support
- exceptions: coded exception classes with structured error info
- identity: module/package name of the working directory
"""

__version__ = "1.0.0"

from envlayer.config import EnvLoader, OverlaySettings
from envlayer.exceptions import (
    EnvlayerError,
    FileAccessError,
    ModuleIdentityError,
    NotFoundError,
    OSWriteError,
    ParseError,
)
from envlayer.facade import (
    create_engine,
    current_module,
    current_package,
    environ,
    get,
    get_engine,
    in_python_path,
    load,
    map,
    must_get,
    must_set,
    python_bin,
    python_paths,
    reload,
    reset_engine,
    set,
    set_engine,
    temp,
    temporary,
    user_base,
)
from envlayer.logger import Logger, StructuredLogger, create_logger, get_logger
from envlayer.overlay import OverlayEngine
from envlayer.store import KeyStore

__all__ = [
    "__version__",
    # Facade
    "get",
    "must_get",
    "set",
    "must_set",
    "map",
    "environ",
    "temporary",
    "temp",
    "reload",
    "load",
    "python_bin",
    "user_base",
    "python_paths",
    "in_python_path",
    "current_package",
    "current_module",
    # Engine access
    "create_engine",
    "get_engine",
    "set_engine",
    "reset_engine",
    # Core types
    "OverlayEngine",
    "KeyStore",
    # Config
    "EnvLoader",
    "OverlaySettings",
    # Logger
    "Logger",
    "StructuredLogger",
    "create_logger",
    "get_logger",
    # Exceptions
    "EnvlayerError",
    "NotFoundError",
    "FileAccessError",
    "ParseError",
    "OSWriteError",
    "ModuleIdentityError",
]
