"""Process-wide environment functions.

Every function delegates to one ``OverlayEngine`` held here. The engine is
built on first use (bootstrap from the OS, then a best-effort load of the
default env file) and can be replaced with ``set_engine`` for tests.

Usage:
    import envlayer

    envlayer.load("base.env", "local.env")
    url = envlayer.get("DATABASE_URL", "sqlite://")

    with envlayer.temporary():
        envlayer.set("DATABASE_URL", "sqlite:///:memory:")
"""

from __future__ import annotations

import sys
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional, TypeVar

from envlayer import identity
from envlayer.config import OverlaySettings
from envlayer.exceptions import FileAccessError
from envlayer.overlay import OverlayEngine
from envlayer.store import KeyStore

T = TypeVar("T")

_engine: Optional[OverlayEngine] = None
_engine_lock = threading.Lock()


def create_engine(settings: Optional[OverlaySettings] = None) -> OverlayEngine:
    """Build an engine and apply the default env file if there is one."""
    engine = OverlayEngine(settings)
    try:
        engine.load()
    except FileAccessError as e:
        engine.logger.debug("no default env file", path=e.path)
    return engine


def get_engine() -> OverlayEngine:
    """Return the process engine, creating it on first use."""
    global _engine
    with _engine_lock:
        if _engine is None:
            _engine = create_engine()
        return _engine


def set_engine(engine: OverlayEngine) -> None:
    """Install ``engine`` as the process engine."""
    global _engine
    with _engine_lock:
        _engine = engine


def reset_engine() -> None:
    """Drop the process engine (primarily for testing); the next call rebuilds it."""
    global _engine
    with _engine_lock:
        _engine = None


def get(key: str, default: str = "") -> str:
    """Value for ``key``, or ``default`` when absent."""
    return get_engine().get(key, default)


def must_get(key: str) -> str:
    """Value for ``key``; raises NotFoundError when absent."""
    return get_engine().must_get(key)


def set(key: str, value: str) -> None:  # noqa: A001
    """Set ``key`` for envlayer readers only; the OS environment is untouched."""
    get_engine().set(key, value)


def must_set(key: str, value: str) -> None:
    """Set ``key`` in the OS environment and in envlayer; raises OSWriteError."""
    get_engine().must_set(key, value)


def map() -> Dict[str, str]:  # noqa: A001
    """Copy of every key/value pair."""
    return get_engine().map()


def environ() -> List[str]:
    """Every pair as a ``KEY=VALUE`` string, in no particular order."""
    return get_engine().environ()


@contextmanager
def temporary() -> Iterator[KeyStore]:
    """Work on a private copy of the environment for the ``with`` block."""
    with get_engine().temporary() as store:
        yield store


def temp(body: Callable[..., T], *args, **kwargs) -> T:
    """Run ``body`` against a private copy of the environment.

    Changes made by ``body`` through ``set``/``must_set`` are dropped from the
    envlayer view afterwards (``must_set`` still leaves its OS write behind).
    Do not call ``load`` or ``reload`` from ``body``.
    """
    return get_engine().temp(body, *args, **kwargs)


def reload() -> None:
    """Reseed from the OS environment, dropping ``set`` overrides."""
    get_engine().reload()


def load(*files: str | Path) -> None:
    """Apply env files in order (the default file when none are given)."""
    get_engine().load(*files)


def python_bin() -> str:
    return get_engine().python_bin()


def user_base() -> str:
    return get_engine().user_base()


def python_paths() -> List[str]:
    return get_engine().python_paths()


def in_python_path() -> bool:
    return get_engine().in_python_path()


def current_package() -> str:
    """Dotted package path of the working directory, using PYTHONPATH then sys.path."""
    return identity.current_package(search_paths=python_paths() + sys.path)


def current_module() -> str:
    """Project name from the nearest pyproject.toml, else ``current_package()``."""
    return identity.current_module(search_paths=python_paths() + sys.path)


__all__ = [
    "create_engine",
    "get_engine",
    "set_engine",
    "reset_engine",
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
]
