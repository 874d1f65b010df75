"""Overlay engine: an in-memory view of the environment layered over env files.

The engine keeps exactly one *current* KeyStore. It is seeded from the OS
environment by ``bootstrap``/``reload``, extended by ``load`` (which overlays
env files onto the OS environment and then reseeds), and temporarily swapped
for a private copy by ``temporary``/``temp``.

Precedence when loading several files: the OS environment always wins, then
the earliest file that defines a key. Files are applied strictly one at a
time, in the order given.
"""

from __future__ import annotations

import os
import site
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Mapping, Optional, TypeVar

from envlayer.config import EnvLoader, OverlaySettings
from envlayer.exceptions import FileAccessError, NotFoundError, OSWriteError
from envlayer.logger import Logger, get_logger
from envlayer.store import KeyStore

T = TypeVar("T")

PathResolver = Callable[[], Optional[str]]


def resolve_user_base() -> Optional[str]:
    """Resolve the per-user install base (the value PYTHONUSERBASE defaults to)."""
    return site.getuserbase()


DEFAULT_PATH_RESOLVERS: Dict[str, PathResolver] = {
    "PYTHONUSERBASE": resolve_user_base,
}


class OverlayEngine:
    """Overridable view of the process environment.

    Example:
        engine = OverlayEngine(OverlaySettings(test_mode=True))
        engine.load("base.env", "local.env")
        engine.get("DATABASE_URL", "sqlite://")

        with engine.temporary():
            engine.set("DATABASE_URL", "sqlite:///:memory:")
            run_tests()

    Note:
        Calling ``load`` or ``reload`` inside a Temp scope replaces the
        scope's working copy; when the scope exits the pre-Temp store comes
        back and the reload's effect on the in-memory view is lost.
    """

    def __init__(
        self,
        settings: Optional[OverlaySettings] = None,
        loader: Optional[EnvLoader] = None,
        path_resolvers: Optional[Mapping[str, PathResolver]] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self.settings = settings or OverlaySettings.from_env()
        self.loader = loader or EnvLoader(self.settings.resolve_env_file())
        self.path_resolvers: Dict[str, PathResolver] = dict(
            DEFAULT_PATH_RESOLVERS if path_resolvers is None else path_resolvers
        )
        self.logger = logger or get_logger()
        # Guards the identity of the current store, not its contents
        self._lock = threading.RLock()
        self._current = KeyStore()
        self.bootstrap()

    @property
    def current(self) -> KeyStore:
        with self._lock:
            return self._current

    def _swap(self, store: KeyStore) -> KeyStore:
        with self._lock:
            previous = self._current
            self._current = store
        return previous

    def _complete_environment(self, store: KeyStore) -> None:
        for key, resolver in self.path_resolvers.items():
            if os.environ.get(key):
                continue
            try:
                value = resolver()
                if not value:
                    continue
                os.environ[key] = value
            except (OSError, ValueError, RuntimeError) as e:
                self.logger.debug("path variable lookup failed", key=key, error=str(e))
                continue
            store.store(key, value)
            self.logger.debug("path variable resolved", key=key, value=value)

    def bootstrap(self) -> None:
        """Replace the current store with a fresh snapshot of the OS environment."""
        store = KeyStore()
        env_key = self.settings.env_key
        if self.settings.test_mode and not os.environ.get(env_key):
            store.store(env_key, self.settings.test_env_value)

        self._complete_environment(store)

        for key, value in os.environ.items():
            store.store(key, value)

        self._swap(store)
        self.logger.debug("environment loaded", keys=len(store))

    def reload(self) -> None:
        """Reseed from the OS environment, discarding local overrides."""
        self.bootstrap()

    def load(self, *files: str | Path) -> None:
        """Overlay env files onto the environment, in the order given.

        With no arguments the default env file is applied. Otherwise each
        file is checked for existence, applied, and the view reloaded before
        moving on; the first missing file stops the run, keeping whatever the
        earlier files added.

        Raises:
            FileAccessError: A file is missing or unreadable
            ParseError: A file contains malformed statements
        """
        if not files:
            path = self.loader.default_path()
            added = self.loader.apply()
            self.reload()
            self.logger.info("env file loaded", path=str(path), added=len(added))
            return

        for file in files:
            try:
                os.stat(file)
            except FileNotFoundError as e:
                raise FileAccessError(str(file), "no such file", code="ENV_FILE_NOT_FOUND") from e
            except OSError as e:
                raise FileAccessError(str(file), e.strerror or str(e)) from e

            added = self.loader.apply(file)
            self.reload()
            self.logger.info("env file loaded", path=str(file), added=len(added))

    def lookup(self, key: str) -> tuple[str, bool]:
        return self.current.lookup(key)

    def get(self, key: str, default: str = "") -> str:
        value, found = self.current.lookup(key)
        return value if found else default

    def must_get(self, key: str) -> str:
        """Return the value for ``key``; raise NotFoundError when absent."""
        value, found = self.current.lookup(key)
        if not found:
            raise NotFoundError(key)
        return value

    def set(self, key: str, value: str) -> None:
        """Set a value in the view only; the OS environment is not touched."""
        self.current.store(key, value)

    def must_set(self, key: str, value: str) -> None:
        """Set a value in the OS environment, then in the view.

        Raises:
            OSWriteError: The OS rejected the key or value
        """
        try:
            os.environ[key] = value
        except (ValueError, OSError) as e:
            raise OSWriteError(key, str(e)) from e
        self.current.store(key, value)

    def unset(self, key: str) -> None:
        """Remove a key from the view only."""
        self.current.delete(key)

    def map(self) -> Dict[str, str]:
        """Return a copy of every key/value pair in the view."""
        return self.current.snapshot()

    def environ(self) -> List[str]:
        """Return the view as ``KEY=VALUE`` strings, in no particular order."""
        return [f"{key}={value}" for key, value in self.current.range()]

    @contextmanager
    def temporary(self) -> Iterator[KeyStore]:
        """Swap in a private copy of the current store for the ``with`` block.

        The store that was current on entry is restored on exit, whether the
        block returns or raises. Scopes nest; each restores its own
        enclosing store.
        """
        with self._lock:
            working = self._current.clone()
            previous = self._swap(working)
        try:
            yield working
        finally:
            self._swap(previous)

    def temp(self, body: Callable[..., T], *args, **kwargs) -> T:
        """Run ``body`` inside ``temporary()`` and return its result."""
        with self.temporary():
            return body(*args, **kwargs)

    # Toolchain helpers

    def python_bin(self) -> str:
        return self.get("PYTHON_BIN", "python")

    def user_base(self) -> str:
        return self.get("PYTHONUSERBASE", "")

    def python_paths(self) -> List[str]:
        """Entries of PYTHONPATH, split on the platform path separator."""
        return [p for p in self.get("PYTHONPATH", "").split(os.pathsep) if p]

    def in_python_path(self, cwd: Optional[Path] = None) -> bool:
        """Whether ``cwd`` (default: the working directory) is under a PYTHONPATH entry."""
        here = (cwd or Path.cwd()).resolve()
        for entry in self.python_paths():
            if here.is_relative_to(Path(entry).resolve()):
                return True
        return False
