"""Thread-safe flat key/value store.

Holds one snapshot of environment variables. Every operation takes the
internal lock, so callers never need external locking.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterator, Mapping, Optional, Tuple


class KeyStore:
    """Thread-safe ``str -> str`` mapping.

    Absence is a value, never an error: ``lookup`` returns a found flag and
    ``get`` returns a default.

    Example:
        store = KeyStore({"HOME": "/root"})
        store.store("APP_ENV", "test")
        value, found = store.lookup("APP_ENV")
        for key, value in store.range():
            ...
    """

    def __init__(self, initial: Optional[Mapping[str, str]] = None) -> None:
        self._lock = threading.RLock()
        self._data: Dict[str, str] = dict(initial) if initial else {}

    def lookup(self, key: str) -> Tuple[str, bool]:
        """Return ``(value, True)``, or ``("", False)`` when the key is absent."""
        with self._lock:
            if key in self._data:
                return self._data[key], True
        return "", False

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        with self._lock:
            return self._data.get(key, default)

    def store(self, key: str, value: str) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def range(self) -> Iterator[Tuple[str, str]]:
        """Iterate ``(key, value)`` pairs.

        The pairs come from a copy taken on the first ``next()``, so writers
        are never blocked by a slow consumer and stopping early is safe.
        Order is unspecified.
        """
        with self._lock:
            items = list(self._data.items())
        yield from items

    def snapshot(self) -> Dict[str, str]:
        """Return an independent ``dict`` copy of the contents."""
        with self._lock:
            return dict(self._data)

    def clone(self) -> "KeyStore":
        """Return a new store with a full, unlinked copy of the contents."""
        return KeyStore(self.snapshot())

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def __repr__(self) -> str:
        return f"KeyStore(keys={len(self)})"
