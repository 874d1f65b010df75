"""In-memory key/value storage for environment snapshots."""

from envlayer.store.key_store import KeyStore

__all__ = ["KeyStore"]
