"""Overlay engine: env files layered over the OS environment."""

from envlayer.overlay.engine import (
    DEFAULT_PATH_RESOLVERS,
    OverlayEngine,
    PathResolver,
    resolve_user_base,
)

__all__ = [
    "OverlayEngine",
    "PathResolver",
    "DEFAULT_PATH_RESOLVERS",
    "resolve_user_base",
]
