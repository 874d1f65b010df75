"""Configuration Module for envlayer

Example:
    from envlayer.config import EnvLoader, OverlaySettings

    settings = OverlaySettings.from_env(prefix="ENVLAYER")
    EnvLoader(settings.resolve_env_file()).apply()
"""

from envlayer.config.env_loader import EnvLoader
from envlayer.config.settings import OverlaySettings

__all__ = [
    "EnvLoader",
    "OverlaySettings",
]
