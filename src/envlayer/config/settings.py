"""Dataclass-based settings for the overlay engine.

Environment variable overrides with sensible defaults, read from the OS
environment under a parameterized prefix (default: ENVLAYER).
"""

import os
from dataclasses import dataclass
from pathlib import Path

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class OverlaySettings:
    """Overlay engine configuration

    Attributes:
        env_file: Default env file loaded when ``load()`` gets no files
        env_key: Key that names the running environment (e.g. APP_ENV)
        test_env_value: Value injected for ``env_key`` in test mode
        test_mode: Whether the process is running under a test harness
    """

    env_file: Path = Path(".env")
    env_key: str = "APP_ENV"
    test_env_value: str = "test"
    test_mode: bool = False

    def __post_init__(self):
        if isinstance(self.env_file, str):
            self.env_file = Path(self.env_file)
        if not self.env_key:
            raise ValueError("env_key must be a non-empty string")

    @classmethod
    def from_env(cls, prefix: str = "ENVLAYER", **overrides) -> "OverlaySettings":
        """Load overlay settings from environment variables

        Args:
            prefix: Environment variable prefix
            **overrides: Explicit values that take precedence over the environment

        Environment variables:
            {prefix}_ENV_FILE: Default env file path
            {prefix}_ENV_KEY: Name of the environment key
            {prefix}_TEST_ENV_VALUE: Value injected in test mode
            {prefix}_TEST_MODE: "true" to enable test mode
        """
        values = {
            "env_file": Path(os.environ.get(f"{prefix}_ENV_FILE", ".env")),
            "env_key": os.environ.get(f"{prefix}_ENV_KEY", "APP_ENV"),
            "test_env_value": os.environ.get(f"{prefix}_TEST_ENV_VALUE", "test"),
            "test_mode": _env_flag(os.environ.get(f"{prefix}_TEST_MODE", "false")),
        }
        values.update(overrides)
        return cls(**values)

    def resolve_env_file(self) -> Path:
        """Absolute default env file path, relative paths resolved against cwd."""
        if self.env_file.is_absolute():
            return self.env_file
        return Path.cwd() / self.env_file
