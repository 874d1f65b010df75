"""Shared fixtures for envlayer tests.

Every test runs against a restorable copy of ``os.environ`` and a fresh
process engine, so env files loaded by one test never leak into another.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

import envlayer
from envlayer import OverlayEngine, OverlaySettings


@pytest.fixture(autouse=True)
def isolated_environ():
    """Restore os.environ and drop the process engine after each test."""
    with patch.dict(os.environ):
        yield
    envlayer.reset_engine()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_env(workdir: Path):
    """Write an env file relative to the working directory and return its path."""

    def _write(name: str, content: str) -> Path:
        path = workdir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def engine(workdir: Path) -> OverlayEngine:
    """An engine with no path resolvers and ``.env`` in the working directory."""
    return OverlayEngine(
        OverlaySettings(env_file=workdir / ".env"),
        path_resolvers={},
    )


@pytest.fixture
def installed_engine(engine: OverlayEngine) -> OverlayEngine:
    """``engine`` installed as the process engine behind the facade."""
    envlayer.set_engine(engine)
    return engine
