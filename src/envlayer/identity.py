"""Module and package identity of the working directory.

``current_module`` reads the project name from the nearest pyproject.toml;
``current_package`` derives a dotted import path from the search paths.
"""

from __future__ import annotations

import sys
import tomllib
from pathlib import Path
from typing import Optional, Sequence

from envlayer.exceptions import ModuleIdentityError

MANIFEST_NAME = "pyproject.toml"


def find_manifest(start: Optional[Path] = None) -> Optional[Path]:
    """Walk up from ``start`` until a pyproject.toml is found."""
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / MANIFEST_NAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:  # Reached filesystem root
            return None
        current = parent


def current_package(
    cwd: Optional[Path] = None,
    search_paths: Optional[Sequence[str]] = None,
) -> str:
    """Dotted import path of ``cwd`` relative to the first search path containing it.

    Search paths default to ``sys.path``. Falls back to the directory name.
    """
    here = (cwd or Path.cwd()).resolve()
    paths = sys.path if search_paths is None else search_paths
    for entry in paths:
        if not entry:
            continue
        root = Path(entry).resolve()
        if root != here and here.is_relative_to(root):
            return ".".join(here.relative_to(root).parts)
    return here.name


def current_module(
    cwd: Optional[Path] = None,
    search_paths: Optional[Sequence[str]] = None,
) -> str:
    """Project name from the nearest pyproject.toml, else ``current_package()``.

    Raises:
        ModuleIdentityError: The manifest exists but is unreadable, malformed
            or has no ``[project].name``
    """
    manifest = find_manifest(cwd)
    if manifest is None:
        return current_package(cwd, search_paths)

    try:
        with open(manifest, "rb") as f:
            data = tomllib.load(f)
    except OSError as e:
        raise ModuleIdentityError(f"{MANIFEST_NAME} cannot be read", str(manifest)) from e
    except tomllib.TOMLDecodeError as e:
        raise ModuleIdentityError(f"{MANIFEST_NAME} is malformed: {e}", str(manifest)) from e

    name = data.get("project", {}).get("name")
    if not isinstance(name, str) or not name:
        raise ModuleIdentityError(f"{MANIFEST_NAME} has no project name", str(manifest))
    return name
