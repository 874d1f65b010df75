"""Env file loader backed by python-dotenv.

Parses ``KEY=VALUE`` files and overlays them onto the OS environment.
Variables already present in the environment are never replaced, so when
several files are applied one after another the first file to define a key
wins, and the OS always wins over any file.
"""

from __future__ import annotations

import io
import os
from pathlib import Path
from typing import Dict, MutableMapping, Optional

from dotenv import dotenv_values
from dotenv.parser import Binding, parse_stream

from envlayer.exceptions import FileAccessError, ParseError


def _statement_line(binding: Binding) -> int:
    """Line number of the first non-blank character of a parsed statement."""
    text = binding.original.string
    leading = text[: len(text) - len(text.lstrip())]
    return binding.original.line + leading.count("\n")


class EnvLoader:
    """Parse env files and apply them to the process environment."""

    def __init__(self, default_file: Optional[Path | str] = None, encoding: str = "utf-8") -> None:
        self.default_file = Path(default_file) if default_file else None
        self.encoding = encoding

    def default_path(self) -> Path:
        return self.default_file or Path.cwd() / ".env"

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding=self.encoding)
        except FileNotFoundError as e:
            raise FileAccessError(str(path), "no such file", code="ENV_FILE_NOT_FOUND") from e
        except OSError as e:
            raise FileAccessError(str(path), e.strerror or str(e)) from e

    def parse(self, path: Path | str) -> Dict[str, str]:
        """Parse a file into a dict without touching the environment.

        ``${VAR}`` references are expanded against the OS environment and
        earlier lines of the same file. Bare ``KEY`` lines carry no value and
        are skipped.

        Raises:
            FileAccessError: The file is missing or unreadable
            ParseError: The file contains malformed statements
        """
        path = Path(path)
        text = self._read(path)

        bad_lines = [_statement_line(b) for b in parse_stream(io.StringIO(text)) if b.error]
        if bad_lines:
            raise ParseError(str(path), bad_lines)

        values = dotenv_values(stream=io.StringIO(text))
        return {k: v for k, v in values.items() if v is not None}

    def apply(
        self,
        path: Optional[Path | str] = None,
        environ: Optional[MutableMapping[str, str]] = None,
    ) -> Dict[str, str]:
        """Overlay a file onto the environment without overriding existing keys.

        Args:
            path: File to apply; the default file when None
            environ: Target mapping; ``os.environ`` when None

        Returns:
            The keys that were actually added, with their values
        """
        target = os.environ if environ is None else environ
        values = self.parse(self.default_path() if path is None else path)

        added: Dict[str, str] = {}
        for key, value in values.items():
            if key in target:
                continue
            target[key] = value
            added[key] = value
        return added


__all__ = ["EnvLoader"]
