"""Dotenv file loading for locale settings."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional, Tuple

from ..errors import ConfigurationError

_EXPORT_PREFIX = "export "
_QUOTES = ("'", '"')


class DotenvLoader:
    """Reads ``KEY=value`` pairs from .env-style files."""

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, str]:
        """
        Load key-value pairs from a .env file.

        Blank lines, ``#`` comments and lines without ``=`` are skipped. An
        ``export`` prefix is accepted so shell-sourced files can be shared.

        Args:
            path: Path to .env file

        Returns:
            Dictionary of variables; empty when the file does not exist

        Raises:
            ConfigurationError: If the file exists but cannot be read
        """
        if not path.exists():
            return {}

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError.load_failed("dotenv file", str(path)) from exc

        values: Dict[str, str] = {}
        for line in text.splitlines():
            parsed = DotenvLoader.parse_line(line)
            if parsed is not None:
                key, value = parsed
                values[key] = value
        return values

    @staticmethod
    def parse_line(line: str) -> Optional[Tuple[str, str]]:
        """Split one line into ``(key, value)``, or return None when it holds no assignment."""
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            return None
        if stripped.startswith(_EXPORT_PREFIX):
            stripped = stripped[len(_EXPORT_PREFIX) :]

        key, raw_value = stripped.split("=", 1)
        key = key.strip()
        if not key:
            return None
        return key, _unquote(raw_value.strip())


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    # unquoted values may carry a trailing comment
    return value.split(" #", 1)[0].rstrip()
