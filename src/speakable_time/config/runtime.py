from __future__ import annotations

"""Runtime helpers for working with environment-backed configuration."""


import os
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_CANDIDATES = (Path(".env"), Path.home() / ".env")

_DEFAULT_VALUES: dict[str, str] | None = None


def _load_default_values() -> dict[str, str]:
    """Load configuration values from .env-style files, first file wins."""
    from .runtime_helpers import DotenvLoader

    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is not None:
        return _DEFAULT_VALUES

    defaults: dict[str, str] = {}
    for path in _DOTENV_CANDIDATES:
        for key, value in DotenvLoader.load_from_file(path).items():
            defaults.setdefault(key, value)

    _DEFAULT_VALUES = defaults
    return defaults


def _default_value(name: str) -> Optional[str]:
    return _load_default_values().get(name)


def _lookup(name: str) -> Optional[str]:
    """Return the stripped value from the process environment, then .env defaults."""
    for source in (os.getenv(name), _default_value(name)):
        if source is not None and source.strip():
            return source.strip()
    return None


def env_str(name: str, or_value: str | None = None, *, required: bool = False) -> str | None:
    """Fetch a non-blank environment variable; blank values count as unset."""

    value = _lookup(name)
    if value is None:
        if required:
            raise ConfigurationError.missing_value(f"environment variable {name!r}")
        return or_value
    return value


def env_bool(name: str, or_value: bool | None = None) -> bool | None:
    """Fetch an environment variable such as ``yes``/``off`` as a ``bool``."""

    raw = _lookup(name)
    if raw is None:
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError.invalid_value(name, raw, "Expected a boolean such as true/false or on/off")


def env_path(name: str, *, required: bool = False) -> Path | None:
    """Fetch an environment variable as an expanded filesystem path."""

    raw = env_str(name, required=required)
    if raw is None:
        return None
    return Path(raw).expanduser()
