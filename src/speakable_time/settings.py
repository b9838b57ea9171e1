"""Explicit, immutable configuration for formatting calls.

Build one :class:`SpeakableTimeConfig` at startup and pass its translator to
the formatting helpers instead of relying on process-wide state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .config import ConfigurationError, env_bool, env_path, env_str
from .translator import Translator, default_translator, load_locale

logger = logging.getLogger(__name__)

LOCALE_DIR_ENV = "SPEAKABLE_TIME_LOCALE_DIR"
LOCALE_ENV = "SPEAKABLE_TIME_LOCALE"
STRICT_LOCALE_ENV = "SPEAKABLE_TIME_STRICT_LOCALE"
DEFAULT_LOCALE = "C"


@dataclass(frozen=True)
class SpeakableTimeConfig:
    translator: Translator = field(default_factory=default_translator)
    locale: str = DEFAULT_LOCALE

    @classmethod
    def for_locale(cls, locale_dir: Path, locale: str, *, strict: bool = False) -> "SpeakableTimeConfig":
        """
        Load ``locale`` from ``locale_dir``.

        Args:
            locale_dir: Directory of ``<locale>.yml`` (or ``.yaml``/``.json``) files
            locale: Locale name such as ``en-US``
            strict: Raise instead of falling back to English when loading fails

        Raises:
            ConfigurationError: If loading fails and ``strict`` is set
        """
        try:
            translator = load_locale(locale_dir, locale)
        except ConfigurationError:
            if strict:
                raise
            logger.warning("Falling back to default translations; locale %r unavailable in %s", locale, locale_dir)
            return cls()
        return cls(translator=translator, locale=locale)

    @classmethod
    def from_env(cls) -> "SpeakableTimeConfig":
        """Build the configuration from ``SPEAKABLE_TIME_*`` environment variables."""
        locale_dir: Optional[Path] = env_path(LOCALE_DIR_ENV)
        locale = env_str(LOCALE_ENV, DEFAULT_LOCALE)
        strict = env_bool(STRICT_LOCALE_ENV, False)

        if locale_dir is None:
            return cls()
        return cls.for_locale(locale_dir, locale, strict=strict)


__all__ = [
    "DEFAULT_LOCALE",
    "LOCALE_DIR_ENV",
    "LOCALE_ENV",
    "STRICT_LOCALE_ENV",
    "SpeakableTimeConfig",
]
