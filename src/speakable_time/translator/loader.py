"""Locale file loading.

A locale directory holds one mapping per locale (``en.yml``, ``en-US.yml``,
``zh-CN.yml``, ``C.yml``...) from word spellings to literals. YAML is the
native format; JSON files are read as well. Lookup falls back from the full
locale to its language part and finally to ``C``.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Tuple

import yaml

from ..config.errors import ConfigurationError
from .translator import Translator

logger = logging.getLogger(__name__)

FALLBACK_LOCALE = "C"

# Tried in this order for every candidate locale
_PARSERS: Tuple[Tuple[str, Callable[[str], Any], str], ...] = (
    (".yml", yaml.safe_load, "a YAML mapping"),
    (".yaml", yaml.safe_load, "a YAML mapping"),
    (".json", json.loads, "a JSON object"),
)
LOCALE_SUFFIXES: Tuple[str, ...] = tuple(suffix for suffix, _, _ in _PARSERS)
_PARSER_BY_SUFFIX: Dict[str, Tuple[Callable[[str], Any], str]] = {
    suffix: (parse, expected) for suffix, parse, expected in _PARSERS
}


def locale_candidates(locale: str) -> List[str]:
    """Return the file stems tried for ``locale``, most specific first."""
    candidates: List[str] = []
    for candidate in (locale, locale.split("-")[0], FALLBACK_LOCALE):
        if candidate and candidate not in candidates:
            candidates.append(candidate)
    return candidates


def resolve_locale_file(locale_dir: Path, locale: str) -> Path:
    """
    Find the best locale file in ``locale_dir``.

    Raises:
        ConfigurationError: If the directory or every candidate file is missing
    """
    if not locale_dir.is_dir():
        raise ConfigurationError.missing_value("locale directory", str(locale_dir))

    for stem in locale_candidates(locale):
        for suffix in LOCALE_SUFFIXES:
            path = locale_dir / f"{stem}{suffix}"
            if path.exists():
                logger.debug("Resolved locale %r to %s", locale, path)
                return path

    raise ConfigurationError.load_failed("translations", f"locale {locale!r} in {locale_dir}")


def load_translation_file(path: Path) -> Translator:
    """
    Load a single YAML or JSON locale file into a :class:`Translator`.

    Raises:
        ConfigurationError: If the file cannot be read or parsed, is not a
            mapping, or names unknown words
    """
    parser = _PARSER_BY_SUFFIX.get(path.suffix)
    if parser is None:
        raise ConfigurationError.invalid_format(str(path), path.suffix, f"one of {', '.join(LOCALE_SUFFIXES)}")
    parse, expected = parser

    try:
        payload = parse(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigurationError.invalid_format(str(path), "<unparseable>", expected) from exc
    except OSError as exc:
        raise ConfigurationError.load_failed("translations", str(path)) from exc

    if not isinstance(payload, dict):
        raise ConfigurationError.invalid_format(str(path), type(payload).__name__, expected)

    return Translator.from_literals(payload, source=str(path))


def load_locale(locale_dir: Path, locale: str) -> Translator:
    """Resolve and load the translator for ``locale``."""
    return load_translation_file(resolve_locale_file(locale_dir, locale))


__all__ = [
    "FALLBACK_LOCALE",
    "LOCALE_SUFFIXES",
    "load_locale",
    "load_translation_file",
    "locale_candidates",
    "resolve_locale_file",
]
