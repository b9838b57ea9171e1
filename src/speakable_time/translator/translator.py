"""Placeholder translation.

The :class:`Translator` provides a format string conversion system that is
independent of strftime/strptime, so both can be used together, and is generic
enough to carry whole translation tables. Format generators produce the
templates; the translator only swaps in the right literals.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from ..config.errors import ConfigurationError
from ..enums import UnknownWordError, Words
from .template_scanner import TemplateScanner

logger = logging.getLogger(__name__)

TranslationMap = Mapping[Words, str]


class Translator:
    """Read-only table of word literals for one locale."""

    def __init__(self, mapping: TranslationMap) -> None:
        self._map: Mapping[Words, str] = MappingProxyType(dict(mapping))

    @classmethod
    def from_literals(cls, mapping: Mapping[str, object], *, source: str = "translation map") -> "Translator":
        """
        Build a translator from canonical word spellings.

        Args:
            mapping: Word spelling (e.g. ``"from now"``) to literal text
            source: Description used in error messages

        Raises:
            ConfigurationError: If a key is not a known word or a value is not a string
        """
        table: Dict[Words, str] = {}
        for key, value in mapping.items():
            try:
                word = Words.parse(str(key))
            except UnknownWordError as exc:
                raise ConfigurationError.invalid_value(f"{source} key", key, "Not a translatable word") from exc
            if not isinstance(value, str):
                raise ConfigurationError.invalid_value(f"{source}[{key!r}]", value, "Literal must be a string")
            table[word] = value
        return cls(table)

    @property
    def mapping(self) -> Mapping[Words, str]:
        return self._map

    def translate(self, word: Words) -> Optional[str]:
        """Given a word, return its literal meaning if the table has one."""
        return self._map.get(word)

    def format(self, template: str) -> str:
        """
        Replace every ``%{word}`` placeholder in ``template`` with its literal.

        ``%%`` produces a literal ``%``. Braces may be used anywhere outside of
        a placeholder, but a placeholder may not contain another ``{`` or ``%``
        and must be closed. Unknown or untranslated words become empty text.

        Raises:
            TemplateFormatError: If the template is malformed
        """
        return TemplateScanner(self.translate).scan(template)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"Translator({len(self._map)} words)"


__all__ = ["TranslationMap", "Translator"]
