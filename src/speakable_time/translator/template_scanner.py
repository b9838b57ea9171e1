"""
Single-pass scanner for ``%{word}`` templates.

Placeholders start with ``%{``, contain a word and end with ``}``. ``%%`` is a
literal percent sign and braces outside a placeholder are literal. Words that
are not part of the vocabulary resolve to nothing.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..enums import UnknownWordError, Words
from .errors import TemplateFormatError

logger = logging.getLogger(__name__)

WordLookup = Callable[[Words], Optional[str]]


class TemplateScanner:
    """Resolves placeholders in one template against a word lookup."""

    def __init__(self, lookup: WordLookup) -> None:
        self._lookup = lookup
        self._in_match = False
        self._in_brace = False
        self._output: List[str] = []
        self._capture: List[str] = []

    def scan(self, template: str) -> str:
        """
        Translate ``template``.

        Raises:
            TemplateFormatError: If the template nests placeholders, closes a brace
                that was never opened, or ends inside a placeholder
        """
        for position, ch in enumerate(template):
            if ch == "%":
                self._on_percent(position)
            elif ch == "{":
                self._on_open_brace(position)
            elif ch == "}":
                self._on_close_brace(position)
            elif self._in_match and self._in_brace:
                self._capture.append(ch)
            else:
                self._output.append(ch)

        if self._in_brace:
            raise TemplateFormatError.unclosed_brace(len(template))
        if self._in_match:
            raise TemplateFormatError.incomplete_match(len(template))
        return "".join(self._output)

    def _on_percent(self, position: int) -> None:
        if self._in_match and not self._in_brace:
            self._output.append("%")
            self._in_match = False
            return
        if self._in_match or self._in_brace:
            raise TemplateFormatError.nested_match(position)
        self._in_match = True

    def _on_open_brace(self, position: int) -> None:
        if not self._in_match:
            self._output.append("{")
            return
        if self._in_brace:
            raise TemplateFormatError.nested_brace(position)
        self._in_brace = True

    def _on_close_brace(self, position: int) -> None:
        if not self._in_match:
            self._output.append("}")
            return
        if not self._in_brace:
            raise TemplateFormatError.unopened_brace(position)

        self._in_brace = False
        self._in_match = False
        captured = "".join(self._capture)
        self._capture = []
        self._output.append(self._resolve(captured))

    def _resolve(self, captured: str) -> str:
        try:
            word = Words.parse(captured)
        except UnknownWordError:  # Unknown placeholders resolve to nothing
            logger.debug("Ignoring unknown placeholder %r", captured)
            return ""
        literal = self._lookup(word)
        if literal is None:
            return ""
        return literal


__all__ = ["TemplateScanner", "WordLookup"]
