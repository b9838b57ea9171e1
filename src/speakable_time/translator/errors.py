from __future__ import annotations

"""Exception types for template translation."""

from enum import Enum


class TemplateErrorKind(Enum):
    NESTED_MATCH = "format attempted within format"
    NESTED_BRACE = "open brace attempted within open brace"
    UNOPENED_BRACE = "close brace attempted outside open brace"
    UNCLOSED_BRACE = "unclosed brace"
    INCOMPLETE_MATCH = "incomplete match"


class TemplateFormatError(ValueError):
    """Raised when a template string is malformed."""

    def __init__(self, kind: TemplateErrorKind, position: int) -> None:
        super().__init__(f"Invalid format ({kind.value}) at position {position}")
        self.kind = kind
        self.position = position

    @classmethod
    def nested_match(cls, position: int) -> "TemplateFormatError":
        """Create error for a ``%`` inside an open placeholder."""
        return cls(TemplateErrorKind.NESTED_MATCH, position)

    @classmethod
    def nested_brace(cls, position: int) -> "TemplateFormatError":
        """Create error for a second ``{`` before the placeholder closed."""
        return cls(TemplateErrorKind.NESTED_BRACE, position)

    @classmethod
    def unopened_brace(cls, position: int) -> "TemplateFormatError":
        """Create error for ``%}`` with no opening brace."""
        return cls(TemplateErrorKind.UNOPENED_BRACE, position)

    @classmethod
    def unclosed_brace(cls, position: int) -> "TemplateFormatError":
        return cls(TemplateErrorKind.UNCLOSED_BRACE, position)

    @classmethod
    def incomplete_match(cls, position: int) -> "TemplateFormatError":
        return cls(TemplateErrorKind.INCOMPLETE_MATCH, position)


__all__ = ["TemplateErrorKind", "TemplateFormatError"]
