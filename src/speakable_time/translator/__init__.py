"""Translation engine supplying localized literals for template placeholders."""

from .default_translation import ENGLISH_LITERALS, default_translator
from .errors import TemplateErrorKind, TemplateFormatError
from .loader import load_locale, load_translation_file, resolve_locale_file
from .translator import TranslationMap, Translator

__all__ = [
    "ENGLISH_LITERALS",
    "TemplateErrorKind",
    "TemplateFormatError",
    "TranslationMap",
    "Translator",
    "default_translator",
    "load_locale",
    "load_translation_file",
    "resolve_locale_file",
]
