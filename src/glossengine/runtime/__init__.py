"""Runtime: template resolution and locale formatting.

Exports:
    translate: Resolve a key against a glossary
    Translator: Glossary-bound facade with strict mode
    TranslationResult: Display string plus issues
    LocaleContext: Babel-backed formatting primitives
    format_value: Format one argument by its FormatSpec

Python 3.13+.
"""

from .dispatcher import format_value
from .engine import translate
from .locale_context import LocaleContext
from .result import TranslationResult
from .translator import Translator

__all__ = [
    "LocaleContext",
    "TranslationResult",
    "Translator",
    "format_value",
    "translate",
]
