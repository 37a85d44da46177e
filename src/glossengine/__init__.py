"""glossengine - glossary lookup and locale-aware template rendering.

Resolves dotted keys against a JSON glossary and renders ``{param}``
templates with typed, CLDR-based formatting of dates, numbers, lists,
plurals and relative time. Problems are collected as issues next to a
best-effort display string instead of being raised.

Public API:
    translate - Resolve a key against a glossary
    Translator - Glossary-bound facade with logging and strict mode
    Glossary - Validated glossary document
    load_glossary - Load a glossary from JSON text, bytes or a file
    PathGlossaryLoader - Locale-templated file loader

Exceptions:
    GlossaryError - Base exception class
    GlossaryValidationError - Glossary failed schema validation
    GlossaryLoadError - Glossary file unreadable or not JSON
    TranslationError - Issues in strict mode

Submodules:
    glossengine.models - Pydantic models for glossaries and format inputs
    glossengine.validation - Validators returning (value, diagnostics)
    glossengine.diagnostics - Diagnostics, issues and exceptions
    glossengine.introspection - Parameter extraction
    glossengine.runtime.locale_context - Thread-safe LocaleContext for formatting
"""

from .diagnostics import (
    GlossaryError,
    GlossaryLoadError,
    GlossaryValidationError,
    InvalidFormatIssue,
    Issue,
    MissingParamIssue,
    TranslationError,
    UnknownKeyIssue,
)
from .loading import PathGlossaryLoader, load_glossary
from .models import Glossary, Template
from .runtime import TranslationResult, Translator, translate

try:
    from importlib.metadata import PackageNotFoundError
    from importlib.metadata import version as _get_version
except ImportError as e:
    raise RuntimeError("importlib.metadata unavailable - Python version too old? " + str(e)) from e

try:
    __version__ = _get_version("glossengine")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "Glossary",
    "GlossaryError",
    "GlossaryLoadError",
    "GlossaryValidationError",
    "InvalidFormatIssue",
    "Issue",
    "MissingParamIssue",
    "PathGlossaryLoader",
    "Template",
    "TranslationError",
    "TranslationResult",
    "Translator",
    "UnknownKeyIssue",
    "__version__",
    "load_glossary",
    "translate",
]
