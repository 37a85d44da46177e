"""Diagnostic system for glossary errors and translation issues.

Provides structured diagnostics with codes, field paths and hints, the
exception hierarchy for load-time failures, and the issue records returned
by translate().

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    FormatDispatchError,
    FormattingError,
    GlossaryError,
    GlossaryLoadError,
    GlossaryValidationError,
    TranslationError,
)
from .issues import Issue, InvalidFormatIssue, MissingParamIssue, UnknownKeyIssue
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "FormatDispatchError",
    "FormattingError",
    "GlossaryError",
    "GlossaryLoadError",
    "GlossaryValidationError",
    "InvalidFormatIssue",
    "Issue",
    "MissingParamIssue",
    "TranslationError",
    "UnknownKeyIssue",
]
