"""Glossary exception hierarchy with structured diagnostics.

Translation itself never raises for lookup or formatting problems; these
exceptions cover configuration errors detected at load time, strict-mode
translation, and internal invariant violations.

Python 3.13+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from glossengine.runtime.result import TranslationResult

__all__ = [
    "FormatDispatchError",
    "FormattingError",
    "GlossaryError",
    "GlossaryLoadError",
    "GlossaryValidationError",
    "TranslationError",
]


class GlossaryError(Exception):
    """Base exception for all glossengine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize GlossaryError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class GlossaryValidationError(GlossaryError):
    """Glossary document failed structural validation.

    This is the only fatal condition of the library. It is raised once, when
    the glossary is loaded, never from the translate path.

    Attributes:
        diagnostics: Every schema violation found, in document order
    """

    def __init__(self, diagnostics: tuple[Diagnostic, ...]) -> None:
        """Initialize GlossaryValidationError.

        Args:
            diagnostics: Non-empty tuple of schema diagnostics
        """
        self.diagnostics = diagnostics
        details = "\n".join(f"  {d.location}: {d.message}" for d in diagnostics)
        super().__init__(f"Invalid glossary ({len(diagnostics)} error(s)):\n{details}")
        self.diagnostic = diagnostics[0] if diagnostics else None


class GlossaryLoadError(GlossaryError):
    """Glossary source could not be read or is not valid JSON.

    Attributes:
        source: Human-readable description of the source (path or "<string>")
    """

    def __init__(self, message: str | Diagnostic, *, source: str = "") -> None:
        """Initialize GlossaryLoadError.

        Args:
            message: Error message string OR Diagnostic object
            source: Human-readable description of the source
        """
        super().__init__(message)
        self.source = source


class TranslationError(GlossaryError):
    """Translation produced issues while running in strict mode.

    Attributes:
        result: The best-effort TranslationResult that carried the issues
    """

    def __init__(self, message: str, result: TranslationResult) -> None:
        """Initialize TranslationError.

        Args:
            message: Error message
            result: Translation result with at least one issue
        """
        super().__init__(message)
        self.result = result


class FormattingError(GlossaryError):
    """Raised when a locale formatting primitive fails on validated input.

    The dispatcher turns it into a FORMATTING_FAILED diagnostic, so it never
    escapes translate().
    """


class FormatDispatchError(GlossaryError):
    """Format specification reached the dispatcher without a matching branch.

    Validation guarantees every FormatSpec is one of the known variants, so
    this signals a programming error rather than bad input.
    """
