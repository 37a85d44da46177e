"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def formatting_failed(kind: str, value: object, reason: str) -> Diagnostic:
        """Locale primitive failed on validated input.

        Args:
            kind: Format kind (e.g. "number")
            value: The value being formatted
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=f"{kind} formatting failed: {reason}",
            input_value=repr(value),
            hint="Check the $options of this parameter",
        )

    @staticmethod
    def format_kind_unsupported(kind: str) -> Diagnostic:
        """Format spec that no dispatcher branch handles.

        Args:
            kind: The offending kind or type name

        Returns:
            Diagnostic for FORMAT_KIND_UNSUPPORTED
        """
        return Diagnostic(
            code=DiagnosticCode.FORMAT_KIND_UNSUPPORTED,
            message=f"Unsupported format specification: {kind}",
        )

    @staticmethod
    def load_failed(source: str, reason: str) -> Diagnostic:
        """Glossary source could not be read.

        Args:
            source: Path or description of the source
            reason: Underlying error text

        Returns:
            Diagnostic for LOAD_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.LOAD_FAILED,
            message=f"Cannot read glossary {source}: {reason}",
        )

    @staticmethod
    def load_json_invalid(source: str, reason: str) -> Diagnostic:
        """Glossary source is not valid JSON.

        Args:
            source: Path or description of the source
            reason: JSON decoder error text

        Returns:
            Diagnostic for LOAD_JSON_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.LOAD_JSON_INVALID,
            message=f"Glossary {source} is not valid JSON: {reason}",
        )
