"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic attached to validation
failures and formatting failures.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        2000-2999: Formatting errors (format inputs, locale primitives)
        3000-3999: Schema errors (glossary document shape)
        4000-4999: Loading errors (files, JSON)
    """

    # Formatting errors (2000-2999)
    FORMAT_INPUT_INVALID = 2001
    FORMATTING_FAILED = 2002
    FORMAT_KIND_UNSUPPORTED = 2003

    # Schema errors (3000-3999)
    SCHEMA_INVALID = 3001

    # Loading errors (4000-4999)
    LOAD_FAILED = 4001
    LOAD_JSON_INVALID = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        path: Location of the offending field inside the validated value,
            e.g. ``("$translations", "user", "$params", "count", "$format")``.
            Empty tuple when the value itself is at fault.
        hint: Suggestion for fixing the error
        input_value: repr() of the rejected input, when useful for debugging
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    path: tuple[str | int, ...] = ()
    hint: str | None = None
    input_value: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def location(self) -> str:
        """Dotted rendering of ``path`` (``"<root>"`` when empty)."""
        if not self.path:
            return "<root>"
        return ".".join(str(part) for part in self.path)

    def format_error(self) -> str:
        """Format diagnostic in a compiler-like layout.

        Example output:
            error[FORMAT_INPUT_INVALID]: Input should be a valid number
              --> value
              = help: Pass a number, a numeric string, or "Infinity"

        Returns:
            Formatted error message
        """
        lines = [f"{self.severity}[{self.code.name}]: {self.message}"]
        if self.path:
            lines.append(f"  --> {self.location}")
        if self.input_value is not None:
            lines.append(f"  = input: {self.input_value}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
