"""Result type returned by translate().

Python 3.13+.
"""

from dataclasses import dataclass

from glossengine.diagnostics import Issue

__all__ = ["TranslationResult"]


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Best-effort display string plus the issues met while producing it.

    Attributes:
        result: Display string, always usable
        issues: Issues in template order, or None for a clean translation
    """

    result: str
    issues: tuple[Issue, ...] | None = None

    @property
    def ok(self) -> bool:
        """True when the translation produced no issues."""
        return self.issues is None

    def __str__(self) -> str:
        return self.result
