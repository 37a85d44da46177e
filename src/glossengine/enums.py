"""Enumerations for glossengine type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so they compare equal to the wire
values found in glossary documents.

Python 3.13+.
"""

from enum import StrEnum


class FormatKind(StrEnum):
    """Value of a parameter's ``$format`` tag.

    StrEnum provides automatic string conversion: str(FormatKind.NUMBER) == "number"
    """

    DATE_TIME = "date-time"
    """Locale date/time formatting: { $format: "date-time" }"""

    LIST = "list"
    """Locale list formatting: { $format: "list" }"""

    NUMBER = "number"
    """Locale number formatting: { $format: "number" }"""

    PLURAL = "plural"
    """CLDR plural category selection: { $format: "plural" }"""

    RELATIVE_TIME = "relative-time"
    """Locale relative time formatting: { $format: "relative-time" }"""


class IssueKind(StrEnum):
    """Kind of issue collected while resolving a translation.

    StrEnum provides automatic string conversion: str(IssueKind.UNKNOWN_KEY) == "unknown-key"
    """

    UNKNOWN_KEY = "unknown-key"
    """Key absent from the glossary, or its entry is not a valid template."""

    MISSING_PARAM = "missing-param"
    """Template parameter with no argument and no default."""

    INVALID_FORMAT = "invalid-format"
    """Argument does not match the shape its declared format requires."""


__all__ = [
    "FormatKind",
    "IssueKind",
]
