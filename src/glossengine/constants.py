"""Shared constants for glossengine.

Centralizes grammar fragments, cache limits, and lookup tables used by the
models, the locale layer, and the template engine. Keeping them here avoids
circular imports between ``models`` and ``runtime``.

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar
    "IDENTIFIER_PATTERN",
    "KEY_PATTERN",
    "PARAM_TOKEN_PATTERN",
    "PARAM_TOKEN_RE",
    "VERSION_PATTERN",
    "KEY_SEPARATOR",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Locale defaults
    "DEFAULT_LOCALE",
    # Format inputs
    "INFINITY_SENTINELS",
    "RELATIVE_TIME_UNITS",
]

# ============================================================================
# GRAMMAR
# ============================================================================

# Identifier: ASCII letter/underscore followed by ASCII word characters, or a
# bare non-negative integer (array-index-like segment).
# Explicit ASCII classes: Python's \w is Unicode-aware.
IDENTIFIER_PATTERN: str = r"[A-Za-z_][A-Za-z0-9_]*|[0-9]+"

KEY_SEPARATOR: str = "."

KEY_PATTERN: str = rf"(?:{IDENTIFIER_PATTERN})(?:\.(?:{IDENTIFIER_PATTERN}))*"

# Parameter token inside a template body: {name}
PARAM_TOKEN_PATTERN: str = rf"\{{({IDENTIFIER_PATTERN})\}}"
PARAM_TOKEN_RE: re.Pattern[str] = re.compile(PARAM_TOKEN_PATTERN)

# MAJOR.MINOR.PATCH, non-negative integers
VERSION_PATTERN: str = r"^(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)$"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleContext instances.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Formatting locale used when a glossary's $locale is unknown to CLDR.
DEFAULT_LOCALE: str = "en_US"

# ============================================================================
# FORMAT INPUTS
# ============================================================================

# Literal strings accepted by the number format in place of a numeric value.
INFINITY_SENTINELS: frozenset[str] = frozenset({"Infinity", "-Infinity", "+Infinity"})

# Relative-time units (singular and plural spellings) mapped to the canonical
# singular unit name.
RELATIVE_TIME_UNITS: dict[str, str] = {
    "year": "year",
    "years": "year",
    "quarter": "quarter",
    "quarters": "quarter",
    "month": "month",
    "months": "month",
    "week": "week",
    "weeks": "week",
    "day": "day",
    "days": "day",
    "hour": "hour",
    "hours": "hour",
    "minute": "minute",
    "minutes": "minute",
    "second": "second",
    "seconds": "second",
}
