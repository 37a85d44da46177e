"""Pydantic models for glossary documents and format arguments.

Python 3.13+.
"""

from .glossary import Glossary, Template, Translation, TranslationMap
from .inputs import DateTimeInput, ListInput, NumberInput, PluralInput, RelativeTimeInput, RelativeTimeUnit
from .params import (
    DateTimeFormat,
    FormatSpec,
    ListFormat,
    NumberFormat,
    ParamSpec,
    PluralFormat,
    RelativeTimeFormat,
)
from .types import Identifier, Key, Version

__all__ = [
    "DateTimeFormat",
    "DateTimeInput",
    "FormatSpec",
    "Glossary",
    "Identifier",
    "Key",
    "ListFormat",
    "ListInput",
    "NumberFormat",
    "NumberInput",
    "ParamSpec",
    "PluralFormat",
    "PluralInput",
    "RelativeTimeFormat",
    "RelativeTimeInput",
    "RelativeTimeUnit",
    "Template",
    "Translation",
    "TranslationMap",
    "Version",
]
