"""Glossary document models.

A glossary is the unit of configuration passed to every translation::

    {
        "$version": "1.0.0",
        "$locale": "en-US",
        "$translations": {
            "greeting": "Hello!",
            "user": {
                "welcome": {
                    "$template": "Hello {name}",
                    "$params": {"name": {"$default": "User"}}
                }
            }
        }
    }

Reserved fields carry a ``$`` prefix so translation identifiers such as
``version`` never collide with them.

Python 3.13+.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .params import ParamSpec
from .types import Identifier, Version

__all__ = ["Glossary", "Template", "Translation", "TranslationMap"]


class Template(BaseModel):
    """Translation with ``{param}`` tokens and per-parameter configuration."""

    model_config = ConfigDict(frozen=True)

    template: str = Field(alias="$template")
    params: dict[Identifier, ParamSpec] | None = Field(default=None, alias="$params")


type Translation = str | Template

# Internal nodes are maps, leaves are translations
type TranslationMap = dict[Identifier, str | Template | TranslationMap]


class Glossary(BaseModel):
    """Validated, read-only glossary.

    Attributes:
        version: Optional MAJOR.MINOR.PATCH document version
        locale: Locale tag used for every formatting operation (e.g. "en-US")
        translations: Tree of translations addressed by dotted keys
    """

    model_config = ConfigDict(frozen=True)

    version: Version | None = Field(default=None, alias="$version")
    locale: str = Field(alias="$locale")
    translations: TranslationMap = Field(alias="$translations")

    @classmethod
    def from_data(cls, data: Any) -> Glossary:
        """Validate a decoded glossary document.

        Args:
            data: Decoded JSON document (mapping with ``$``-prefixed fields)

        Returns:
            Validated Glossary

        Raises:
            GlossaryValidationError: If the document does not match the schema
        """
        # Lazy import: validation depends on this module
        from glossengine.diagnostics import GlossaryValidationError  # noqa: PLC0415
        from glossengine.validation import validate_glossary  # noqa: PLC0415

        glossary, diagnostics = validate_glossary(data)
        if glossary is None:
            raise GlossaryValidationError(diagnostics)
        return glossary
