"""Parameter specifications of a glossary template.

Wire shape of one ``$params`` entry::

    {"$alias": "user.name", "$default": "User"}
    {"$format": "number", "$options": {"style": "currency", "currency": "USD"}}
    {"$format": "plural", "$plural": {"one": "1 item", "other": "{n} items"}}

On the wire the format tag and its payload sit next to ``$alias`` and
``$default``. The model lifts them into ``ParamSpec.format`` so that a
parameter either has no formatting (``format is None``) or exactly one
FormatSpec variant, selected by ``$format``.

Python 3.13+.
"""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .types import Key

__all__ = [
    "DateTimeFormat",
    "FormatSpec",
    "ListFormat",
    "NumberFormat",
    "ParamSpec",
    "PluralFormat",
    "RelativeTimeFormat",
]

_FORMAT_FIELDS = ("$format", "$options", "$plural")


class _FormatBase(BaseModel):
    """Fields shared by every FormatSpec variant."""

    model_config = ConfigDict(frozen=True)

    options: dict[str, Any] = Field(default_factory=dict, alias="$options")

    @field_validator("options", mode="before")
    @classmethod
    def _missing_options(cls, value: Any) -> Any:
        return {} if value is None else value


class DateTimeFormat(_FormatBase):
    """``$format: "date-time"`` with Intl.DateTimeFormat-style options."""

    format: Literal["date-time"] = Field(alias="$format")


class ListFormat(_FormatBase):
    """``$format: "list"`` with Intl.ListFormat-style options."""

    format: Literal["list"] = Field(alias="$format")


class NumberFormat(_FormatBase):
    """``$format: "number"`` with Intl.NumberFormat-style options."""

    format: Literal["number"] = Field(alias="$format")


class PluralFormat(_FormatBase):
    """``$format: "plural"`` with Intl.PluralRules-style options.

    Attributes:
        plural: Literal replacement per CLDR category ("one", "other", ...).
            A category without an entry renders as the category name.
    """

    format: Literal["plural"] = Field(alias="$format")
    plural: dict[str, str] | None = Field(default=None, alias="$plural")


class RelativeTimeFormat(_FormatBase):
    """``$format: "relative-time"`` with Intl.RelativeTimeFormat-style options."""

    format: Literal["relative-time"] = Field(alias="$format")


FormatSpec = Annotated[
    DateTimeFormat | ListFormat | NumberFormat | PluralFormat | RelativeTimeFormat,
    Field(discriminator="format"),
]


class ParamSpec(BaseModel):
    """Configuration of one template parameter.

    Attributes:
        alias: Argument name to read instead of the parameter name
        default: Verbatim substitute when the argument is missing
        format: Formatting to apply, or None for plain ``str()``
    """

    model_config = ConfigDict(frozen=True)

    alias: Key | None = Field(default=None, alias="$alias")
    default: str | None = Field(default=None, alias="$default")
    format: FormatSpec | None = Field(default=None, alias="$format")

    @model_validator(mode="before")
    @classmethod
    def _lift_format(cls, data: Any) -> Any:
        """Nest ``$format``/``$options``/``$plural`` into one FormatSpec under ``$format``."""
        if not isinstance(data, dict):
            return data
        lifted = {k: v for k, v in data.items() if k not in _FORMAT_FIELDS}
        if data.get("$format") is not None:
            lifted["$format"] = {k: data[k] for k in _FORMAT_FIELDS if k in data}
        return lifted
