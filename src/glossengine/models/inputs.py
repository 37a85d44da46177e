"""Accepted argument shapes per format kind.

Each format checks the runtime argument before handing it to the locale
layer. The shapes are pydantic types validated through ``TypeAdapter``:

    ============== ==================================================
    date-time      epoch milliseconds (int/float) or date/datetime
    list           list or tuple of strings
    number         number, numeric string, or an Infinity sentinel
    plural         finite number (int, float, Decimal)
    relative-time  {"value": number, "unit": "day" | "days" | ...}
    ============== ==================================================

Python 3.13+.
"""

import math
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Annotated, Any, Literal

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Strict,
    StrictFloat,
    StrictInt,
    StrictStr,
)
from pydantic_core import PydanticCustomError

from glossengine.constants import INFINITY_SENTINELS

__all__ = [
    "DateTimeInput",
    "ListInput",
    "NumberInput",
    "PluralInput",
    "RelativeTimeInput",
    "RelativeTimeUnit",
]


def _finite(value: int | float | Decimal) -> int | float | Decimal:
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal) and not value.is_finite():
        raise PydanticCustomError("finite_number", "Input should be a finite number")
    if isinstance(value, float) and not math.isfinite(value):
        raise PydanticCustomError("finite_number", "Input should be a finite number")
    return value


def _coerce_number(value: Any) -> Any:
    """Coerce loose numeric input into int, float, Decimal or a sentinel.

    Sentinel strings are kept verbatim; other strings are parsed (blank means
    zero); booleans become 0/1. NaN is rejected in every spelling.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        if value in INFINITY_SENTINELS:
            return value
        text = value.strip()
        if not text:
            return 0
        try:
            parsed = Decimal(text)
        except InvalidOperation:
            raise PydanticCustomError(
                "number_coercion",
                "Input should be a number, a numeric string, or an Infinity sentinel",
            ) from None
        if parsed.is_nan():
            raise PydanticCustomError("finite_number", "Input should not be NaN")
        return parsed
    if isinstance(value, float) and math.isnan(value):
        raise PydanticCustomError("finite_number", "Input should not be NaN")
    if isinstance(value, Decimal) and value.is_nan():
        raise PydanticCustomError("finite_number", "Input should not be NaN")
    return value


# Strict: ISO strings are not dates here
type DateTimeInput = StrictInt | StrictFloat | Annotated[datetime, Strict()] | Annotated[date, Strict()]

# Ordered sequences only: sets and generators are rejected
type ListInput = Annotated[list[StrictStr], Strict()] | Annotated[tuple[StrictStr, ...], Strict()]

# Infinite floats/Decimals are allowed here: the locale layer renders them
type NumberInput = Annotated[
    StrictInt | StrictFloat | Annotated[Decimal, Strict()] | Literal["Infinity", "-Infinity", "+Infinity"],
    BeforeValidator(_coerce_number),
]

type PluralInput = Annotated[
    StrictInt | StrictFloat | Annotated[Decimal, Strict()],
    AfterValidator(_finite),
]

RelativeTimeUnit = Literal[
    "year",
    "years",
    "quarter",
    "quarters",
    "month",
    "months",
    "week",
    "weeks",
    "day",
    "days",
    "hour",
    "hours",
    "minute",
    "minutes",
    "second",
    "seconds",
]


class RelativeTimeInput(BaseModel):
    """Signed offset for relative-time formatting: ``{"value": -1, "unit": "day"}``."""

    model_config = ConfigDict(frozen=True)

    value: Annotated[StrictInt | StrictFloat, AfterValidator(_finite)]
    unit: RelativeTimeUnit
