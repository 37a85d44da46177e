"""Locale context for thread-safe, glossary-scoped formatting.

This module provides the locale formatting primitives the template engine
relies on: date/time, list, number, plural selection and relative time.
Uses Babel for CLDR-compliant formatting.

Options are the Intl-style option bags found in a glossary's ``$options``
(``dateStyle``, ``minimumFractionDigits``, ``type`` ...). Each primitive maps
the options it understands onto Babel calls and ignores the rest.

Architecture:
    - LocaleContext: Immutable locale configuration container
    - Formatters use Babel (thread-safe, CLDR-based)
    - No dependency on Python's locale module (avoids global state)

Python 3.13+. Uses Babel for i18n.
"""

import logging
import math
from collections import OrderedDict
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, tzinfo
from decimal import Decimal, InvalidOperation
from threading import RLock
from typing import Any, ClassVar

from babel import Locale, UnknownLocaleError
from babel import dates as babel_dates
from babel import lists as babel_lists
from babel import numbers as babel_numbers
from babel import units as babel_units

from glossengine.constants import DEFAULT_LOCALE, MAX_LOCALE_CACHE_SIZE, RELATIVE_TIME_UNITS
from glossengine.diagnostics import ErrorTemplate, FormattingError
from glossengine.locale_utils import normalize_locale
from glossengine.runtime.plural_rules import select_plural_category

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

type FormatOptions = Mapping[str, Any]

# Exceptions Babel (or our option mapping) raises for unusable options/values.
_FORMAT_ERRORS = (
    ArithmeticError,
    AttributeError,
    InvalidOperation,
    LookupError,
    OSError,
    TypeError,
    ValueError,
)

_STYLES = frozenset({"full", "long", "medium", "short"})

# Intl component option -> CLDR skeleton fields
_SKELETON_FIELDS: dict[str, dict[str, str]] = {
    "era": {"long": "GGGG", "short": "G", "narrow": "GGGGG"},
    "year": {"numeric": "y", "2-digit": "yy"},
    "month": {"numeric": "M", "2-digit": "MM", "long": "MMMM", "short": "MMM", "narrow": "MMMMM"},
    "weekday": {"long": "EEEE", "short": "EEE", "narrow": "EEEEE"},
    "day": {"numeric": "d", "2-digit": "dd"},
    "minute": {"numeric": "m", "2-digit": "mm"},
    "second": {"numeric": "s", "2-digit": "ss"},
    "timeZoneName": {"short": "z", "long": "zzzz", "shortOffset": "O", "longOffset": "OOOO"},
}
_SKELETON_ORDER = ("era", "year", "month", "weekday", "day", "hour", "minute", "second", "timeZoneName")

# Intl list (type, style) -> Babel list style
_LIST_STYLES: dict[tuple[str, str], str] = {
    ("conjunction", "long"): "standard",
    ("conjunction", "short"): "standard-short",
    ("conjunction", "narrow"): "standard-narrow",
    ("disjunction", "long"): "or",
    ("disjunction", "short"): "or-short",
    ("disjunction", "narrow"): "or-narrow",
    ("unit", "long"): "unit",
    ("unit", "short"): "unit-short",
    ("unit", "narrow"): "unit-narrow",
}

# Must match babel.dates.TIMEDELTA_UNITS so format_timedelta picks the exact unit
_SECONDS_PER_UNIT: dict[str, int] = {
    "year": 3600 * 24 * 365,
    "month": 3600 * 24 * 30,
    "week": 3600 * 24 * 7,
    "day": 3600 * 24,
    "hour": 3600,
    "minute": 60,
    "second": 1,
}

_UNIT_LENGTHS = frozenset({"long", "short", "narrow"})

# Intl default fraction digits per number style: (minimum, maximum)
_DEFAULT_FRACTION_DIGITS: dict[str, tuple[int, int]] = {
    "decimal": (0, 3),
    "percent": (0, 0),
    "unit": (0, 3),
}


def _option_int(options: FormatOptions, name: str, low: int, high: int) -> int | None:
    """Read an integer option, enforcing the Intl range."""
    raw = options.get(name)
    if raw is None:
        return None
    if isinstance(raw, bool) or not isinstance(raw, int) or not low <= raw <= high:
        msg = f"{name} must be an integer between {low} and {high}, got {raw!r}"
        raise ValueError(msg)
    return raw


def _fraction_digits(options: FormatOptions, default_min: int, default_max: int) -> tuple[int, int]:
    """Resolve minimum/maximum fraction digits the way Intl.NumberFormat does."""
    minimum = _option_int(options, "minimumFractionDigits", 0, 100)
    maximum = _option_int(options, "maximumFractionDigits", 0, 100)
    if minimum is None:
        if maximum is None:
            return default_min, default_max
        return min(default_min, maximum), maximum
    if maximum is None:
        return minimum, max(default_max, minimum)
    if minimum > maximum:
        msg = f"minimumFractionDigits ({minimum}) exceeds maximumFractionDigits ({maximum})"
        raise ValueError(msg)
    return minimum, maximum


def _decimal_format(min_int: int, min_frac: int, max_frac: int, *, grouping: bool) -> str:
    """Build a CLDR decimal pattern string, e.g. ``#,##0.00#``."""
    integer = "0" * min_int
    if grouping:
        integer = "#,##" + integer if len(integer) < 4 else integer
    fraction = "0" * min_frac + "#" * (max_frac - min_frac)
    return f"{integer}.{fraction}" if fraction else integer


def _to_datetime(value: int | float | date) -> datetime:
    """Normalize a date-time input: epoch milliseconds, date, or datetime."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    return datetime.fromtimestamp(value / 1000, tz=UTC)


@dataclass(frozen=True, slots=True)
class LocaleContext:
    """Immutable locale configuration for formatting operations.

    Provides thread-safe, locale-specific formatting without mutating
    global state. Use LocaleContext.create() to construct instances.

    Cache Management:
        LocaleContext keeps an internal LRU cache for instance reuse:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.format_number(1234.5, {})
        '1,234.5'

        >>> ctx = LocaleContext.create('de-DE')
        >>> ctx.format_number(1234.5, {})
        '1.234,5'

        >>> # Invalid locales fall back to en_US with warning logged
        >>> ctx = LocaleContext.create('invalid-locale')
        >>> ctx.is_fallback
        True

    Thread Safety:
        Instances are immutable. Cache operations are protected by RLock.
    """

    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_code: str
    _babel_locale: Locale
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache."""
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - locales: Tuple of cached locale keys (LRU order)
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "locales": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for invalid locales.

        For unknown or invalid locales, logs a warning and formats with
        en_US rules. This method always succeeds; use create_or_raise() for
        strict validation.

        Args:
            locale_code: BCP 47 locale identifier (e.g., 'en-US', 'lv-LV')

        Returns:
            LocaleContext instance. The original locale_code is preserved
            even when falling back.
        """
        cache_key = normalize_locale(locale_code)

        with cls._cache_lock:
            if cache_key in cls._cache:
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        used_fallback = False
        try:
            babel_locale = Locale.parse(cache_key)
        except UnknownLocaleError as e:
            logger.warning("Unknown locale '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE)
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True
        except (ValueError, TypeError) as e:
            logger.warning(
                "Invalid locale format '%s': %s. Falling back to %s", locale_code, e, DEFAULT_LOCALE
            )
            babel_locale = Locale.parse(DEFAULT_LOCALE)
            used_fallback = True

        ctx = cls(locale_code=locale_code, _babel_locale=babel_locale, is_fallback=used_fallback)

        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]
            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                evicted, _ = cls._cache.popitem(last=False)
                logger.debug("Evicted locale context: %s", evicted)
            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, locale_code: str) -> "LocaleContext":
        """Create LocaleContext or raise on validation failure.

        Args:
            locale_code: BCP 47 locale identifier

        Returns:
            LocaleContext instance with valid locale

        Raises:
            ValueError: If locale code is invalid or unknown
        """
        try:
            babel_locale = Locale.parse(normalize_locale(locale_code))
        except UnknownLocaleError as e:
            msg = f"Unknown locale identifier '{locale_code}': {e}"
            raise ValueError(msg) from None
        except (ValueError, TypeError) as e:
            msg = f"Invalid locale format '{locale_code}': {e}"
            raise ValueError(msg) from None
        return cls(locale_code=locale_code, _babel_locale=babel_locale)

    @property
    def babel_locale(self) -> Locale:
        """Get pre-validated Babel Locale object for this context."""
        return self._babel_locale

    # ------------------------------------------------------------------
    # date-time
    # ------------------------------------------------------------------

    def format_datetime(self, value: int | float | date, options: FormatOptions) -> str:
        """Format a date/time with Intl.DateTimeFormat-style options.

        Args:
            value: Epoch milliseconds (UTC), date, or datetime.
                Naive datetimes are treated as UTC.
            options: dateStyle, timeStyle, weekday, era, year, month, day,
                hour, minute, second, timeZoneName, hour12, timeZone, pattern

        Returns:
            Formatted date/time string

        Raises:
            FormattingError: If options are unusable or the value is out of range

        Examples:
            >>> from datetime import date
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_datetime(date(2025, 1, 1), {"dateStyle": "full"})
            'Wednesday, January 1, 2025'
            >>> ctx.format_datetime(date(2025, 1, 1), {})
            '1/1/2025'
        """
        try:
            dt_value = _to_datetime(value)
            zone = self._timezone(options.get("timeZone"))

            pattern = options.get("pattern")
            if pattern is not None:
                return str(
                    babel_dates.format_datetime(
                        dt_value, format=str(pattern), tzinfo=zone, locale=self.babel_locale
                    )
                )

            date_style = options.get("dateStyle")
            time_style = options.get("timeStyle")
            if date_style is not None or time_style is not None:
                return self._format_styles(dt_value, zone, date_style, time_style)

            skeleton = self._skeleton(options) or "yMd"
            return str(
                babel_dates.format_skeleton(
                    skeleton, dt_value, tzinfo=zone, fuzzy=True, locale=self.babel_locale
                )
            )
        except _FORMAT_ERRORS as e:
            msg = ErrorTemplate.formatting_failed("date-time", value, str(e))
            raise FormattingError(msg) from e

    @staticmethod
    def _timezone(name: object) -> tzinfo | None:
        if name is None:
            return None
        if not isinstance(name, str):
            msg = f"timeZone must be a string, got {name!r}"
            raise TypeError(msg)
        return babel_dates.get_timezone(name)

    def _format_styles(
        self,
        dt_value: datetime,
        zone: tzinfo | None,
        date_style: object,
        time_style: object,
    ) -> str:
        for style in (date_style, time_style):
            if style is not None and style not in _STYLES:
                msg = f"Unknown date/time style {style!r}"
                raise ValueError(msg)

        if dt_value.tzinfo is None:
            dt_value = dt_value.replace(tzinfo=UTC)
        if zone is not None:
            dt_value = dt_value.astimezone(zone)

        if time_style is None:
            return str(babel_dates.format_date(dt_value.date(), format=date_style, locale=self.babel_locale))

        time_str = babel_dates.format_time(
            dt_value, format=time_style, tzinfo=dt_value.tzinfo, locale=self.babel_locale
        )
        if date_style is None:
            return str(time_str)

        date_str = babel_dates.format_date(dt_value.date(), format=date_style, locale=self.babel_locale)
        # CLDR: {0} is the time, {1} the date
        datetime_pattern = str(
            self.babel_locale.datetime_formats.get(date_style)
            or self.babel_locale.datetime_formats.get("medium")
            or "{1} {0}"
        )
        # Quoted CLDR literals ('at') lose their quotes
        return datetime_pattern.replace("'", "").format(time_str, date_str)

    def _skeleton(self, options: FormatOptions) -> str:
        """Translate Intl component options into a CLDR skeleton."""
        parts: list[str] = []
        for name in _SKELETON_ORDER:
            raw = options.get(name)
            if raw is None:
                continue
            if name == "hour":
                symbol = "h" if self._uses_12_hour(options.get("hour12")) else "H"
                parts.append(symbol * 2 if raw == "2-digit" else symbol)
                continue
            fields = _SKELETON_FIELDS[name]
            if raw not in fields:
                msg = f"Unsupported value {raw!r} for option {name}"
                raise ValueError(msg)
            parts.append(fields[raw])
        return "".join(parts)

    def _uses_12_hour(self, hour12: object) -> bool:
        if hour12 is not None:
            return bool(hour12)
        short_time = self.babel_locale.time_formats.get("short")
        return "h" in getattr(short_time, "pattern", str(short_time))

    # ------------------------------------------------------------------
    # list
    # ------------------------------------------------------------------

    def format_list(self, items: Sequence[str], options: FormatOptions) -> str:
        """Format a sequence of strings with Intl.ListFormat-style options.

        Args:
            items: Strings to join
            options: type (conjunction|disjunction|unit), style (long|short|narrow)

        Returns:
            Locale-joined list

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_list(["Alice", "Bob", "Charlie"], {})
            'Alice, Bob, and Charlie'
            >>> ctx.format_list(["John", "Jane"], {"type": "disjunction"})
            'John or Jane'
        """
        list_type = options.get("type", "conjunction")
        style = options.get("style", "long")
        try:
            babel_style = _LIST_STYLES[(list_type, style)]
            return str(babel_lists.format_list(list(items), style=babel_style, locale=self.babel_locale))
        except _FORMAT_ERRORS as e:
            msg = ErrorTemplate.formatting_failed("list", items, str(e))
            raise FormattingError(msg) from e

    # ------------------------------------------------------------------
    # number
    # ------------------------------------------------------------------

    def format_number(self, value: int | float | Decimal, options: FormatOptions) -> str:
        """Format a number with Intl.NumberFormat-style options.

        Args:
            value: Number to format (int, float, or Decimal; may be infinite)
            options: style, currency, currencyDisplay, currencySign, unit,
                unitDisplay, minimumIntegerDigits, minimumFractionDigits,
                maximumFractionDigits, useGrouping, notation, compactDisplay

        Returns:
            Formatted number string according to locale rules

        Raises:
            FormattingError: If options are unusable (e.g. currency style without currency)

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_number(1234.56, {"style": "currency", "currency": "USD"})
            '$1,234.56'
            >>> ctx.format_number(0.25, {"style": "percent"})
            '25%'
            >>> ctx.format_number(42, {"minimumFractionDigits": 2})
            '42.00'
        """
        try:
            return self._format_number(value, options)
        except _FORMAT_ERRORS as e:
            msg = ErrorTemplate.formatting_failed("number", value, str(e))
            raise FormattingError(msg) from e

    def _format_number(self, value: int | float | Decimal, options: FormatOptions) -> str:
        style = options.get("style", "decimal")
        notation = options.get("notation", "standard")
        grouping = options.get("useGrouping", True) not in (False, "false")

        if not Decimal(value).is_finite():
            sign = babel_numbers.get_minus_sign_symbol(self.babel_locale) if value < 0 else ""
            return f"{sign}{babel_numbers.get_infinity_symbol(self.babel_locale)}"

        if notation == "scientific":
            return str(babel_numbers.format_scientific(value, locale=self.babel_locale))
        if notation == "compact" and style == "decimal":
            length = options.get("compactDisplay", "short")
            return str(
                babel_numbers.format_compact_decimal(
                    value,
                    format_type=length,
                    fraction_digits=_option_int(options, "maximumFractionDigits", 0, 100) or 0,
                    locale=self.babel_locale,
                )
            )
        if notation not in ("standard", "compact"):
            msg = f"Unsupported notation {notation!r}"
            raise ValueError(msg)

        min_int = _option_int(options, "minimumIntegerDigits", 1, 21) or 1

        if style == "unit":
            unit = options.get("unit")
            length = options.get("unitDisplay", "short")
            if not isinstance(unit, str) or length not in _UNIT_LENGTHS:
                msg = f"unit style requires a unit and a valid unitDisplay, got {unit!r}/{length!r}"
                raise ValueError(msg)
            min_frac, max_frac = _fraction_digits(options, *_DEFAULT_FRACTION_DIGITS["unit"])
            return str(
                babel_units.format_unit(
                    value,
                    unit,
                    length=length,
                    format=_decimal_format(min_int, min_frac, max_frac, grouping=grouping),
                    locale=self.babel_locale,
                )
            )

        if style == "currency":
            return self._format_currency(value, options, min_int, grouping=grouping)

        if style not in ("decimal", "percent"):
            msg = f"Unsupported number style {style!r}"
            raise ValueError(msg)

        formats = self.babel_locale.decimal_formats if style == "decimal" else self.babel_locale.percent_formats
        pattern = babel_numbers.parse_pattern(formats.get(None).pattern)
        pattern.frac_prec = _fraction_digits(options, *_DEFAULT_FRACTION_DIGITS[style])
        pattern.int_prec = (min_int, max(min_int, pattern.int_prec[1]))
        return str(pattern.apply(value, self.babel_locale, group_separator=grouping))

    def _format_currency(
        self,
        value: int | float | Decimal,
        options: FormatOptions,
        min_int: int,
        *,
        grouping: bool,
    ) -> str:
        currency = options.get("currency")
        if not isinstance(currency, str) or len(currency) != 3 or not currency.isalpha():
            msg = f"currency style requires an ISO 4217 currency code, got {currency!r}"
            raise ValueError(msg)
        currency = currency.upper()
        display = options.get("currencyDisplay", "symbol")

        if display == "name":
            return str(
                babel_numbers.format_currency(
                    value, currency, locale=self.babel_locale, format_type="name"
                )
            )
        if display not in ("symbol", "narrowSymbol", "code"):
            msg = f"Unsupported currencyDisplay {display!r}"
            raise ValueError(msg)

        format_type = "accounting" if options.get("currencySign") == "accounting" else "standard"
        raw_pattern = self.babel_locale.currency_formats[format_type].pattern
        if display == "code":
            # Single U+00A4 = symbol, double U+00A4 = ISO code per CLDR
            raw_pattern = raw_pattern.replace("\xa4", "\xa4\xa4")
        pattern = babel_numbers.parse_pattern(raw_pattern)
        digits = babel_numbers.get_currency_precision(currency)
        pattern.frac_prec = _fraction_digits(options, digits, digits)
        pattern.int_prec = (min_int, max(min_int, pattern.int_prec[1]))
        return str(
            pattern.apply(
                value,
                self.babel_locale,
                currency=currency,
                currency_digits=False,
                group_separator=grouping,
            )
        )

    # ------------------------------------------------------------------
    # plural
    # ------------------------------------------------------------------

    def select_plural(self, value: int | float | Decimal, options: FormatOptions) -> str:
        """Select the CLDR plural category with Intl.PluralRules-style options.

        Args:
            value: Number to categorize
            options: type (cardinal|ordinal)

        Returns:
            Plural category name ("zero", "one", "two", "few", "many", "other")

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.select_plural(1, {})
            'one'
            >>> ctx.select_plural(3, {"type": "ordinal"})
            'few'
        """
        rule_type = options.get("type", "cardinal")
        if rule_type not in ("cardinal", "ordinal"):
            msg = ErrorTemplate.formatting_failed("plural", value, f"unknown type {rule_type!r}")
            raise FormattingError(msg)
        return select_plural_category(value, self.babel_locale, ordinal=rule_type == "ordinal")

    # ------------------------------------------------------------------
    # relative-time
    # ------------------------------------------------------------------

    def format_relative_time(self, value: int | float, unit: str, options: FormatOptions) -> str:
        """Format a signed offset with Intl.RelativeTimeFormat-style options.

        Negative values are in the past, zero and positive values in the
        future. Quarters are rendered as three-month spans.

        Babel renders whole units only, which differs from
        Intl.RelativeTimeFormat in two ways: fractional amounts are rounded
        to the nearest whole unit (1.5 days -> "in 2 days"), and negative
        zero loses its sign ("in 0 days", not "0 days ago").

        Args:
            value: Signed amount of ``unit``
            unit: Unit name, singular or plural (e.g. "day", "days")
            options: style (long|short|narrow)

        Returns:
            Formatted relative time

        Examples:
            >>> ctx = LocaleContext.create('en-US')
            >>> ctx.format_relative_time(-1, "day", {})
            '1 day ago'
            >>> ctx.format_relative_time(3, "hours", {})
            'in 3 hours'
        """
        style = options.get("style", "long")
        try:
            if style not in _UNIT_LENGTHS:
                msg = f"Unknown relative time style {style!r}"
                raise ValueError(msg)
            canonical = RELATIVE_TIME_UNITS[unit]
            amount = value
            if canonical == "quarter":
                canonical, amount = "month", value * 3
            seconds = amount * _SECONDS_PER_UNIT[canonical]
            return str(
                babel_dates.format_timedelta(
                    seconds,
                    granularity=canonical,
                    threshold=math.inf,
                    add_direction=True,
                    format=style,
                    locale=self.babel_locale,
                )
            )
        except _FORMAT_ERRORS as e:
            msg = ErrorTemplate.formatting_failed("relative-time", value, str(e))
            raise FormattingError(msg) from e
