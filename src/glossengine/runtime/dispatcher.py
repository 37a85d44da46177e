"""Format dispatch: validate an argument, then call the locale primitive.

Python 3.13+.
"""

import logging
from decimal import Decimal
from typing import Any

from glossengine.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    FormatDispatchError,
    FormattingError,
)
from glossengine.enums import FormatKind
from glossengine.models import (
    DateTimeFormat,
    FormatSpec,
    ListFormat,
    NumberFormat,
    PluralFormat,
    RelativeTimeFormat,
)
from glossengine.validation import validate_format_input

from .locale_context import LocaleContext

__all__ = ["format_value"]

logger = logging.getLogger(__name__)

type FormatOutcome = tuple[str | None, tuple[Diagnostic, ...]]


def format_value(
    locale: str | LocaleContext,
    raw_value: Any,
    spec: FormatSpec,
    *,
    param: str | None = None,
) -> FormatOutcome:
    """Format one argument according to its FormatSpec.

    The argument is first checked against the input shape of the format
    kind. Rejected arguments and primitive failures are both returned as
    diagnostics; only an unknown FormatSpec type raises.

    Args:
        locale: Locale tag or prepared LocaleContext
        raw_value: Argument as passed by the caller
        spec: Validated FormatSpec variant
        param: Parameter name; ``{param}`` inside a selected plural literal
            is replaced with the formatted number

    Returns:
        (text, ()) on success, (None, diagnostics) on failure

    Raises:
        FormatDispatchError: If ``spec`` is not a known FormatSpec variant

    Examples:
        >>> spec = NumberFormat.model_validate({"$format": "number"})
        >>> format_value("en-US", "1234.5", spec)
        ('1,234.5', ())
        >>> text, errors = format_value("en-US", "abc", spec)
        >>> text is None, errors[0].code.name
        (None, 'FORMAT_INPUT_INVALID')
    """
    ctx = locale if isinstance(locale, LocaleContext) else LocaleContext.create(locale)

    match spec:
        case DateTimeFormat():
            kind = FormatKind.DATE_TIME
        case ListFormat():
            kind = FormatKind.LIST
        case NumberFormat():
            kind = FormatKind.NUMBER
        case PluralFormat():
            kind = FormatKind.PLURAL
        case RelativeTimeFormat():
            kind = FormatKind.RELATIVE_TIME
        case _:
            raise FormatDispatchError(ErrorTemplate.format_kind_unsupported(type(spec).__name__))

    value, errors = validate_format_input(kind, raw_value)
    if errors:
        logger.debug("Rejected %s input %r", kind, raw_value)
        return None, errors

    try:
        return _apply(ctx, spec, value, param), ()
    except FormattingError as e:
        diagnostic = e.diagnostic or Diagnostic(code=DiagnosticCode.FORMATTING_FAILED, message=str(e))
        logger.debug("Formatting failed for %s: %s", kind, diagnostic.message)
        return None, (diagnostic,)


def _apply(ctx: LocaleContext, spec: FormatSpec, value: Any, param: str | None) -> str:
    match spec:
        case DateTimeFormat(options=options):
            return ctx.format_datetime(value, options)
        case ListFormat(options=options):
            return ctx.format_list(value, options)
        case NumberFormat(options=options):
            if isinstance(value, str):
                # Infinity sentinel
                value = Decimal(value)
            return ctx.format_number(value, options)
        case PluralFormat(options=options, plural=plural):
            category = ctx.select_plural(value, options)
            if plural is None or category not in plural:
                return category
            literal = plural[category]
            if param is not None:
                literal = literal.replace(f"{{{param}}}", ctx.format_number(value, {}))
            return literal
        case RelativeTimeFormat(options=options):
            return ctx.format_relative_time(value.value, value.unit, options)
        case _:
            raise FormatDispatchError(ErrorTemplate.format_kind_unsupported(type(spec).__name__))
