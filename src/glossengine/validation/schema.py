"""Validators for glossary documents, translation entries and format arguments.

Every validator has the same contract::

    value, diagnostics = validate_xxx(data)

On success ``value`` is the validated object and ``diagnostics`` is empty.
On failure ``value`` is None and ``diagnostics`` describes each violation.
Validators never raise for bad input.

Python 3.13+.
"""

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from glossengine.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate
from glossengine.enums import FormatKind
from glossengine.models import (
    DateTimeInput,
    Glossary,
    ListInput,
    NumberInput,
    ParamSpec,
    PluralInput,
    RelativeTimeInput,
    Template,
    Translation,
)

from .errors import diagnostics_from_error

__all__ = [
    "validate_format_input",
    "validate_glossary",
    "validate_param_spec",
    "validate_template",
    "validate_translation",
]

logger = logging.getLogger(__name__)

type ValidationOutcome[T] = tuple[T | None, tuple[Diagnostic, ...]]

_translation_adapter: TypeAdapter[Any] = TypeAdapter(Translation)

_input_adapters: dict[FormatKind, TypeAdapter[Any]] = {
    FormatKind.DATE_TIME: TypeAdapter(DateTimeInput),
    FormatKind.LIST: TypeAdapter(ListInput),
    FormatKind.NUMBER: TypeAdapter(NumberInput),
    FormatKind.PLURAL: TypeAdapter(PluralInput),
    FormatKind.RELATIVE_TIME: TypeAdapter(RelativeTimeInput),
}


def validate_glossary(data: Any) -> ValidationOutcome[Glossary]:
    """Validate a decoded glossary document.

    Args:
        data: Mapping with ``$version``, ``$locale`` and ``$translations``

    Returns:
        (Glossary, ()) or (None, diagnostics)
    """
    try:
        glossary = Glossary.model_validate(data)
    except ValidationError as e:
        diagnostics = diagnostics_from_error(e, DiagnosticCode.SCHEMA_INVALID)
        logger.debug("Glossary rejected with %d error(s)", len(diagnostics))
        return None, diagnostics
    return glossary, ()


def validate_translation(data: Any) -> ValidationOutcome[str | Template]:
    """Validate one translation entry: a string or a template."""
    try:
        return _translation_adapter.validate_python(data), ()
    except ValidationError as e:
        return None, diagnostics_from_error(e, DiagnosticCode.SCHEMA_INVALID)


def validate_template(data: Any) -> ValidationOutcome[Template]:
    """Validate a ``{"$template": ..., "$params": ...}`` entry."""
    try:
        return Template.model_validate(data), ()
    except ValidationError as e:
        return None, diagnostics_from_error(e, DiagnosticCode.SCHEMA_INVALID)


def validate_param_spec(data: Any) -> ValidationOutcome[ParamSpec]:
    """Validate one ``$params`` entry.

    Examples:
        >>> spec, _ = validate_param_spec({"$format": "number", "$options": {"style": "percent"}})
        >>> spec.format.options
        {'style': 'percent'}
        >>> spec, errors = validate_param_spec({"$format": "duration"})
        >>> spec is None
        True
    """
    try:
        return ParamSpec.model_validate(data), ()
    except ValidationError as e:
        return None, diagnostics_from_error(e, DiagnosticCode.SCHEMA_INVALID)


def validate_format_input(kind: FormatKind | str, value: Any) -> ValidationOutcome[Any]:
    """Check a runtime argument against the shape its format requires.

    Args:
        kind: Format kind ("date-time", "list", "number", "plural", "relative-time")
        value: Raw argument

    Returns:
        (validated value, ()) or (None, diagnostics). The validated value is
        normalized: numeric strings become Decimal, booleans become int, and
        relative-time mappings become RelativeTimeInput.
    """
    try:
        adapter = _input_adapters[FormatKind(kind)]
    except ValueError:
        return None, (ErrorTemplate.format_kind_unsupported(str(kind)),)
    try:
        return adapter.validate_python(value), ()
    except ValidationError as e:
        return None, diagnostics_from_error(e, DiagnosticCode.FORMAT_INPUT_INVALID)
