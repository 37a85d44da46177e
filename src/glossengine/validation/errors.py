"""Conversion of pydantic validation errors into diagnostics.

Python 3.13+.
"""

from pydantic import ValidationError

from glossengine.diagnostics import Diagnostic, DiagnosticCode

__all__ = ["diagnostics_from_error"]

_MAX_INPUT_REPR = 80


def _short_repr(value: object) -> str:
    text = repr(value)
    if len(text) > _MAX_INPUT_REPR:
        return text[: _MAX_INPUT_REPR - 3] + "..."
    return text


def diagnostics_from_error(
    error: ValidationError,
    code: DiagnosticCode,
    *,
    prefix: tuple[str | int, ...] = (),
) -> tuple[Diagnostic, ...]:
    """Convert every entry of a pydantic ValidationError into a Diagnostic.

    Args:
        error: Raised ValidationError
        code: Diagnostic code for all entries
        prefix: Path prepended to each error location

    Returns:
        One Diagnostic per pydantic error, in pydantic's order
    """
    return tuple(
        Diagnostic(
            code=code,
            message=detail["msg"],
            path=prefix + tuple(detail["loc"]),
            input_value=_short_repr(detail.get("input")),
        )
        for detail in error.errors(include_url=False)
    )
