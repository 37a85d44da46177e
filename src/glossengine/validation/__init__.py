"""Schema validation returning ``(value | None, diagnostics)`` pairs.

Python 3.13+.
"""

from .errors import diagnostics_from_error
from .schema import (
    validate_format_input,
    validate_glossary,
    validate_param_spec,
    validate_template,
    validate_translation,
)

__all__ = [
    "diagnostics_from_error",
    "validate_format_input",
    "validate_glossary",
    "validate_param_spec",
    "validate_template",
    "validate_translation",
]
