"""Template resolution: key lookup, token substitution and formatting.

translate() never raises for lookup or argument problems. It returns the
best display string it can build plus the issues it met on the way:

    ================ ===================================== ====================
    Problem          Substituted text                      Issue
    ================ ===================================== ====================
    unknown key      the key itself                        unknown-key
    malformed entry  the key itself                        unknown-key
    missing argument ``$default``, else the param name     missing-param (no
                                                           issue for defaults)
    invalid argument ``str(value)``                        invalid-format
    ================ ===================================== ====================

Python 3.13+.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

from glossengine.constants import PARAM_TOKEN_RE
from glossengine.core import resolve_path
from glossengine.diagnostics import (
    InvalidFormatIssue,
    Issue,
    MissingParamIssue,
    UnknownKeyIssue,
)
from glossengine.models import Glossary, ParamSpec, Template

from .dispatcher import format_value
from .locale_context import LocaleContext
from .result import TranslationResult

__all__ = ["resolve_param_spec", "resolve_template", "translate"]

logger = logging.getLogger(__name__)

_EMPTY_SPEC = ParamSpec()


def resolve_template(glossary: Glossary, key: str) -> str | Template | None:
    """Look up the translation at ``key``.

    Returns:
        The plain string or Template at ``key``, or None when the key is
        absent or addresses something that is not a translation (such as
        an intermediate map)
    """
    entry = resolve_path(glossary.translations, key)
    if isinstance(entry, (str, Template)):
        return entry
    return None


def resolve_param_spec(template: Template, param: str) -> ParamSpec:
    """Return the ParamSpec of ``param``, or an empty one when undeclared."""
    if not template.params:
        return _EMPTY_SPEC
    spec = resolve_path(template.params, param)
    return spec if isinstance(spec, ParamSpec) else _EMPTY_SPEC


def translate(
    glossary: Glossary,
    key: str,
    args: Mapping[str, Any] | None = None,
) -> TranslationResult:
    """Resolve ``key`` against ``glossary`` and render it with ``args``.

    Args:
        glossary: Validated glossary; its locale drives all formatting
        key: Dotted translation key, e.g. ``"user.notifications"``
        args: Runtime arguments by name. A value of None counts as missing.

    Returns:
        TranslationResult with the display string and issues (None if clean)

    Examples:
        >>> g = Glossary.from_data({
        ...     "$locale": "en-US",
        ...     "$translations": {
        ...         "hello": {"$template": "Hello {name}", "$params": {"name": {"$default": "User"}}},
        ...     },
        ... })
        >>> translate(g, "hello").result
        'Hello User'
        >>> translate(g, "hello", {"name": "Ann"}).result
        'Hello Ann'
        >>> [str(issue) for issue in translate(g, "missing").issues]
        ['[unknown-key] missing']
    """
    arguments: Mapping[str, Any] = args if args is not None else {}

    entry = resolve_template(glossary, key)
    if entry is None:
        logger.debug("Translation key not found: %s", key)
        return TranslationResult(key, (UnknownKeyIssue(key),))
    if isinstance(entry, str):
        return TranslationResult(entry)

    issues: list[Issue] = []
    ctx = LocaleContext.create(glossary.locale)

    def substitute(match: re.Match[str]) -> str:
        param = match.group(1)
        spec = resolve_param_spec(entry, param)
        value = arguments.get(spec.alias or param)

        if value is None:
            if spec.default is not None:
                return spec.default
            issues.append(MissingParamIssue(key, param))
            return param

        if spec.format is None:
            return str(value)

        text, errors = format_value(ctx, value, spec.format, param=param)
        if text is None:
            issues.append(InvalidFormatIssue(key, param, value, errors))
            return str(value)
        return text

    result = PARAM_TOKEN_RE.sub(substitute, entry.template)
    logger.debug("Resolved '%s' with %d issue(s)", key, len(issues))
    return TranslationResult(result, tuple(issues) or None)
