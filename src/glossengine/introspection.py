"""Translation introspection.

Reports which parameters a translation expects without rendering it, e.g.
to check that a caller passes every argument, or to build translator
tooling on top of a glossary.

Python 3.13+.
"""

from dataclasses import dataclass

from glossengine.constants import PARAM_TOKEN_RE
from glossengine.enums import FormatKind
from glossengine.models import Glossary

__all__ = [
    "ParamInfo",
    "TranslationIntrospection",
    "extract_params",
    "introspect_translation",
]


@dataclass(frozen=True, slots=True)
class ParamInfo:
    """One template parameter.

    Attributes:
        name: Token name as written in the template
        argument: Argument name read at runtime (alias or name)
        has_default: Whether a missing argument is silently defaulted
        format: Declared format kind, or None for plain substitution
    """

    name: str
    argument: str
    has_default: bool
    format: FormatKind | None


@dataclass(frozen=True, slots=True)
class TranslationIntrospection:
    """Parameter summary of one translation.

    Attributes:
        key: Translation key
        is_template: False for plain strings
        params: Parameters in order of first appearance
    """

    key: str
    is_template: bool
    params: tuple[ParamInfo, ...]

    def get_param_names(self) -> frozenset[str]:
        """Token names used by the template."""
        return frozenset(p.name for p in self.params)

    def get_argument_names(self) -> frozenset[str]:
        """Argument names read at runtime (after aliasing)."""
        return frozenset(p.argument for p in self.params)

    def get_required_arguments(self) -> frozenset[str]:
        """Argument names without a default."""
        return frozenset(p.argument for p in self.params if not p.has_default)


def extract_params(template_text: str) -> tuple[str, ...]:
    """List the unique ``{param}`` token names of a template, in order.

    Examples:
        >>> extract_params("Hello {name}, you have {count} ({count}) items")
        ('name', 'count')
        >>> extract_params("{not a token} {}")
        ()
    """
    return tuple(dict.fromkeys(PARAM_TOKEN_RE.findall(template_text)))


def introspect_translation(glossary: Glossary, key: str) -> TranslationIntrospection | None:
    """Describe the translation at ``key``.

    Returns:
        TranslationIntrospection, or None if ``key`` is not a translation
    """
    # Lazy import: runtime imports this module
    from glossengine.runtime.engine import resolve_param_spec, resolve_template  # noqa: PLC0415

    entry = resolve_template(glossary, key)
    if entry is None:
        return None
    if isinstance(entry, str):
        return TranslationIntrospection(key=key, is_template=False, params=())

    params = []
    for name in extract_params(entry.template):
        spec = resolve_param_spec(entry, name)
        params.append(
            ParamInfo(
                name=name,
                argument=spec.alias or name,
                has_default=spec.default is not None,
                format=FormatKind(spec.format.format) if spec.format is not None else None,
            )
        )
    return TranslationIntrospection(key=key, is_template=True, params=tuple(params))
