"""Glossary-bound translation facade.

Python 3.13+.
"""

import logging
from collections.abc import Mapping
from typing import Any

from glossengine.diagnostics import TranslationError
from glossengine.introspection import TranslationIntrospection, introspect_translation
from glossengine.models import Glossary

from .engine import resolve_template, translate
from .locale_context import LocaleContext
from .result import TranslationResult

__all__ = ["Translator"]

logger = logging.getLogger(__name__)


class Translator:
    """Translate keys of one glossary.

    Thin wrapper around translate() that binds the glossary, merges keyword
    arguments, and logs issues. In strict mode any issue raises
    TranslationError instead of returning a degraded string.

    Examples:
        >>> translator = Translator(Glossary.from_data({
        ...     "$locale": "en-US",
        ...     "$translations": {"greeting": {"$template": "Hi {name}!"}},
        ... }))
        >>> translator.text("greeting", name="Ann")
        'Hi Ann!'
    """

    __slots__ = ("_glossary", "_strict")

    def __init__(self, glossary: Glossary, *, strict: bool = False) -> None:
        """Initialize Translator.

        Args:
            glossary: Validated glossary
            strict: Raise TranslationError on any issue (default: False)
        """
        self._glossary = glossary
        self._strict = strict

        # Warm the locale cache; logs once if the locale falls back to en_US
        LocaleContext.create(glossary.locale)

        logger.info(
            "Translator initialized: locale=%s, version=%s, strict=%s",
            glossary.locale,
            glossary.version,
            strict,
        )

    @property
    def glossary(self) -> Glossary:
        """The bound glossary (read-only)."""
        return self._glossary

    @property
    def locale(self) -> str:
        """Locale tag of the bound glossary."""
        return self._glossary.locale

    @property
    def strict(self) -> bool:
        """Whether issues raise TranslationError."""
        return self._strict

    def translate(
        self,
        key: str,
        args: Mapping[str, Any] | None = None,
        /,
        **kwargs: Any,
    ) -> TranslationResult:
        """Translate ``key``.

        Args:
            key: Dotted translation key [positional-only]
            args: Arguments by name [positional-only]
            **kwargs: Additional arguments; override entries of ``args``

        Returns:
            TranslationResult

        Raises:
            TranslationError: In strict mode, if the translation has issues
        """
        merged: Mapping[str, Any] = {**args, **kwargs} if args is not None else kwargs
        outcome = translate(self._glossary, key, merged)

        if outcome.issues is not None:
            logger.warning("Translation '%s' produced %d issue(s)", key, len(outcome.issues))
            for issue in outcome.issues:
                logger.debug("  - %s", issue)
            if self._strict:
                msg = f"Translation '{key}' produced {len(outcome.issues)} issue(s)"
                raise TranslationError(msg, outcome)

        return outcome

    def text(self, key: str, args: Mapping[str, Any] | None = None, /, **kwargs: Any) -> str:
        """Translate ``key`` and return only the display string."""
        return self.translate(key, args, **kwargs).result

    def has_key(self, key: str) -> bool:
        """Check whether ``key`` addresses a translation (not a map node)."""
        return resolve_template(self._glossary, key) is not None

    def params(self, key: str) -> TranslationIntrospection | None:
        """Describe the parameters of the translation at ``key``."""
        return introspect_translation(self._glossary, key)

    def __repr__(self) -> str:
        return f"Translator(locale={self.locale!r}, strict={self._strict})"
