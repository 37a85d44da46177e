"""Glossary loading from JSON strings, bytes and files.

Components:
    load_glossary - Decode and validate one glossary document
    PathGlossaryLoader - Locale-templated file loader with path-traversal prevention

Python 3.13+.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from glossengine.diagnostics import ErrorTemplate, GlossaryLoadError
from glossengine.models import Glossary

__all__ = ["PathGlossaryLoader", "load_glossary"]

logger = logging.getLogger(__name__)


def _decode(source: str | bytes | Path) -> tuple[Any, str]:
    """Return (decoded JSON, source description)."""
    if isinstance(source, Path):
        description = str(source)
        try:
            text: str | bytes = source.read_bytes()
        except OSError as e:
            logger.error("Failed to read glossary %s: %s", description, e)
            raise GlossaryLoadError(ErrorTemplate.load_failed(description, str(e)), source=description) from e
    else:
        description = "<string>"
        text = source

    try:
        return json.loads(text), description
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.error("Failed to decode glossary %s: %s", description, e)
        raise GlossaryLoadError(
            ErrorTemplate.load_json_invalid(description, str(e)), source=description
        ) from e


def load_glossary(source: str | bytes | Path) -> Glossary:
    """Load and validate a glossary.

    Args:
        source: JSON document as str or bytes, or a Path to a JSON file

    Returns:
        Validated Glossary

    Raises:
        GlossaryLoadError: If the file cannot be read or is not valid JSON
        GlossaryValidationError: If the document does not match the glossary schema

    Example:
        >>> glossary = load_glossary('{"$locale": "en-US", "$translations": {"hi": "Hello"}}')
        >>> glossary.locale
        'en-US'
    """
    data, description = _decode(source)
    glossary = Glossary.from_data(data)
    logger.debug("Loaded glossary %s: locale=%s, version=%s", description, glossary.locale, glossary.version)
    return glossary


@dataclass(frozen=True, slots=True)
class PathGlossaryLoader:
    """File system glossary loader using path templates.

    Uses a {locale} placeholder in the path template for locale substitution.

    Security:
        Locale codes containing path separators or ".." are rejected.
        All resolved paths are validated against a fixed root directory.

    Example:
        >>> loader = PathGlossaryLoader("locales/{locale}.json")
        >>> glossary = loader.load("en-US")
        # Loads from: locales/en-US.json

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate the template.

        Raises:
            ValueError: If base_path does not contain {locale} placeholder
        """
        if "{locale}" not in self.base_path:
            msg = f"base_path must contain '{{locale}}' placeholder, got: '{self.base_path}'"
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            # "locales/{locale}.json" -> "locales"
            static_prefix = self.base_path.split("{locale}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    @staticmethod
    def _validate_locale(locale: str) -> None:
        """Reject locale codes that could escape the root directory.

        Raises:
            ValueError: If locale is empty or contains unsafe path components
        """
        if not locale:
            msg = "Locale code cannot be empty"
            raise ValueError(msg)
        if ".." in locale:
            msg = f"Path traversal sequences not allowed in locale: '{locale}'"
            raise ValueError(msg)
        if "/" in locale or "\\" in locale:
            msg = f"Path separators not allowed in locale: '{locale}'"
            raise ValueError(msg)

    def describe_path(self, locale: str) -> str:
        """Return the locale-substituted path for diagnostics."""
        return self.base_path.replace("{locale}", locale)

    def load(self, locale: str) -> Glossary:
        """Load the glossary of ``locale``.

        Args:
            locale: Locale code to substitute in the path template

        Returns:
            Validated Glossary

        Raises:
            ValueError: If locale contains path traversal sequences or the
                resolved path leaves the root directory
            GlossaryLoadError: If the file cannot be read or is not valid JSON
            GlossaryValidationError: If the document does not match the schema
        """
        self._validate_locale(locale)
        path = Path(self.describe_path(locale))

        try:
            path.resolve().relative_to(self._resolved_root)
        except ValueError:
            msg = f"Path '{path}' resolves outside root directory '{self._resolved_root}'"
            raise ValueError(msg) from None

        return load_glossary(path)
