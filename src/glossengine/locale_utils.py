"""Locale utilities for BCP-47 to POSIX conversion.

Glossaries carry BCP-47 tags (``en-US``) while Babel expects POSIX-style
identifiers (``en_US``). Normalize once at the boundary and use the
normalized form for cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

__all__ = ["normalize_locale"]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("zh-Hans-CN")
        'zh_Hans_CN'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.strip().replace("-", "_")
