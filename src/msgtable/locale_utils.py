"""Locale identifier utilities.

Locale identifiers double as directory names (catalog roots) and column
names (tables), so they are validated for path safety at every boundary.
Recognition against CLDR data is advisory only: catalogs commonly use
project-specific codes such as 'jp' or 'cn'.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging

from babel import Locale, UnknownLocaleError

__all__ = [
    "is_known_locale",
    "locale_display_name",
    "normalize_locale",
    "validate_locale_code",
    "warn_unknown_locales",
]

logger = logging.getLogger(__name__)


def validate_locale_code(locale: str) -> None:
    """Validate a locale identifier for use as a directory name.

    Args:
        locale: Locale identifier to validate

    Raises:
        ValueError: If the identifier is empty, has surrounding whitespace,
            contains path separators or path traversal sequences
    """
    if not locale:
        msg = "Locale code cannot be empty"
        raise ValueError(msg)
    if locale.strip() != locale:
        msg = f"Locale code contains leading/trailing whitespace: {locale!r}"
        raise ValueError(msg)
    if ".." in locale:
        msg = f"Path traversal sequences not allowed in locale: '{locale}'"
        raise ValueError(msg)
    if "/" in locale or "\\" in locale:
        msg = f"Path separators not allowed in locale: '{locale}'"
        raise ValueError(msg)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    Example:
        >>> normalize_locale("pt-BR")
        'pt_BR'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=128)
def _parse_locale(locale_code: str) -> Locale | None:
    try:
        return Locale.parse(normalize_locale(locale_code))
    except (UnknownLocaleError, ValueError):
        return None


def is_known_locale(locale_code: str) -> bool:
    """Check whether Babel's CLDR data knows ``locale_code``.

    Example:
        >>> is_known_locale("zh")
        True
        >>> is_known_locale("jp")
        False
    """
    return _parse_locale(locale_code) is not None


def locale_display_name(locale_code: str) -> str | None:
    """Native display name of a locale (e.g., '中文' for 'zh'), or None."""
    parsed = _parse_locale(locale_code)
    if parsed is None:
        return None
    return parsed.get_display_name()


def warn_unknown_locales(locales: tuple[str, ...] | list[str]) -> None:
    """Log a warning for every locale CLDR does not recognize."""
    for locale in locales:
        if not is_known_locale(locale):
            logger.warning("Locale '%s' is not a recognized CLDR locale identifier", locale)
