"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale format normalization so that culture lookups and Babel
lookups agree on one canonical spelling.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-IN), while Babel/POSIX uses underscores (en_IN).
    Surrounding whitespace is removed.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-IN", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_IN", "pt_BR")

    Example:
        >>> normalize_locale("en-IN")
        'en_IN'
        >>> normalize_locale("fr")  # Already normalized
        'fr'
    """
    return locale_code.strip().replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        BabelImportError: If Babel is not installed
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    from numstring.core.babel_compat import get_locale_class  # noqa: PLC0415

    return get_locale_class().parse(normalize_locale(locale_code))
