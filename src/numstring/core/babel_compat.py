"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across all Babel-dependent code.

Design Rationale:
    numstring supports two installation modes:
    - Core: `pip install numstring` (no external dependencies)
    - CLDR: `pip install numstring[babel]` (separator settings from any locale)

    This module ensures that:
    1. Core installations never trigger Babel imports
    2. NumberCultureSettings.from_locale() gets a helpful error when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from numstring.core.babel_compat import require_babel

    def my_function(locale_code: str) -> None:
        require_babel("my_function")  # Raises ImportError if Babel missing
        from babel import Locale  # Safe to import Babel now
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelNumbersProtocol(Protocol):
    """Protocol for Babel numbers module interface.

    Defines the subset of babel.numbers API actually used by numstring.
    Provides type safety without requiring full Babel type stubs.
    """

    def get_decimal_symbol(
        self,
        locale: Locale | str | None = None,
        *,
        numbering_system: str = "latn",
    ) -> str:
        """Return the decimal separator symbol of the locale."""
        ...

    def get_group_symbol(
        self,
        locale: Locale | str | None = None,
        *,
        numbering_system: str = "latn",
    ) -> str:
        """Return the grouping (thousand) separator symbol of the locale."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_locale_class",
    "get_unknown_locale_error_class",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed.

    Provides a consistent, helpful error message directing users to install
    the Babel dependency.
    """

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install numstring[babel]"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of functions/methods that require Babel.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error_class() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Use for exception handling when you need to catch UnknownLocaleError.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error_class")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the Babel numbers module.

    Returns:
        The babel.numbers module (typed via BabelNumbersProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers  # type: ignore[return-value]
