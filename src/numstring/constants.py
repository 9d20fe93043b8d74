"""Shared constants for numstring.

Single source of truth for the tunables used across the parsing and
formatting packages. Placing them here avoids circular imports between
``numstring.parsing`` and ``numstring.formatting``.

Constants are grouped by domain:
- Defaults: Culture used when the caller does not choose one
- Canonical literal: Symbols of the separator-free numeric literal
- Format specifiers: Display-precision syntax and its bounds
- Cache limits: Memory bounds for compiled pattern catalogs

Python 3.13+. Zero external dependencies.
"""

from numstring.enums import Culture

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Defaults
    "DEFAULT_CULTURE",
    # Canonical literal
    "CANONICAL_DECIMAL_POINT",
    "SIGN_SYMBOLS",
    # Format specifiers
    "FORMAT_SPEC_PREFIX",
    "MAX_FRACTION_DIGITS",
    "MAX_INTEGER_DIGITS",
    # Cache limits
    "MAX_CATALOG_CACHE_SIZE",
]

# ============================================================================
# DEFAULTS
# ============================================================================

# Culture used by to_number() and ConvertString when none is given.
DEFAULT_CULTURE: Culture = Culture.ENGLISH

# ============================================================================
# CANONICAL LITERAL
# ============================================================================

# Decimal point of the canonical literal handed to native numeric parsing.
CANONICAL_DECIMAL_POINT: str = "."

# Signs accepted as the first character of a numeric string.
SIGN_SYMBOLS: str = "+-"

# ============================================================================
# FORMAT SPECIFIERS
# ============================================================================

# Display-precision specifiers look like "N0", "N2", "N10".
FORMAT_SPEC_PREFIX: str = "N"

# Upper bound for the fractional digit count of a specifier.
MAX_FRACTION_DIGITS: int = 100

# Upper bound for the integer digit count of a formatted value.
MAX_INTEGER_DIGITS: int = 100_000

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum compiled pattern catalogs kept in memory (one per settings value).
# Built-in cultures need 4 entries; the rest covers custom separators.
MAX_CATALOG_CACHE_SIZE: int = 128
