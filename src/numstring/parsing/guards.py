"""Type guard functions for parsing result type narrowing.

All to_number*() functions return tuple[result, tuple[ConversionError, ...]].
Type guards check the result component to narrow types for mypy.

Python 3.13+ with TypeIs support (PEP 742).

Note: All guards accept None and return False. This simplifies the pattern from
`if not errors and is_valid_float(result)` to just `if is_valid_float(result)`.

Example:
    >>> result, errors = to_number_culture("1 000,5", Culture.FRENCH, Decimal)
    >>> if is_valid_decimal(result):
    ...     # mypy knows result is finite Decimal
    ...     amount = result.quantize(Decimal("0.01"))
"""

import math
from decimal import Decimal
from typing import TypeIs

__all__ = [
    "is_valid_decimal",
    "is_valid_float",
    "is_valid_integer",
]


def is_valid_integer(value: object) -> TypeIs[int]:
    """Type guard: Check if a parsed value is an int (not None, not bool).

    Args:
        value: Value from a to_number*() result tuple (may be None on error)

    Returns:
        True if value is an int, False otherwise
    """
    return isinstance(value, int) and not isinstance(value, bool)


def is_valid_float(value: object) -> TypeIs[float]:
    """Type guard: Check if a parsed value is a finite float.

    Args:
        value: Value from a to_number*() result tuple (may be None on error)

    Returns:
        True if value is a finite float, False otherwise

    Example:
        >>> result, errors = to_number("1,234.56")
        >>> if is_valid_float(result):
        ...     total = result * 1.21
    """
    return isinstance(value, float) and math.isfinite(value)


def is_valid_decimal(value: object) -> TypeIs[Decimal]:
    """Type guard: Check if a parsed value is a finite Decimal.

    Args:
        value: Value from a to_number*() result tuple (may be None on error)

    Returns:
        True if value is a finite Decimal, False otherwise
    """
    return isinstance(value, Decimal) and value.is_finite()
