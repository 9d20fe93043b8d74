"""Number parsing functions with culture awareness.

- to_number*() return tuple[value | None, tuple[ConversionError, ...]]
- Errors are returned in the tuple, never raised
- Target type chosen per call: NumericType (I8 ... F64) or int/float/Decimal

Thread-safe. Pure functions over immutable settings.

Python 3.13+.
"""

from numstring.core.settings import NumberCultureSettings
from numstring.diagnostics import ConversionError
from numstring.enums import Culture

from .classifier import ConvertString
from .targets import NumberValue, TargetSpec

__all__ = [
    "to_number",
    "to_number_culture",
    "to_number_separators",
]


def to_number(
    value: str,
    target: TargetSpec = float,
) -> tuple[NumberValue | None, tuple[ConversionError, ...]]:
    """Parse a number written with the default culture's separators.

    Args:
        value: Number string (e.g., "1,000.25", "-42", ".5")
        target: NumericType, or one of int, float, Decimal (default: float)

    Returns:
        Tuple of (result, errors):
        - result: Parsed value, or None if parsing failed
        - errors: Tuple of ConversionError (empty tuple on success)

    Raises:
        TypeError: If target is not a supported numeric type

    Examples:
        >>> to_number("1000", I32)
        (1000, ())
        >>> result, errors = to_number("1000", I8)
        >>> result is None, type(errors[0]).__name__
        (True, 'UnableToConvertStringToNumber')
    """
    return ConvertString(value).to_number(target)


def to_number_culture(
    value: str,
    culture: Culture | str,
    target: TargetSpec = float,
) -> tuple[NumberValue | None, tuple[ConversionError, ...]]:
    """Parse a number written with a built-in culture's separators.

    Args:
        value: Number string (e.g., "-10 564,10" for French)
        culture: Culture member or its code ("en", "fr", "it", "en_IN")
        target: NumericType, or one of int, float, Decimal (default: float)

    Returns:
        Tuple of (result, errors):
        - result: Parsed value, or None if parsing failed
        - errors: Tuple of ConversionError (empty tuple on success)

    Raises:
        CultureNotFoundError: If a culture code names no built-in culture
        TypeError: If target is not a supported numeric type

    Examples:
        >>> to_number_culture(",10", Culture.ITALIAN)
        (0.1, ())
        >>> to_number_culture("10,00,000", Culture.INDIAN, int)
        (1000000, ())
    """
    return ConvertString(value, culture).to_number(target)


def to_number_separators(
    value: str,
    settings: NumberCultureSettings,
    target: TargetSpec = float,
) -> tuple[NumberValue | None, tuple[ConversionError, ...]]:
    """Parse a number written with explicit separator settings.

    Args:
        value: Number string
        settings: Thousand/decimal separators and grouping to read with
        target: NumericType, or one of int, float, Decimal (default: float)

    Returns:
        Tuple of (result, errors):
        - result: Parsed value, or None if parsing failed
        - errors: Tuple of ConversionError (empty tuple on success)

    Raises:
        TypeError: If target is not a supported numeric type

    Example:
        >>> dot_space = NumberCultureSettings(Separator.DOT, Separator.SPACE)
        >>> to_number_separators("1.000 8888", dot_space, Decimal)
        (Decimal('1000.8888'), ())
    """
    return ConvertString(value, settings).to_number(target)
