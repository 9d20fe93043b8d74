"""Number formatting with culture-specific separators and explicit rounding.

Renders int, float and Decimal values as grouped, rounded strings from a
display-precision specifier "N{digits}" (N0 = no fractional part, N2 = two
fractional digits, ...), or from minimum/maximum fraction digit
bounds (FormatOptions).

Algorithm:
    1. Parse the digit count from the specifier
    2. Round to that many fractional places, ties away from zero; carries
       propagate into the integer part (10000.9999 -> 10001.00)
    3. Split into sign, integer digits and exactly ``digits`` fraction digits
    4. Insert the thousand separator into the integer digits
    5. Join as [sign][grouped integer][decimal separator][fraction]

    With FormatOptions, step 2 rounds to the maximum and trailing fraction
    zeros are then dropped down to the minimum (1.50 at 0/3 -> "1.5").

Rounding Semantics:
    Floats are rounded from their shortest repr, the digits a reader sees:
    2.675 is formatted "2.68" at N2 although the binary value is slightly
    below 2.675. Ties round away from zero (0.125 -> "0.13", -0.125 ->
    "-0.13"). A value that rounds to zero is written without sign.

to_format*() never raise for bad input: errors are returned in a tuple,
matching the to_number*() contract. format_number() is the raising core.

Thread-safe. Decimal contexts are thread-local (decimal.localcontext).

Python 3.13+.
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import MAX_EMAX, MIN_EMIN, ROUND_HALF_UP, Decimal, localcontext

from numstring.constants import FORMAT_SPEC_PREFIX, MAX_FRACTION_DIGITS, MAX_INTEGER_DIGITS
from numstring.core.settings import NumberCultureSettings, SettingsSource, resolve_settings
from numstring.diagnostics import (
    ConversionError,
    ErrorTemplate,
    InvalidFormatSpecifier,
    UnableToConvertNumberToString,
)
from numstring.enums import ThousandGrouping

__all__ = [
    "FormatOptions",
    "format_number",
    "group_digits",
    "parse_format_spec",
    "to_format",
    "to_format_options",
    "to_format_separators",
]

logger = logging.getLogger(__name__)

_FORMAT_SPEC = re.compile(rf"{re.escape(FORMAT_SPEC_PREFIX)}([0-9]+)")

# Longest digit run that can still be within MAX_FRACTION_DIGITS
_MAX_SPEC_DIGITS = len(str(MAX_FRACTION_DIGITS))


def parse_format_spec(spec: str) -> int:
    """Read the fractional digit count from an "N{digits}" specifier.

    Args:
        spec: Display-precision specifier ("N0", "N2", "N12")

    Returns:
        Number of fractional digits

    Raises:
        InvalidFormatSpecifier: If spec is not "N" followed by a digit count
            between 0 and MAX_FRACTION_DIGITS

    Examples:
        >>> parse_format_spec("N2")
        2
        >>> parse_format_spec("D2")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
            ...
        InvalidFormatSpecifier: Invalid format specifier 'D2'
    """
    match = _FORMAT_SPEC.fullmatch(spec) if isinstance(spec, str) else None
    # Length check first: int() refuses digit runs past sys.get_int_max_str_digits()
    if (
        match is None
        or len(match.group(1)) > _MAX_SPEC_DIGITS
        or int(match.group(1)) > MAX_FRACTION_DIGITS
    ):
        raise InvalidFormatSpecifier(
            ErrorTemplate.invalid_format_specifier(str(spec), MAX_FRACTION_DIGITS),
            spec=str(spec),
        )
    return int(match.group(1))


def group_digits(
    digits: str,
    separator: str,
    grouping: ThousandGrouping = ThousandGrouping.THREE_BLOCK,
) -> str:
    """Insert ``separator`` between the digit groups of an integer part.

    Args:
        digits: Unsigned integer digits ("10000000")
        separator: Thousand separator ("" leaves digits unchanged)
        grouping: THREE_BLOCK (1,000,000) or TWO_BLOCK (10,00,000)

    Returns:
        Grouped digits

    Examples:
        >>> group_digits("10000000", ",")
        '10,000,000'
        >>> group_digits("100000000", ",", ThousandGrouping.TWO_BLOCK)
        '10,00,00,000'
    """
    if not separator or len(digits) <= 3:  # noqa: PLR2004 - one full group
        return digits

    head, groups = digits[:-3], [digits[-3:]]
    size = 2 if grouping is ThousandGrouping.TWO_BLOCK else 3
    while head:
        head, group = head[:-size], head[-size:]
        groups.append(group)
    return separator.join(reversed(groups))


def _to_decimal(value: int | float | Decimal) -> Decimal:
    """Exact Decimal for ints/Decimals; shortest-repr Decimal for floats."""
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def format_number(
    value: int | float | Decimal,
    fraction_digits: int,
    settings: NumberCultureSettings,
    *,
    minimum_fraction_digits: int | None = None,
) -> str:
    """Round and render ``value`` with the given separator settings.

    Args:
        value: Number to format (int, float or Decimal; not bool)
        fraction_digits: Number of fractional digits to round to
        settings: Separators and grouping to write with
        minimum_fraction_digits: If given, trailing zeros of the rounded
            fraction are dropped down to this many digits (None writes
            exactly ``fraction_digits``)

    Returns:
        Formatted number string

    Raises:
        UnableToConvertNumberToString: If value is not a finite int, float
            or Decimal, or has more than MAX_INTEGER_DIGITS integer digits

    Examples:
        >>> en = NumberCultureSettings(",", ".")
        >>> format_number(10_000.9999, 2, en)
        '10,001.00'
        >>> format_number(-1000, 0, en)
        '-1,000'
        >>> format_number(1.5, 4, en, minimum_fraction_digits=2)
        '1.50'
    """
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        raise UnableToConvertNumberToString(
            ErrorTemplate.value_type_unsupported(repr(value), type(value).__name__),
            value=value,
        )
    if isinstance(value, float):
        finite = math.isfinite(value)
    elif isinstance(value, Decimal):
        finite = value.is_finite()
    else:
        finite = True
    if not finite:
        raise UnableToConvertNumberToString(
            ErrorTemplate.value_not_finite(str(value)), value=value
        )

    exact = _to_decimal(value)
    # adjusted() is the exponent of the leading digit; +1 after rounding carries
    if exact.adjusted() + 1 >= MAX_INTEGER_DIGITS:
        raise UnableToConvertNumberToString(
            ErrorTemplate.value_too_large(f"{exact:.6e}", MAX_INTEGER_DIGITS),
            value=value,
        )

    with localcontext() as ctx:
        # Precision covers every integer digit plus the requested fraction
        ctx.prec = max(ctx.prec, exact.adjusted() + fraction_digits + 2)
        ctx.Emax = MAX_EMAX
        ctx.Emin = MIN_EMIN
        ctx.rounding = ROUND_HALF_UP
        rounded = exact.quantize(Decimal(1).scaleb(-fraction_digits))

    logger.debug("Rounded %r to %s at %d fraction digits", value, rounded, fraction_digits)

    sign = "-" if rounded < 0 else ""
    integer_digits, _, fraction = f"{rounded.copy_abs():f}".partition(".")
    if minimum_fraction_digits is not None:
        fraction = fraction.rstrip("0").ljust(minimum_fraction_digits, "0")

    text = sign + group_digits(
        integer_digits, settings.thousand_separator, settings.grouping
    )
    if fraction:
        text += settings.decimal_separator + fraction
    return text


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Fraction digit bounds for to_format_options().

    The value is rounded to ``maximum_fraction_digits`` places, then
    trailing zeros are dropped until ``minimum_fraction_digits`` remain.
    ``FormatOptions(2, 2)`` writes the same text as specifier "N2".

    Attributes:
        minimum_fraction_digits: Fraction digits always written (zero padded)
        maximum_fraction_digits: Fraction digits rounded to
    """

    minimum_fraction_digits: int = 2
    maximum_fraction_digits: int = 2

    def __post_init__(self) -> None:
        """Validate the digit bounds.

        Raises:
            ValueError: If a bound is not an int, is negative, exceeds
                MAX_FRACTION_DIGITS, or minimum is greater than maximum
        """
        for name in ("minimum_fraction_digits", "maximum_fraction_digits"):
            digits = getattr(self, name)
            if isinstance(digits, bool) or not isinstance(digits, int):
                msg = f"FormatOptions.{name} must be an int, got {type(digits).__name__}"
                raise ValueError(msg)
            if not 0 <= digits <= MAX_FRACTION_DIGITS:
                msg = f"FormatOptions.{name} must be between 0 and {MAX_FRACTION_DIGITS}"
                raise ValueError(msg)
        if self.minimum_fraction_digits > self.maximum_fraction_digits:
            msg = (
                f"FormatOptions.minimum_fraction_digits ({self.minimum_fraction_digits}) "
                f"exceeds maximum_fraction_digits ({self.maximum_fraction_digits})"
            )
            raise ValueError(msg)

    @classmethod
    def from_spec(cls, spec: str) -> "FormatOptions":
        """Options equivalent to an "N{digits}" specifier.

        Raises:
            InvalidFormatSpecifier: If spec is malformed
        """
        digits = parse_format_spec(spec)
        return cls(digits, digits)


def to_format_separators(
    value: int | float | Decimal,
    spec: str,
    settings: NumberCultureSettings,
) -> tuple[str | None, tuple[ConversionError, ...]]:
    """Format a number with explicit separator settings.

    Args:
        value: Number to format (int, float or Decimal)
        spec: Display-precision specifier ("N0", "N2", ...)
        settings: Separators and grouping to write with

    Returns:
        Tuple of (result, errors):
        - result: Formatted string, or None if formatting failed
        - errors: InvalidFormatSpecifier or UnableToConvertNumberToString
          (empty tuple on success)

    Example:
        >>> swiss = NumberCultureSettings(Separator.APOSTROPHE, Separator.DOT)
        >>> to_format_separators(1000, "N2", swiss)
        ("1'000.00", ())
    """
    try:
        fraction_digits = parse_format_spec(spec)
        return (format_number(value, fraction_digits, settings), ())
    except ConversionError as e:
        logger.debug("Formatting %r with %r failed: %s", value, spec, e)
        return (None, (e,))


def to_format(
    value: int | float | Decimal,
    spec: str,
    culture: SettingsSource = None,
) -> tuple[str | None, tuple[ConversionError, ...]]:
    """Format a number with a built-in culture's separators.

    Args:
        value: Number to format (int, float or Decimal)
        spec: Display-precision specifier ("N0", "N2", ...)
        culture: Culture member, culture code, explicit settings, or None
            for the default culture (English)

    Returns:
        Tuple of (result, errors):
        - result: Formatted string, or None if formatting failed
        - errors: Tuple of ConversionError (empty tuple on success)

    Raises:
        CultureNotFoundError: If a culture code names no built-in culture

    Examples:
        >>> to_format(1000, "N2", Culture.FRENCH)
        ('1 000,00', ())
        >>> to_format(-10_000.999, "N2", "fr")
        ('-10 001,00', ())
        >>> to_format(100_000_000.9999, "N2", Culture.INDIAN)
        ('10,00,00,001.00', ())
    """
    return to_format_separators(value, spec, resolve_settings(culture))


def to_format_options(
    value: int | float | Decimal,
    options: FormatOptions | None = None,
    culture: SettingsSource = None,
) -> tuple[str | None, tuple[ConversionError, ...]]:
    """Format a number with minimum/maximum fraction digit bounds.

    Args:
        value: Number to format (int, float or Decimal)
        options: Fraction digit bounds (None for 2/2, same as "N2")
        culture: Culture member, culture code, explicit settings, or None
            for the default culture (English)

    Returns:
        Tuple of (result, errors):
        - result: Formatted string, or None if formatting failed
        - errors: Tuple of UnableToConvertNumberToString (empty on success)

    Raises:
        CultureNotFoundError: If a culture code names no built-in culture

    Examples:
        >>> to_format_options(1234.5, FormatOptions(0, 3))
        ('1,234.5', ())
        >>> to_format_options(1234, FormatOptions(1, 3), Culture.FRENCH)
        ('1 234,0', ())
        >>> to_format_options(0.12345, FormatOptions(0, 3))
        ('0.123', ())
    """
    options = options if options is not None else FormatOptions()
    settings = resolve_settings(culture)
    try:
        text = format_number(
            value,
            options.maximum_fraction_digits,
            settings,
            minimum_fraction_digits=options.minimum_fraction_digits,
        )
    except ConversionError as e:
        logger.debug("Formatting %r with %r failed: %s", value, options, e)
        return (None, (e,))
    return (text, ())
