"""Parser: canonicalize a classified string and convert it to a target type.

Algorithm:
    1. Remove every thousand separator
    2. Replace the decimal separator with the canonical "."
    3. For decimals without integer part (".25"), insert the implied "0"
    4. Check the result is [-+]?digits(.digits)?
    5. Hand the literal to the target type's parser, which rejects values
       outside its range and fractional literals for integer types

parse() never raises for bad input: failures are returned as
UnableToConvertStringToNumber in the errors tuple, mirroring the
(result, errors) contract of the public to_number*() functions.

Thread-safe. Pure functions, no shared mutable state.

Python 3.13+.
"""

import logging
import re

from numstring.constants import CANONICAL_DECIMAL_POINT
from numstring.core.settings import NumberCultureSettings
from numstring.diagnostics import ConversionError, ErrorTemplate, UnableToConvertStringToNumber
from numstring.enums import ShapeTag

from .targets import NumberValue, NumericType, TargetSpec, resolve_target

__all__ = [
    "canonicalize",
    "parse",
    "parse_canonical",
]

logger = logging.getLogger(__name__)

_CANONICAL_LITERAL = re.compile(r"[-+]?[0-9]+(?:\.[0-9]+)?")


def canonicalize(value: str, shape: ShapeTag, settings: NumberCultureSettings) -> str:
    """Normalize a classified numeric string into a canonical literal.

    Args:
        value: Numeric string already classified as ``shape``
        shape: Shape tag found by the pattern catalog
        settings: Separator conventions the string was classified with

    Returns:
        Literal using "." as decimal point and no group separators. Not
        validated; see parse_canonical().

    Examples:
        >>> fr = NumberCultureSettings(" ", ",")
        >>> canonicalize("-10 564,10", ShapeTag.SIGNED_THOUSAND_DECIMAL, fr)
        '-10564.10'
        >>> canonicalize(",10", ShapeTag.DECIMAL_LEADING_ONLY, fr)
        '0.10'
    """
    literal = value
    if settings.has_grouping:
        literal = literal.replace(settings.thousand_separator, "")
    literal = literal.replace(settings.decimal_separator, CANONICAL_DECIMAL_POINT)

    if shape.is_leading_only:
        point = literal.index(CANONICAL_DECIMAL_POINT)
        literal = f"{literal[:point]}0{literal[point:]}"

    logger.debug("Canonicalized %r as %r (%s)", value, literal, shape)
    return literal


def parse_canonical(
    literal: str,
    target: NumericType,
    *,
    input_value: str | None = None,
) -> tuple[NumberValue | None, tuple[ConversionError, ...]]:
    """Convert a canonical literal into ``target``.

    Args:
        literal: Canonical literal ([-+]?digits(.digits)?)
        target: Numeric type to produce
        input_value: Original string for diagnostics (defaults to literal)

    Returns:
        Tuple of (result, errors):
        - result: Parsed value, or None if conversion failed
        - errors: Tuple of ConversionError (empty tuple on success)

    Examples:
        >>> parse_canonical("1000", I8)
        (None, (UnableToConvertStringToNumber(...),))
        >>> parse_canonical("1000", I32)
        (1000, ())
    """
    original = literal if input_value is None else input_value

    if _CANONICAL_LITERAL.fullmatch(literal) is None:
        diagnostic = ErrorTemplate.malformed_literal(original, literal)
    else:
        try:
            return (target.parse(literal), ())
        except OverflowError:
            diagnostic = ErrorTemplate.number_out_of_range(
                original, target.name, target.min_value, target.max_value
            )
        except ValueError:
            diagnostic = ErrorTemplate.fraction_not_allowed(original, target.name)

    logger.debug("Conversion of %r to %s failed: %s", original, target, diagnostic)
    error = UnableToConvertStringToNumber(
        diagnostic, input_value=original, target=target.name, literal=literal
    )
    return (None, (error,))


def parse(
    value: str,
    shape: ShapeTag,
    settings: NumberCultureSettings,
    target: TargetSpec,
) -> tuple[NumberValue | None, tuple[ConversionError, ...]]:
    """Convert a classified numeric string into ``target``.

    Args:
        value: Numeric string already classified as ``shape``
        shape: Shape tag found by the pattern catalog
        settings: Separator conventions the string was classified with
        target: NumericType, or one of int, float, Decimal

    Returns:
        Tuple of (result, errors):
        - result: Parsed value, or None if conversion failed
        - errors: Tuple of ConversionError (empty tuple on success)

    Raises:
        TypeError: If target is not a supported numeric type
    """
    numeric_type = resolve_target(target)
    literal = canonicalize(value, shape, settings)
    return parse_canonical(literal, numeric_type, input_value=value)
