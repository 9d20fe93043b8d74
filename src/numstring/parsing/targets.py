"""Numeric target types for string-to-number conversion.

A NumericType describes one representation the parser can produce: its
family (integer, float, decimal), its width and its representable range.
The parser algorithm is written once against this interface; each target
only knows how to turn a canonical literal into a value and how to reject
values it cannot hold.

Predefined targets:
    Signed integers:   I8, I16, I32, I64
    Unsigned integers: U8, U16, U32, U64
    Floating point:    F32, F64
    Python native:     INT (unbounded int), DECIMAL (decimal.Decimal)

Python types are accepted wherever a target is expected: int -> INT,
float -> F64, Decimal -> DECIMAL.

Python 3.13+. Zero external dependencies.
"""

import math
import struct
import sys
from dataclasses import dataclass
from decimal import Decimal

from numstring.constants import CANONICAL_DECIMAL_POINT
from numstring.enums import NumberKind

__all__ = [
    "DECIMAL",
    "F32",
    "F64",
    "I8",
    "I16",
    "I32",
    "I64",
    "INT",
    "U8",
    "U16",
    "U32",
    "U64",
    "NumberValue",
    "NumericType",
    "TargetSpec",
    "resolve_target",
]

type NumberValue = int | float | Decimal


@dataclass(frozen=True, slots=True)
class NumericType:
    """A concrete numeric representation the parser can target.

    Attributes:
        name: Short type name used in diagnostics ("i8", "f32")
        kind: Integer, float or decimal family
        bits: Storage width, or None for unbounded Python types
        min_value: Smallest representable value (None if unbounded)
        max_value: Largest representable value (None if unbounded)
    """

    name: str
    kind: NumberKind
    bits: int | None = None
    min_value: int | float | None = None
    max_value: int | float | None = None

    def __str__(self) -> str:
        return self.name

    @property
    def is_bounded(self) -> bool:
        """True when the type has a finite range."""
        return self.min_value is not None and self.max_value is not None

    def parse(self, literal: str) -> NumberValue:
        """Convert a canonical literal into a value of this type.

        Args:
            literal: Canonical literal matching [-+]?digits(.digits)?

        Returns:
            Parsed value (int, float or Decimal depending on kind)

        Raises:
            ValueError: If an integer type receives a fractional literal
            OverflowError: If the value lies outside the type's range
        """
        match self.kind:
            case NumberKind.INTEGER:
                if CANONICAL_DECIMAL_POINT in literal:
                    msg = f"{self.name} cannot hold fractional literal {literal!r}"
                    raise ValueError(msg)
                try:
                    value = int(literal)
                except ValueError as e:
                    # Literal longer than sys.get_int_max_str_digits()
                    msg = f"{literal[:20]}... has too many digits for {self.name}"
                    raise OverflowError(msg) from e
                return self._check_range(value)
            case NumberKind.FLOAT:
                return self._parse_float(literal)
            case NumberKind.DECIMAL:
                return Decimal(literal)

    def _parse_float(self, literal: str) -> float:
        value = float(literal)
        if not math.isfinite(value):
            msg = f"{literal!r} exceeds the range of {self.name}"
            raise OverflowError(msg)
        if self.bits == 32:  # noqa: PLR2004 - single precision
            # struct raises OverflowError when the value does not fit
            (value,) = struct.unpack("<f", struct.pack("<f", value))
        return value

    def _check_range(self, value: int) -> int:
        if self.min_value is not None and value < self.min_value:
            msg = f"{value} is below the minimum of {self.name} ({self.min_value})"
            raise OverflowError(msg)
        if self.max_value is not None and value > self.max_value:
            msg = f"{value} is above the maximum of {self.name} ({self.max_value})"
            raise OverflowError(msg)
        return value


def _signed(bits: int) -> NumericType:
    return NumericType(
        f"i{bits}", NumberKind.INTEGER, bits, -(2 ** (bits - 1)), 2 ** (bits - 1) - 1
    )


def _unsigned(bits: int) -> NumericType:
    return NumericType(f"u{bits}", NumberKind.INTEGER, bits, 0, 2**bits - 1)


I8 = _signed(8)
I16 = _signed(16)
I32 = _signed(32)
I64 = _signed(64)

U8 = _unsigned(8)
U16 = _unsigned(16)
U32 = _unsigned(32)
U64 = _unsigned(64)

_F32_MAX = struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]
F32 = NumericType("f32", NumberKind.FLOAT, 32, -_F32_MAX, _F32_MAX)
F64 = NumericType("f64", NumberKind.FLOAT, 64, -sys.float_info.max, sys.float_info.max)

INT = NumericType("int", NumberKind.INTEGER)
DECIMAL = NumericType("decimal", NumberKind.DECIMAL)

type TargetSpec = NumericType | type[int] | type[float] | type[Decimal]

_PYTHON_TARGETS: dict[type, NumericType] = {
    int: INT,
    float: F64,
    Decimal: DECIMAL,
}


def resolve_target(target: TargetSpec) -> NumericType:
    """Map a NumericType or Python type to a NumericType.

    Args:
        target: NumericType, or one of int, float, Decimal

    Returns:
        The NumericType to parse into

    Raises:
        TypeError: If target is not a supported numeric type (bool included)

    Example:
        >>> resolve_target(float) is F64
        True
    """
    if isinstance(target, NumericType):
        return target
    resolved = _PYTHON_TARGETS.get(target) if isinstance(target, type) else None
    if resolved is None:
        msg = f"Unsupported numeric target {target!r}; use int, float, Decimal or a NumericType"
        raise TypeError(msg)
    return resolved
