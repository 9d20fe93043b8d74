"""String to number: classify culture-formatted strings and parse them.

- Functions NEVER raise for bad input - errors are returned in a tuple
- Consistent with the format side (numstring.formatting)

This package is the inverse of numstring.formatting:
- Formatting: Python number -> culture-formatted display string
- Parsing: culture-formatted display string -> Python number

Public API:
    Parsing Functions:
        to_number - Default culture (English)
        to_number_culture - Built-in culture (Culture.FRENCH, "it", ...)
        to_number_separators - Explicit NumberCultureSettings

    Classification:
        ConvertString - Shape queries (is_numeric, is_integer, is_float)
        classify - First matching catalog rule for a string
        ParsingPattern - One catalog rule (shape tag + expression)

    Targets:
        I8, I16, I32, I64, U8, U16, U32, U64, F32, F64, INT, DECIMAL

    Type Guards:
        is_valid_integer, is_valid_float, is_valid_decimal

Example:
    >>> from numstring.parsing import to_number_culture, is_valid_float
    >>> result, errors = to_number_culture("-10 564,10", "fr")
    >>> if not errors and is_valid_float(result):
    ...     total = result * 2

Python 3.13+.
"""

from .classifier import ConvertString
from .guards import is_valid_decimal, is_valid_float, is_valid_integer
from .numbers import to_number, to_number_culture, to_number_separators
from .parser import canonicalize, parse, parse_canonical
from .patterns import ParsingPattern, build_catalog, classify
from .targets import (
    DECIMAL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    INT,
    U8,
    U16,
    U32,
    U64,
    NumberValue,
    NumericType,
    TargetSpec,
    resolve_target,
)

__all__ = [
    # Targets
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
    # Classification
    "ConvertString",
    "NumberValue",
    "NumericType",
    "ParsingPattern",
    "TargetSpec",
    "build_catalog",
    # Parser
    "canonicalize",
    "classify",
    # Type guards
    "is_valid_decimal",
    "is_valid_float",
    "is_valid_integer",
    "parse",
    "parse_canonical",
    "resolve_target",
    # Parsing functions
    "to_number",
    "to_number_culture",
    "to_number_separators",
]
