"""numstring - Culture-aware conversion between numeric strings and numbers.

Classifies strings such as "1,000.25", "-10 564,10" or ",10" by numeric
shape under a culture's separator conventions, parses them into a chosen
numeric type with overflow detection, and renders numbers back into
grouped, rounded, culture-correct strings.

Public API:
    to_number - Parse with the default culture (English)
    to_number_culture - Parse with a built-in culture
    to_number_separators - Parse with explicit separator settings
    to_format - Format with a built-in culture
    to_format_separators - Format with explicit separator settings
    to_format_options - Format with minimum/maximum fraction digits
    FormatOptions - Fraction digit bounds for to_format_options
    ConvertString - Shape classification (is_numeric, is_integer, is_float)
    NumberCultureSettings - Thousand/decimal separators and grouping
    Culture, Separator, ThousandGrouping, ShapeTag - Enumerations

Exceptions:
    ConversionError - Base exception class
    NotNumericError - Input has no numeric shape
    NoMatchError - current_pattern() on a non-numeric string
    UnableToConvertStringToNumber - Overflow or type mismatch
    InvalidFormatSpecifier - Malformed "N{digits}" specifier
    UnableToConvertNumberToString - Value cannot be rendered
    CultureNotFoundError - Unknown culture code

Submodules:
    numstring.parsing - Pattern catalog, classifier, parser, numeric targets
    numstring.formatting - Formatter
    numstring.core - Separator settings, culture table, Babel compatibility
    numstring.diagnostics - Error types, codes and templates
"""

from .core import CULTURE_SETTINGS, NumberCultureSettings
from .diagnostics import (
    ConversionError,
    CultureNotFoundError,
    InvalidFormatSpecifier,
    NoMatchError,
    NotNumericError,
    UnableToConvertNumberToString,
    UnableToConvertStringToNumber,
)
from .enums import Culture, NumberKind, Separator, ShapeTag, ThousandGrouping
from .formatting import FormatOptions, to_format, to_format_options, to_format_separators
from .parsing import (
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
    ConvertString,
    NumericType,
    to_number,
    to_number_culture,
    to_number_separators,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("numstring")
except PackageNotFoundError:
    # Development mode: package not installed yet
    # Run: uv sync
    __version__ = "0.0.0+dev"

__all__ = [
    "CULTURE_SETTINGS",
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
    "ConversionError",
    "ConvertString",
    "Culture",
    "CultureNotFoundError",
    "FormatOptions",
    "InvalidFormatSpecifier",
    "NoMatchError",
    "NotNumericError",
    "NumberCultureSettings",
    "NumberKind",
    "NumericType",
    "Separator",
    "ShapeTag",
    "ThousandGrouping",
    "UnableToConvertNumberToString",
    "UnableToConvertStringToNumber",
    "__version__",
    "to_format",
    "to_format_options",
    "to_format_separators",
    "to_number",
    "to_number_culture",
    "to_number_separators",
]
