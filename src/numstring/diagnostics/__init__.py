"""Diagnostic system for numstring errors.

Provides structured error diagnostics with codes, hints and categories.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    ConversionError,
    CultureNotFoundError,
    InvalidFormatSpecifier,
    NoMatchError,
    NotNumericError,
    UnableToConvertNumberToString,
    UnableToConvertStringToNumber,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ConversionError",
    "CultureNotFoundError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidFormatSpecifier",
    "NoMatchError",
    "NotNumericError",
    "OutputFormat",
    "UnableToConvertNumberToString",
    "UnableToConvertStringToNumber",
]
