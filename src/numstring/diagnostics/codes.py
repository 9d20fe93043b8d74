"""Diagnostic codes and data structures.

Defines error codes, categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for ConversionError.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``; log aggregation receives
    plain strings (``"parse"``, ``"formatting"``) rather than the
    ``"ErrorCategory.X"`` repr a plain ``Enum`` would produce.

    Categories:
        CLASSIFICATION: Input does not have any numeric shape
        PARSE: Numeric shape found but the target type cannot hold it
        FORMATTING: Value or display specifier cannot be rendered
        SETTINGS: Unknown culture or unusable separator settings
    """

    CLASSIFICATION = "classification"
    PARSE = "parse"
    FORMATTING = "formatting"
    SETTINGS = "settings"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Classification errors (no numeric shape)
        2000-2999: Parsing errors (overflow, type mismatch)
        3000-3999: Formatting errors (specifier, non-finite values)
        4000-4999: Settings errors (culture lookup)
    """

    # Classification errors (1000-1999)
    NOT_NUMERIC = 1001
    NO_PATTERN_MATCH = 1002

    # Parsing errors (2000-2999)
    NUMBER_OUT_OF_RANGE = 2001
    FRACTION_NOT_ALLOWED = 2002
    MALFORMED_LITERAL = 2003

    # Formatting errors (3000-3999)
    INVALID_FORMAT_SPECIFIER = 3001
    VALUE_NOT_FINITE = 3002
    VALUE_TYPE_UNSUPPORTED = 3003
    VALUE_TOO_LARGE = 3004

    # Settings errors (4000-4999)
    CULTURE_NOT_FOUND = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough information for
    both humans and tools to understand why a conversion failed.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: The string or number that failed (as text)
        expected_type: Target type or shape that was expected
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    expected_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[NOT_NUMERIC]: 'abc' is not a number for separators ',' and '.'
              = input: abc
              = help: Check the thousand and decimal separators of the culture

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
