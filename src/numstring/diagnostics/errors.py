"""Conversion exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.
Conversion entry points return these errors in a tuple instead of raising
them; only programmer errors (current_pattern() on a non-numeric string,
unknown culture codes) are raised.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory


class ConversionError(Exception):
    """Base exception for all numstring errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
        category: Broad error category
    """

    category: ErrorCategory = ErrorCategory.PARSE

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ConversionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class _StringInputError(ConversionError):
    """Error raised while converting a string to a number.

    Attributes:
        input_value: The string that failed to convert
        target: Name of the requested numeric target ("" if not reached)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        target: str = "",
    ) -> None:
        """Initialize with the failing input and the requested target.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to convert
            target: Name of the requested numeric target
        """
        super().__init__(message)
        self.input_value = input_value
        self.target = target


class NotNumericError(_StringInputError):
    """Input string matched no numeric shape.

    Terminal and non-retryable with the same separator settings.

    Example:
        >>> result, errors = to_number("abc", int)
        >>> isinstance(errors[0], NotNumericError)
        True
    """

    category = ErrorCategory.CLASSIFICATION


class NoMatchError(NotNumericError):
    """ConvertString.current_pattern() called on a non-numeric string."""


class UnableToConvertStringToNumber(_StringInputError):
    """Well-formed number that the target type cannot hold.

    Raised for magnitude overflow (1000 as i8), negative values for
    unsigned targets and fractional literals for integer targets.

    Attributes:
        literal: Canonical literal that was handed to the target parser
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        target: str = "",
        literal: str = "",
    ) -> None:
        """Initialize UnableToConvertStringToNumber.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to convert
            target: Name of the requested numeric target
            literal: Canonical literal produced from input_value
        """
        super().__init__(message, input_value=input_value, target=target)
        self.literal = literal


class InvalidFormatSpecifier(ConversionError):
    """Display-precision specifier is not "N" followed by a digit count.

    Attributes:
        spec: The specifier that was rejected
    """

    category = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic, *, spec: str = "") -> None:
        """Initialize InvalidFormatSpecifier.

        Args:
            message: Error message string OR Diagnostic object
            spec: The specifier that was rejected
        """
        super().__init__(message)
        self.spec = spec


class UnableToConvertNumberToString(ConversionError):
    """Value cannot be rendered (NaN, infinity, unsupported type).

    Attributes:
        value: The value that was rejected
    """

    category = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic, *, value: object = None) -> None:
        """Initialize UnableToConvertNumberToString.

        Args:
            message: Error message string OR Diagnostic object
            value: The value that was rejected
        """
        super().__init__(message)
        self.value = value


class CultureNotFoundError(ConversionError, LookupError):
    """No culture is registered under the requested code.

    Attributes:
        code: The code that was looked up
    """

    category = ErrorCategory.SETTINGS

    def __init__(self, message: str | Diagnostic, *, code: str = "") -> None:
        """Initialize CultureNotFoundError.

        Args:
            message: Error message string OR Diagnostic object
            code: The code that was looked up
        """
        super().__init__(message)
        self.code = code
