"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place
    """

    # =========================================================================
    # CLASSIFICATION ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def not_numeric(value: str, thousand: str, decimal: str) -> Diagnostic:
        """Input string has no numeric shape.

        Args:
            value: The input string
            thousand: Thousand separator in effect
            decimal: Decimal separator in effect

        Returns:
            Diagnostic for NOT_NUMERIC
        """
        msg = (
            f"'{value}' is not a number for thousand separator '{thousand}' "
            f"and decimal separator '{decimal}'"
        )
        return Diagnostic(
            code=DiagnosticCode.NOT_NUMERIC,
            message=msg,
            hint="Check the thousand and decimal separators of the culture",
            input_value=value,
        )

    @staticmethod
    def no_pattern_match(value: str) -> Diagnostic:
        """Current pattern requested for a non-numeric string.

        Args:
            value: The input string

        Returns:
            Diagnostic for NO_PATTERN_MATCH
        """
        msg = f"No numeric pattern matches '{value}'"
        return Diagnostic(
            code=DiagnosticCode.NO_PATTERN_MATCH,
            message=msg,
            hint="Call is_numeric() before current_pattern()",
            input_value=value,
        )

    # =========================================================================
    # PARSING ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def number_out_of_range(
        value: str,
        target: str,
        minimum: object = None,
        maximum: object = None,
    ) -> Diagnostic:
        """Literal exceeds the target type's representable range.

        Args:
            value: The input string
            target: Name of the numeric target
            minimum: Smallest representable value of the target (None if unbounded)
            maximum: Largest representable value of the target (None if unbounded)

        Returns:
            Diagnostic for NUMBER_OUT_OF_RANGE
        """
        msg = f"'{value}' does not fit in {target}"
        if minimum is not None and maximum is not None:
            msg += f" (range {minimum} to {maximum})"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_OUT_OF_RANGE,
            message=msg,
            hint="Use a wider numeric type",
            input_value=value,
            expected_type=target,
        )

    @staticmethod
    def fraction_not_allowed(value: str, target: str) -> Diagnostic:
        """Decimal literal requested as an integer type.

        Args:
            value: The input string
            target: Name of the integer target

        Returns:
            Diagnostic for FRACTION_NOT_ALLOWED
        """
        msg = f"'{value}' has a fractional part and cannot be converted to {target}"
        return Diagnostic(
            code=DiagnosticCode.FRACTION_NOT_ALLOWED,
            message=msg,
            hint="Use a floating-point or decimal target for fractional numbers",
            input_value=value,
            expected_type=target,
        )

    @staticmethod
    def malformed_literal(value: str, literal: str) -> Diagnostic:
        """Normalized literal is not of the form [-+]digits[.digits].

        Args:
            value: The input string
            literal: The canonical literal produced from it

        Returns:
            Diagnostic for MALFORMED_LITERAL
        """
        msg = f"'{value}' normalizes to malformed literal '{literal}'"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_LITERAL,
            message=msg,
            hint="Only one sign, digits and a single decimal separator are allowed",
            input_value=value,
        )

    # =========================================================================
    # FORMATTING ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def invalid_format_specifier(spec: str, max_digits: int) -> Diagnostic:
        """Display-precision specifier is malformed.

        Args:
            spec: The specifier passed by the caller
            max_digits: Largest accepted digit count

        Returns:
            Diagnostic for INVALID_FORMAT_SPECIFIER
        """
        msg = f"Invalid format specifier '{spec}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_FORMAT_SPECIFIER,
            message=msg,
            hint=f"Use 'N' followed by a digit count between 0 and {max_digits}, e.g. 'N2'",
            input_value=spec,
        )

    @staticmethod
    def value_not_finite(value: str) -> Diagnostic:
        """NaN or infinity cannot be rendered.

        Args:
            value: Text form of the value

        Returns:
            Diagnostic for VALUE_NOT_FINITE
        """
        msg = f"Cannot format non-finite value '{value}'"
        return Diagnostic(
            code=DiagnosticCode.VALUE_NOT_FINITE,
            message=msg,
            hint="Check the value with math.isfinite() before formatting",
            input_value=value,
        )

    @staticmethod
    def value_type_unsupported(value: str, type_name: str) -> Diagnostic:
        """Value is not an int, float or Decimal.

        Args:
            value: Text form of the value
            type_name: Name of the value's type

        Returns:
            Diagnostic for VALUE_TYPE_UNSUPPORTED
        """
        msg = f"Cannot format value '{value}' of type {type_name}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TYPE_UNSUPPORTED,
            message=msg,
            hint="Pass an int, float or Decimal",
            input_value=value,
            expected_type="int | float | Decimal",
        )

    @staticmethod
    def value_too_large(value: str, max_digits: int) -> Diagnostic:
        """Finite value has more integer digits than the formatter writes.

        Args:
            value: Text form of the value
            max_digits: Largest accepted integer digit count

        Returns:
            Diagnostic for VALUE_TOO_LARGE
        """
        msg = f"Cannot format value '{value}': more than {max_digits} integer digits"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TOO_LARGE,
            message=msg,
            hint="Scale the value down before formatting",
            input_value=value,
        )

    # =========================================================================
    # SETTINGS ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def culture_not_found(code: str) -> Diagnostic:
        """No culture uses this locale code.

        Args:
            code: The locale code that was looked up

        Returns:
            Diagnostic for CULTURE_NOT_FOUND
        """
        msg = f"Unable to find culture '{code}'"
        return Diagnostic(
            code=DiagnosticCode.CULTURE_NOT_FOUND,
            message=msg,
            hint=(
                "Use one of 'en', 'fr', 'it', 'en_IN', or build NumberCultureSettings "
                "explicitly"
            ),
            input_value=code,
        )
