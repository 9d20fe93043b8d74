"""Tests for to_number(), to_number_culture() and to_number_separators().

All parse functions return (result, errors) tuples and never raise for
bad input. Covers each built-in culture, custom separators, every target
family, overflow and fraction rejection, and the canonicalization step.
"""

import logging
import math
from decimal import Decimal

import pytest

from numstring import (
    DECIMAL,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    INT,
    U8,
    U64,
    Culture,
    CultureNotFoundError,
    NotNumericError,
    NumberCultureSettings,
    Separator,
    ShapeTag,
    UnableToConvertStringToNumber,
    to_number,
    to_number_culture,
    to_number_separators,
)
from numstring.diagnostics import DiagnosticCode, ErrorCategory
from numstring.parsing.parser import canonicalize, parse, parse_canonical

EN = NumberCultureSettings(",", ".")
FR = NumberCultureSettings(" ", ",")
EMOJI = NumberCultureSettings("\U0001f353", "\U0001f980")


def _error_code(errors: tuple[object, ...]) -> DiagnosticCode:
    assert len(errors) == 1
    error = errors[0]
    assert isinstance(error, UnableToConvertStringToNumber)
    assert error.diagnostic is not None
    return error.diagnostic.code


class TestToNumber:
    """Test to_number() with the default culture."""

    def test_grouped_integer_to_i32(self) -> None:
        """Grouped integer fits in i32."""
        assert to_number("1,000", I32) == (1000, ())

    def test_grouped_decimal_to_float(self) -> None:
        """Float is the default target."""
        result, errors = to_number("10,000,000.2")
        assert errors == ()
        assert result == 10_000_000.2
        assert isinstance(result, float)

    def test_signed_values(self) -> None:
        """Explicit signs are honored."""
        assert to_number("-1,000", I16) == (-1000, ())
        assert to_number("+1,000", I16) == (1000, ())
        assert to_number("-.5") == (-0.5, ())

    def test_leading_only_decimal(self) -> None:
        """The implied zero is inserted before the decimal point."""
        assert to_number(".25") == (0.25, ())
        assert to_number(".25", Decimal) == (Decimal("0.25"), ())

    def test_python_int_target(self) -> None:
        """int targets are unbounded."""
        result, errors = to_number("123,456,789,012,345,678,901,234,567,890", int)
        assert errors == ()
        assert result == 123_456_789_012_345_678_901_234_567_890

    def test_not_numeric(self) -> None:
        """Non-numeric strings return NotNumericError."""
        result, errors = to_number("NotANumber", I32)
        assert result is None
        assert isinstance(errors[0], NotNumericError)
        assert errors[0].diagnostic is not None
        assert errors[0].diagnostic.code is DiagnosticCode.NOT_NUMERIC

    def test_whitespace_not_numeric(self) -> None:
        """Surrounding whitespace is not trimmed."""
        result, errors = to_number(" 42", int)
        assert result is None
        assert isinstance(errors[0], NotNumericError)

    def test_unsupported_target_raises(self) -> None:
        """Target validation happens before classification."""
        with pytest.raises(TypeError):
            to_number("1", complex)  # type: ignore[arg-type]


class TestToNumberCulture:
    """Test to_number_culture() with the built-in cultures."""

    @pytest.mark.parametrize(
        ("value", "culture", "target", "expected"),
        [
            ("-10 564,10", Culture.FRENCH, float, -10564.1),
            ("1 000", Culture.FRENCH, int, 1000),
            (",10", Culture.ITALIAN, float, 0.1),
            ("1.000,25", Culture.ITALIAN, Decimal, Decimal("1000.25")),
            ("1.000", Culture.ITALIAN, I32, 1000),
            ("10,00,000", Culture.INDIAN, int, 1_000_000),
            ("1,00,00,000.50", Culture.INDIAN, F64, 10_000_000.5),
            ("1,000.5", "en", float, 1000.5),
            ("1 000,5", "fr", float, 1000.5),
        ],
    )
    def test_cultures(
        self, value: str, culture: Culture | str, target: object, expected: object
    ) -> None:
        """Each culture reads its own conventions."""
        result, errors = to_number_culture(value, culture, target)  # type: ignore[arg-type]
        assert errors == ()
        assert result == expected

    def test_english_string_under_french_is_not_numeric(self) -> None:
        """Separators are culture specific."""
        result, errors = to_number_culture("1,000.5", Culture.FRENCH)
        assert result is None
        assert isinstance(errors[0], NotNumericError)

    def test_unknown_culture_code_raises(self) -> None:
        """Unknown codes are programmer errors."""
        with pytest.raises(CultureNotFoundError):
            to_number_culture("1", "de")


class TestToNumberSeparators:
    """Test to_number_separators() with custom settings."""

    def test_dot_thousands_space_decimals(self) -> None:
        """Caller-chosen separators from the predefined set."""
        dot_space = NumberCultureSettings(Separator.DOT, Separator.SPACE)
        assert to_number_separators("1.000 8888", dot_space, Decimal) == (
            Decimal("1000.8888"),
            (),
        )

    def test_emoji_separators(self) -> None:
        """Custom multi-byte symbols."""
        result, errors = to_number_separators("-5\U0001f353000\U0001f98066", EMOJI, float)
        assert errors == ()
        assert result == -5000.66

    def test_repeated_separator_not_numeric(self) -> None:
        """Adjacent thousand separators are rejected."""
        result, errors = to_number_separators(
            "-5\U0001f353\U0001f353000\U0001f98066", EMOJI, float
        )
        assert result is None
        assert isinstance(errors[0], NotNumericError)

    def test_apostrophe_thousands(self) -> None:
        """Swiss-style grouping."""
        swiss = NumberCultureSettings(Separator.APOSTROPHE, Separator.DOT)
        assert to_number_separators("1'234'567.89", swiss, Decimal) == (
            Decimal("1234567.89"),
            (),
        )

    def test_no_thousand_separator(self) -> None:
        """Grouping disabled: only ungrouped numbers parse."""
        plain = NumberCultureSettings(Separator.NONE, Separator.COMMA)
        assert to_number_separators("1234,5", plain) == (1234.5, ())
        result, errors = to_number_separators("1 234,5", plain)
        assert result is None
        assert isinstance(errors[0], NotNumericError)


class TestIntegerTargets:
    """Test range and fraction checks for integer targets."""

    def test_i8_overflow(self) -> None:
        """1000 does not fit in i8."""
        result, errors = to_number("1,000", I8)
        assert result is None
        assert _error_code(errors) is DiagnosticCode.NUMBER_OUT_OF_RANGE
        error = errors[0]
        assert isinstance(error, UnableToConvertStringToNumber)
        assert error.category is ErrorCategory.PARSE
        assert error.input_value == "1,000"
        assert error.target == "i8"
        assert error.literal == "1000"
        assert "-128 to 127" in str(error)

    @pytest.mark.parametrize(
        ("value", "target", "expected"),
        [
            ("127", I8, 127),
            ("-128", I8, -128),
            ("32,767", I16, 32767),
            ("-2,147,483,648", I32, -(2**31)),
            ("9,223,372,036,854,775,807", I64, 2**63 - 1),
            ("255", U8, 255),
            ("0", U8, 0),
            ("-0", U8, 0),
            ("18,446,744,073,709,551,615", U64, 2**64 - 1),
        ],
    )
    def test_bounds_accepted(self, value: str, target: object, expected: int) -> None:
        """Exact bounds are representable."""
        assert to_number(value, target) == (expected, ())  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("value", "target"),
        [
            ("128", I8),
            ("-129", I8),
            ("32,768", I16),
            ("-40,000", I16),
            ("9,223,372,036,854,775,808", I64),
            ("256", U8),
            ("-1", U8),
            ("18,446,744,073,709,551,616", U64),
        ],
    )
    def test_bounds_exceeded(self, value: str, target: object) -> None:
        """One past either bound is rejected."""
        result, errors = to_number(value, target)  # type: ignore[arg-type]
        assert result is None
        assert _error_code(errors) is DiagnosticCode.NUMBER_OUT_OF_RANGE

    @pytest.mark.parametrize("value", ["1,000.5", "1.0", ".5", "-0.0"])
    def test_fraction_rejected(self, value: str) -> None:
        """Decimal shapes never convert to integer targets."""
        result, errors = to_number(value, I32)
        assert result is None
        assert _error_code(errors) is DiagnosticCode.FRACTION_NOT_ALLOWED

    def test_fraction_rejected_for_int(self) -> None:
        """Unbounded int rejects fractions too."""
        result, errors = to_number("2.5", int)
        assert result is None
        assert _error_code(errors) is DiagnosticCode.FRACTION_NOT_ALLOWED

    def test_int_too_many_digits(self) -> None:
        """Literals beyond the interpreter's digit limit are out of range."""
        result, errors = to_number("9" * 10_000, INT)
        assert result is None
        assert _error_code(errors) is DiagnosticCode.NUMBER_OUT_OF_RANGE
        assert "range" not in errors[0].diagnostic.message  # type: ignore[union-attr]


class TestFloatTargets:
    """Test floating point targets."""

    def test_f64_overflow(self) -> None:
        """Values beyond the double range are rejected, not inf."""
        result, errors = to_number("1" + "0" * 400, F64)
        assert result is None
        assert _error_code(errors) is DiagnosticCode.NUMBER_OUT_OF_RANGE

    def test_f32_overflow(self) -> None:
        """Values beyond the single range are rejected."""
        result, errors = to_number("1" + "0" * 39, F32)
        assert result is None
        assert _error_code(errors) is DiagnosticCode.NUMBER_OUT_OF_RANGE

    def test_f32_rounds_to_single_precision(self) -> None:
        """f32 results carry single precision."""
        result, errors = to_number("0.1", F32)
        assert errors == ()
        assert isinstance(result, float)
        assert result != 0.1
        assert math.isclose(result, 0.1, rel_tol=1e-7)

    def test_f64_integer_shape(self) -> None:
        """Integer shapes convert to float targets."""
        assert to_number("1,000", F64) == (1000.0, ())


class TestDecimalTarget:
    """Test exact decimal parsing."""

    def test_preserves_trailing_zeros(self) -> None:
        """Decimal keeps the written scale."""
        result, _ = to_number("1,000.10", DECIMAL)
        assert str(result) == "1000.10"

    def test_huge_value(self) -> None:
        """Decimal is never out of range."""
        literal = "1" + "0" * 500
        result, errors = to_number(literal, Decimal)
        assert errors == ()
        assert result == Decimal(literal)


class TestCanonicalize:
    """Test the normalization step."""

    @pytest.mark.parametrize(
        ("value", "shape", "settings", "expected"),
        [
            ("-10 564,10", ShapeTag.SIGNED_THOUSAND_DECIMAL, FR, "-10564.10"),
            (",10", ShapeTag.DECIMAL_LEADING_ONLY, FR, "0.10"),
            ("-,10", ShapeTag.SIGNED_DECIMAL_LEADING_ONLY, FR, "-0.10"),
            ("1,000", ShapeTag.THOUSAND_INTEGER, EN, "1000"),
            ("-5\U0001f353000\U0001f98066", ShapeTag.SIGNED_THOUSAND_DECIMAL, EMOJI, "-5000.66"),
        ],
    )
    def test_canonical_literals(
        self, value: str, shape: ShapeTag, settings: NumberCultureSettings, expected: str
    ) -> None:
        """Separators are removed or replaced by '.'."""
        assert canonicalize(value, shape, settings) == expected


class TestParseCanonical:
    """Test the target conversion step directly."""

    def test_success(self) -> None:
        """Valid literal converts."""
        assert parse_canonical("1000", I32) == (1000, ())

    @pytest.mark.parametrize("literal", ["", "1..0", "--1", "1,0", "abc", "1.", ".5"])
    def test_malformed_literal(self, literal: str) -> None:
        """Anything outside [-+]digits[.digits] is rejected."""
        result, errors = parse_canonical(literal, F64)
        assert result is None
        assert _error_code(errors) is DiagnosticCode.MALFORMED_LITERAL

    def test_input_value_reported(self) -> None:
        """Diagnostics echo the caller's original string."""
        _, errors = parse_canonical("1000", I8, input_value="1,000")
        error = errors[0]
        assert isinstance(error, UnableToConvertStringToNumber)
        assert error.input_value == "1,000"
        assert error.literal == "1000"

    def test_parse_resolves_python_targets(self) -> None:
        """parse() accepts Python types as targets."""
        assert parse("1 000,5", ShapeTag.THOUSAND_DECIMAL, FR, Decimal) == (
            Decimal("1000.5"),
            (),
        )


class TestLogging:
    """Test debug logging of the conversion steps."""

    def test_canonicalization_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Each normalization is logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="numstring.parsing.parser"):
            to_number("1,000", I8)
        assert "Canonicalized '1,000' as '1000'" in caplog.text
        assert "Conversion of '1,000' to i8 failed" in caplog.text
