"""Enumerations for numstring type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a Separator can be used
anywhere a separator symbol is expected.

Python 3.13+.
"""

from enum import StrEnum


class Separator(StrEnum):
    """Predefined separator symbols.

    Usable as either the thousand or the decimal separator of a
    NumberCultureSettings. Any other single character can be supplied
    directly as a custom separator.

    StrEnum provides automatic string conversion: str(Separator.COMMA) == ","
    """

    COMMA = ","
    """Comma: 1,000 (English thousands) or 1,5 (French decimals)"""

    DOT = "."
    """Full stop: 1.5 (English decimals) or 1.000 (Italian thousands)"""

    SPACE = " "
    """Space: 1 000 (French thousands)"""

    APOSTROPHE = "'"
    """Apostrophe: 1'000 (Swiss thousands)"""

    NONE = ""
    """No separator: disables thousand grouping"""


class ThousandGrouping(StrEnum):
    """How integer digits are grouped by the thousand separator.

    StrEnum provides automatic string conversion: str(ThousandGrouping.TWO_BLOCK) == "two_block"
    """

    THREE_BLOCK = "three_block"
    """Groups of three digits: 10,000,000"""

    TWO_BLOCK = "two_block"
    """Indian style, last group of three then groups of two: 1,00,00,000"""


class Culture(StrEnum):
    """Named presets of separator conventions.

    Values are locale codes; use Culture.parse() to look a culture up from
    a BCP-47 or POSIX code.
    """

    ENGLISH = "en"
    """thousand=comma, decimal=dot: 1,000.25"""

    FRENCH = "fr"
    """thousand=space, decimal=comma: 1 000,25"""

    ITALIAN = "it"
    """thousand=dot, decimal=comma: 1.000,25"""

    INDIAN = "en_IN"
    """thousand=comma, decimal=dot, two-block grouping: 1,00,000.25"""

    @classmethod
    def parse(cls, code: str) -> "Culture":
        """Look up a culture by its locale code.

        Accepts BCP-47 ("en-IN") or POSIX ("en_IN") form, case-insensitive.

        Args:
            code: Locale code of the culture

        Returns:
            Matching Culture member

        Raises:
            CultureNotFoundError: If no culture uses this code

        Example:
            >>> Culture.parse("fr")
            <Culture.FRENCH: 'fr'>
            >>> Culture.parse("en-in")
            <Culture.INDIAN: 'en_IN'>
        """
        from numstring.core.locale_utils import normalize_locale  # noqa: PLC0415 - circular
        from numstring.diagnostics import (  # noqa: PLC0415 - circular
            CultureNotFoundError,
            ErrorTemplate,
        )

        wanted = normalize_locale(code).lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        raise CultureNotFoundError(ErrorTemplate.culture_not_found(code), code=code)


class NumberKind(StrEnum):
    """Family of a numeric target type.

    StrEnum provides automatic string conversion: str(NumberKind.FLOAT) == "float"
    """

    INTEGER = "integer"
    """Whole numbers; fractional literals are rejected"""

    FLOAT = "float"
    """Binary floating point"""

    DECIMAL = "decimal"
    """Exact decimal (decimal.Decimal)"""


class ShapeTag(StrEnum):
    """Numeric shape of a string, independent of its value.

    "Signed" shapes carry an explicit leading "+" or "-".

    StrEnum provides automatic string conversion: str(ShapeTag.DECIMAL) == "decimal"
    """

    SIGNED_THOUSAND_DECIMAL = "signed_thousand_decimal"
    """-1,000.25"""

    THOUSAND_DECIMAL = "thousand_decimal"
    """1,000.25"""

    SIGNED_DECIMAL = "signed_decimal"
    """-1000.25"""

    DECIMAL = "decimal"
    """1000.25"""

    SIGNED_DECIMAL_LEADING_ONLY = "signed_decimal_leading_only"
    """-.25"""

    DECIMAL_LEADING_ONLY = "decimal_leading_only"
    """.25"""

    SIGNED_THOUSAND_INTEGER = "signed_thousand_integer"
    """-1,000"""

    THOUSAND_INTEGER = "thousand_integer"
    """1,000"""

    SIGNED_INTEGER = "signed_integer"
    """-1000"""

    PLAIN_INTEGER = "plain_integer"
    """1000"""

    @property
    def is_integer(self) -> bool:
        """True for shapes without a fractional part."""
        return self.value.endswith("integer")

    @property
    def is_float(self) -> bool:
        """True for shapes with a fractional part."""
        return not self.is_integer

    @property
    def is_signed(self) -> bool:
        """True for shapes with an explicit sign."""
        return self.value.startswith("signed")

    @property
    def is_grouped(self) -> bool:
        """True for shapes containing thousand separators."""
        return "thousand" in self.value

    @property
    def is_leading_only(self) -> bool:
        """True for decimals without integer digits (".25")."""
        return self.value.endswith("leading_only")


__all__ = [
    "Culture",
    "NumberKind",
    "Separator",
    "ShapeTag",
    "ThousandGrouping",
]
