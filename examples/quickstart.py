"""Quickstart example for numstring.

This example demonstrates parsing culture-formatted numbers, shape
classification, and formatting numbers back with explicit rounding.

Note: Some examples ignore the 'errors' return value for brevity. In
production, always check errors and log/report conversion issues.
"""

from decimal import Decimal

from numstring import (
    I8,
    I32,
    ConvertString,
    Culture,
    FormatOptions,
    NumberCultureSettings,
    Separator,
    ThousandGrouping,
    to_format,
    to_format_options,
    to_format_separators,
    to_number,
    to_number_culture,
    to_number_separators,
)
from numstring.core.babel_compat import is_babel_available

# Example 1: Parsing with the default culture
print("=" * 50)
print("Example 1: Parsing (English)")
print("=" * 50)

result, _ = to_number("1,000", I32)
print(result)
# Output: 1000

result, _ = to_number("10,000,000.2")
print(result)
# Output: 10000000.2

# Example 2: Overflow is reported, not raised
print("\n" + "=" * 50)
print("Example 2: Overflow")
print("=" * 50)

result, errors = to_number("1,000", I8)
print(result)
print(errors[0])
# Output: None
# error[NUMBER_OUT_OF_RANGE]: '1,000' does not fit in i8 (range -128 to 127)
#   = input: 1,000
#   = expected: i8
#   = help: Use a wider numeric type

# Example 3: Other cultures
print("\n" + "=" * 50)
print("Example 3: Cultures")
print("=" * 50)

result, _ = to_number_culture("-10 564,10", Culture.FRENCH)
print(result)
# Output: -10564.1

result, _ = to_number_culture(",10", "it", Decimal)
print(result)
# Output: 0.10

result, _ = to_number_culture("10,00,000", Culture.INDIAN, int)
print(result)
# Output: 1000000

# Example 4: Custom separators
print("\n" + "=" * 50)
print("Example 4: Custom Separators")
print("=" * 50)

dot_space = NumberCultureSettings(Separator.DOT, Separator.SPACE)
result, _ = to_number_separators("1.000 8888", dot_space, Decimal)
print(result)
# Output: 1000.8888

emoji = NumberCultureSettings("\U0001f353", "\U0001f980")
result, _ = to_number_separators("-5\U0001f353000\U0001f98066", emoji)
print(result)
# Output: -5000.66

# Example 5: Shape classification
print("\n" + "=" * 50)
print("Example 5: Classification")
print("=" * 50)

for text in ("1,000.2", "1,000", ".5", "1,0000", "NotANumber"):
    num = ConvertString(text)
    shape = num.shape.value if num.shape else "-"
    print(f"{text!r:14} numeric={num.is_numeric()!s:5} float={num.is_float()!s:5} {shape}")

# Example 6: Formatting
print("\n" + "=" * 50)
print("Example 6: Formatting")
print("=" * 50)

for culture in Culture:
    result, _ = to_format(-10_000.999, "N2", culture)
    print(f"{culture.name:8} {result}")
# Output:
# ENGLISH  -10,001.00
# FRENCH   -10 001,00
# ITALIAN  -10.001,00
# INDIAN   -10,001.00

result, _ = to_format(0.125, "N2")
print(result)
# Output: 0.13 (ties round away from zero)

swiss = NumberCultureSettings(Separator.APOSTROPHE, Separator.DOT)
result, _ = to_format_separators(1_234_567.5, "N0", swiss)
print(result)
# Output: 1'234'568

lakh = NumberCultureSettings(" ", ",", ThousandGrouping.TWO_BLOCK)
result, _ = to_format_separators(12_345_678, "N0", lakh)
print(result)
# Output: 1 23 45 678

result, _ = to_format_options(1234.5, FormatOptions(0, 3))
print(result)
# Output: 1,234.5 (rounded to 3 digits, trailing zeros dropped)

result, errors = to_format(1.5, "D2")
print(result, errors[0].diagnostic)
# Output: None Invalid format specifier 'D2'

# Example 7: Settings from CLDR (requires numstring[babel])
print("\n" + "=" * 50)
print("Example 7: Locale Settings via Babel")
print("=" * 50)

if is_babel_available():
    german = NumberCultureSettings.from_locale("de_DE")
    result, _ = to_format_separators(1234.5, "N2", german)
    print(result)
    # Output: 1.234,50
else:
    print("Babel not installed: pip install numstring[babel]")

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
