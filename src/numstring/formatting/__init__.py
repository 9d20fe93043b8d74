"""Number to string: culture-formatted display with explicit rounding.

Public API:
    to_format - Built-in culture (or explicit settings)
    to_format_separators - Explicit NumberCultureSettings
    to_format_options - Minimum/maximum fraction digit bounds (FormatOptions)
    format_number - Raising core (fraction digit count instead of specifier)
    parse_format_spec - "N{digits}" -> digit count
    group_digits - Thousand separator insertion

Python 3.13+.
"""

from .numbers import (
    FormatOptions,
    format_number,
    group_digits,
    parse_format_spec,
    to_format,
    to_format_options,
    to_format_separators,
)

__all__ = [
    "FormatOptions",
    "format_number",
    "group_digits",
    "parse_format_spec",
    "to_format",
    "to_format_options",
    "to_format_separators",
]
