"""Separator settings and the built-in culture table.

NumberCultureSettings is the (thousand separator, decimal separator,
grouping) triple used by one conversion. It is either looked up from a
Culture, derived from CLDR data via Babel, or built directly by the caller.

Architecture:
    - NumberCultureSettings: Immutable, hashable value object (cache key for
      compiled pattern catalogs)
    - CULTURE_SETTINGS: Read-only process-wide table, never mutated
    - resolve_settings(): Single entry point turning the caller's choice
      (culture, culture code, settings or None) into settings

Thread Safety:
    Everything here is immutable; safe for concurrent reads without locking.

Python 3.13+.
"""

import dataclasses
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Self

from numstring.constants import DEFAULT_CULTURE, SIGN_SYMBOLS
from numstring.diagnostics import CultureNotFoundError, ErrorTemplate
from numstring.enums import Culture, Separator, ThousandGrouping

__all__ = [
    "CULTURE_SETTINGS",
    "NumberCultureSettings",
    "SettingsSource",
    "resolve_settings",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NumberCultureSettings:
    """Separator conventions used to read and write one number.

    Separators are plain strings, so both Separator members and custom
    symbols (any character that is neither a digit nor a sign) are accepted.
    An empty thousand separator disables grouping.

    Attributes:
        thousand_separator: Symbol between digit groups ("" for none)
        decimal_separator: Symbol between integer and fractional digits
        grouping: Digit grouping style of the integer part

    Examples:
        >>> NumberCultureSettings(Separator.COMMA, Separator.DOT)
        NumberCultureSettings(thousand_separator=',', decimal_separator='.', ...)

        >>> swiss = NumberCultureSettings("'", ".")
        >>> indian = NumberCultureSettings(",", ".").with_grouping(ThousandGrouping.TWO_BLOCK)

    Raises:
        ValueError: If a symbol is invalid or both symbols are the same
    """

    thousand_separator: str
    decimal_separator: str
    grouping: ThousandGrouping = ThousandGrouping.THREE_BLOCK

    def __post_init__(self) -> None:
        """Validate separator invariants.

        Raises:
            ValueError: If the decimal separator is empty, a symbol contains
                a digit or sign, or one symbol contains the other.
        """
        # Normalize StrEnum members to plain str for stable repr and hashing
        object.__setattr__(self, "thousand_separator", str(self.thousand_separator))
        object.__setattr__(self, "decimal_separator", str(self.decimal_separator))
        object.__setattr__(self, "grouping", ThousandGrouping(self.grouping))

        thousand = self.thousand_separator
        decimal = self.decimal_separator
        if not decimal:
            msg = "NumberCultureSettings.decimal_separator must not be empty"
            raise ValueError(msg)
        for role, symbol in (("thousand", thousand), ("decimal", decimal)):
            if any(ch.isdigit() or ch in SIGN_SYMBOLS for ch in symbol):
                msg = f"{role} separator {symbol!r} must not contain digits or signs"
                raise ValueError(msg)
        if thousand and (thousand in decimal or decimal in thousand):
            msg = (
                f"Thousand separator {thousand!r} and decimal separator {decimal!r} "
                "must differ"
            )
            raise ValueError(msg)

    @property
    def has_grouping(self) -> bool:
        """True when a thousand separator is configured."""
        return bool(self.thousand_separator)

    def with_grouping(self, grouping: ThousandGrouping) -> Self:
        """Return a copy using another digit grouping style."""
        return dataclasses.replace(self, grouping=grouping)

    @classmethod
    def from_culture(cls, culture: Culture | str) -> "NumberCultureSettings":
        """Look up the settings of a built-in culture.

        Args:
            culture: Culture member or its locale code ("fr", "en-IN")

        Returns:
            The culture's settings from CULTURE_SETTINGS

        Raises:
            CultureNotFoundError: If the code names no built-in culture
        """
        if not isinstance(culture, Culture):
            culture = Culture.parse(culture)
        return CULTURE_SETTINGS[culture]

    @classmethod
    def from_locale(cls, locale_code: str) -> "NumberCultureSettings":
        """Derive settings from CLDR data for any locale known to Babel.

        Reads the locale's group and decimal symbols and the grouping sizes
        of its standard decimal pattern (a secondary group of 2, as in
        en_IN, selects TWO_BLOCK).

        Args:
            locale_code: BCP-47 or POSIX locale code ("de-DE", "lv_LV")

        Returns:
            Settings matching the locale's number conventions

        Raises:
            BabelImportError: If Babel is not installed
            CultureNotFoundError: If Babel does not know the locale

        Example:
            >>> NumberCultureSettings.from_locale("de_DE")
            NumberCultureSettings(thousand_separator='.', decimal_separator=',', ...)
        """
        from numstring.core.babel_compat import (  # noqa: PLC0415 - optional dependency
            get_babel_numbers,
            get_unknown_locale_error_class,
            require_babel,
        )
        from numstring.core.locale_utils import get_babel_locale  # noqa: PLC0415

        require_babel("NumberCultureSettings.from_locale")
        babel_numbers = get_babel_numbers()

        try:
            locale = get_babel_locale(locale_code)
        except (get_unknown_locale_error_class(), ValueError, TypeError) as e:
            raise CultureNotFoundError(
                ErrorTemplate.culture_not_found(locale_code), code=locale_code
            ) from e

        group = babel_numbers.get_group_symbol(locale)
        decimal = babel_numbers.get_decimal_symbol(locale)

        grouping = ThousandGrouping.THREE_BLOCK
        pattern = locale.decimal_formats.get(None)
        if pattern is not None and pattern.grouping[1] == 2:  # noqa: PLR2004 - Indian style
            grouping = ThousandGrouping.TWO_BLOCK

        if group == decimal:
            logger.warning(
                "Locale '%s' uses %r for both separators; grouping disabled",
                locale_code,
                decimal,
            )
            group = Separator.NONE

        return cls(group, decimal, grouping)


# Built-in cultures. Read-only after import; never mutated.
CULTURE_SETTINGS: MappingProxyType[Culture, NumberCultureSettings] = MappingProxyType({
    Culture.ENGLISH: NumberCultureSettings(Separator.COMMA, Separator.DOT),
    Culture.FRENCH: NumberCultureSettings(Separator.SPACE, Separator.COMMA),
    Culture.ITALIAN: NumberCultureSettings(Separator.DOT, Separator.COMMA),
    Culture.INDIAN: NumberCultureSettings(
        Separator.COMMA, Separator.DOT, ThousandGrouping.TWO_BLOCK
    ),
})

type SettingsSource = Culture | NumberCultureSettings | str | None


def resolve_settings(source: SettingsSource) -> NumberCultureSettings:
    """Turn the caller's culture choice into concrete settings.

    Args:
        source: A Culture, a culture code, explicit settings, or None for
            the default culture

    Returns:
        NumberCultureSettings to use for one conversion

    Raises:
        CultureNotFoundError: If a code names no built-in culture
    """
    match source:
        case NumberCultureSettings():
            return source
        case None:
            return CULTURE_SETTINGS[DEFAULT_CULTURE]
        case _:
            return NumberCultureSettings.from_culture(source)
