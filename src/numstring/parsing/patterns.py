"""Pattern catalog: ordered shape rules parameterized by separator settings.

Each rule pairs a ShapeTag with an anchored regular expression built from
the active NumberCultureSettings, so one catalog definition serves every
culture and every custom separator pair.

Matching Order (highest priority first):
    1. Signed thousand-grouped decimal     -1,000.25
    2. Thousand-grouped decimal            1,000.25
    3. Signed decimal                      -1000.25
    4. Decimal                             1000.25
    5. Signed decimal without integer part -.25
    6. Decimal without integer part        .25
    7. Signed thousand-grouped integer     -1,000
    8. Thousand-grouped integer            1,000
    9. Signed integer                      -1000
    10. Plain integer                      1000

The first rule whose expression matches the whole string wins. Grouped
rules require well-formed groups (THREE_BLOCK: 1-3 leading digits then
groups of exactly 3; TWO_BLOCK: 1-2 leading digits, groups of 2, then a
final group of 3), so "1,0000" matches nothing. Whitespace is only ever
matched as part of a separator symbol.

Compiled catalogs are memoized per settings value; settings are immutable
and hashable, so the cache is safe to share between threads.

Python 3.13+.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from numstring.constants import MAX_CATALOG_CACHE_SIZE
from numstring.core.settings import NumberCultureSettings
from numstring.enums import ShapeTag, ThousandGrouping

__all__ = [
    "ParsingPattern",
    "build_catalog",
    "classify",
]

_SIGN = "[+-]"
_DIGITS = "[0-9]+"


@dataclass(frozen=True, slots=True)
class ParsingPattern:
    """One classification rule of the catalog.

    Attributes:
        tag: Shape reported when the rule matches
        regex: Anchored expression built from the separator settings
    """

    tag: ShapeTag
    regex: re.Pattern[str]

    @property
    def name(self) -> str:
        """Rule name (the shape tag's value)."""
        return self.tag.value

    def matches(self, value: str) -> bool:
        """Return True if the whole string has this rule's shape."""
        return self.regex.fullmatch(value) is not None


def _grouped_integer(thousand: str, grouping: ThousandGrouping) -> str:
    """Expression for an integer part containing thousand separators."""
    sep = re.escape(thousand)
    if grouping is ThousandGrouping.TWO_BLOCK:
        return f"[0-9]{{1,2}}(?:{sep}[0-9]{{2}})*{sep}[0-9]{{3}}"
    return f"[0-9]{{1,3}}(?:{sep}[0-9]{{3}})+"


@lru_cache(maxsize=MAX_CATALOG_CACHE_SIZE)
def build_catalog(settings: NumberCultureSettings) -> tuple[ParsingPattern, ...]:
    """Compile the ordered rule list for one settings value.

    Grouped rules are left out when the settings have no thousand separator.

    Args:
        settings: Separator conventions to build the rules from

    Returns:
        Rules in priority order
    """
    fraction = f"{re.escape(settings.decimal_separator)}{_DIGITS}"

    bodies: list[tuple[ShapeTag, str]] = []
    if settings.has_grouping:
        grouped = _grouped_integer(settings.thousand_separator, settings.grouping)
        bodies += [
            (ShapeTag.SIGNED_THOUSAND_DECIMAL, f"{_SIGN}{grouped}{fraction}"),
            (ShapeTag.THOUSAND_DECIMAL, f"{grouped}{fraction}"),
        ]
    bodies += [
        (ShapeTag.SIGNED_DECIMAL, f"{_SIGN}{_DIGITS}{fraction}"),
        (ShapeTag.DECIMAL, f"{_DIGITS}{fraction}"),
        (ShapeTag.SIGNED_DECIMAL_LEADING_ONLY, f"{_SIGN}{fraction}"),
        (ShapeTag.DECIMAL_LEADING_ONLY, fraction),
    ]
    if settings.has_grouping:
        bodies += [
            (ShapeTag.SIGNED_THOUSAND_INTEGER, f"{_SIGN}{grouped}"),
            (ShapeTag.THOUSAND_INTEGER, grouped),
        ]
    bodies += [
        (ShapeTag.SIGNED_INTEGER, f"{_SIGN}{_DIGITS}"),
        (ShapeTag.PLAIN_INTEGER, _DIGITS),
    ]

    return tuple(ParsingPattern(tag, re.compile(body)) for tag, body in bodies)


def classify(value: str, settings: NumberCultureSettings) -> ParsingPattern | None:
    """Find the first catalog rule matching the whole input.

    Args:
        value: Candidate numeric string
        settings: Separator conventions in effect

    Returns:
        Matching rule, or None if the string is not numeric (not an error)

    Examples:
        >>> en = NumberCultureSettings(",", ".")
        >>> classify("1,000.5", en).tag
        <ShapeTag.THOUSAND_DECIMAL: 'thousand_decimal'>
        >>> classify("1,0000", en) is None
        True
    """
    for pattern in build_catalog(settings):
        if pattern.matches(value):
            return pattern
    return None
