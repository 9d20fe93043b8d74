"""Hypothesis strategies for numeric string property-based testing.

Provides strategies for separator settings, culture-formatted integers and
decimals, and deliberately malformed digit groupings for property-based
testing of numstring.parsing and numstring.formatting.

Usage:
    from tests.strategies.numbers import separator_settings, grouped_integers

Event-Emitting Strategies (HypoFuzz-Optimized):
    - separator_settings: Emits thousand/decimal symbol and grouping
    - grouped_integers: Emits digit count bucket
    - malformed_groupings: Emits the kind of grouping defect

Python 3.13+.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from numstring import Culture, NumberCultureSettings, ThousandGrouping

# Symbols usable in either role, including multi-byte custom symbols
_THOUSAND_SYMBOLS: list[str] = [",", ".", " ", "'", "_", "\u202f", "\U0001f353"]
_DECIMAL_SYMBOLS: list[str] = [",", ".", " ", "'", "\u00b7", "\U0001f980"]

cultures = st.sampled_from(list(Culture))


@composite
def separator_settings(draw: st.DrawFn) -> NumberCultureSettings:
    """Generate valid settings with distinct thousand and decimal symbols."""
    thousand = draw(st.sampled_from(_THOUSAND_SYMBOLS))
    decimal = draw(st.sampled_from([s for s in _DECIMAL_SYMBOLS if s != thousand]))
    grouping = draw(st.sampled_from(list(ThousandGrouping)))
    event(f"thousand={thousand!r}")
    event(f"decimal={decimal!r}")
    event(f"grouping={grouping}")
    return NumberCultureSettings(thousand, decimal, grouping)


@composite
def settings_sources(draw: st.DrawFn) -> NumberCultureSettings:
    """Generate settings from either a built-in culture or custom symbols."""
    if draw(st.booleans()):
        return NumberCultureSettings.from_culture(draw(cultures))
    return draw(separator_settings())


def write_grouped(digits: str, settings: NumberCultureSettings) -> str:
    """Group an unsigned digit string by hand (independent of the formatter)."""
    if len(digits) <= 3:
        return digits
    size = 2 if settings.grouping is ThousandGrouping.TWO_BLOCK else 3
    groups = [digits[-3:]]
    rest = digits[:-3]
    while rest:
        groups.insert(0, rest[-size:])
        rest = rest[:-size]
    return settings.thousand_separator.join(groups)


@composite
def grouped_integers(
    draw: st.DrawFn,
    settings: NumberCultureSettings,
    max_value: int = 10**18,
) -> tuple[str, int]:
    """Generate (grouped string, value) pairs with at least one separator."""
    value = draw(st.integers(min_value=1000, max_value=max_value))
    event(f"digits={len(str(value))}")
    return (write_grouped(str(value), settings), value)


@composite
def malformed_groupings(draw: st.DrawFn) -> str:
    """Generate English-style integers whose digit groups have wrong sizes."""
    kind = draw(st.sampled_from(["long_head", "short_group", "long_group", "empty_group"]))
    event(f"defect={kind}")
    head = draw(st.integers(min_value=1, max_value=999))
    tail = [f"{draw(st.integers(min_value=0, max_value=999)):03d}"]
    match kind:
        case "long_head":
            return f"{draw(st.integers(min_value=1000, max_value=99999))},{tail[0]}"
        case "short_group":
            return f"{head},{draw(st.integers(min_value=0, max_value=99))},{tail[0]}"
        case "long_group":
            return f"{head},{tail[0]}{draw(st.integers(min_value=0, max_value=9))}"
        case _:
            return f"{head},,{tail[0]}"
