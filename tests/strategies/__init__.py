"""Hypothesis strategies for numstring property-based testing.

Usage:
    from tests.strategies import separator_settings, grouped_integers
    from tests.strategies.numbers import malformed_groupings

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - separator_settings, grouped_integers, malformed_groupings
"""

from .numbers import (
    cultures,
    grouped_integers,
    malformed_groupings,
    separator_settings,
    settings_sources,
    write_grouped,
)

__all__ = [
    "cultures",
    "grouped_integers",
    "malformed_groupings",
    "separator_settings",
    "settings_sources",
    "write_grouped",
]
