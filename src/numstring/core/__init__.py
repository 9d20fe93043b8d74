"""Core building blocks shared by parsing and formatting.

Provides separator settings, the built-in culture table, locale code
normalization and the optional Babel compatibility layer.

Python 3.13+.
"""

from .settings import CULTURE_SETTINGS, NumberCultureSettings, SettingsSource, resolve_settings

__all__ = [
    "CULTURE_SETTINGS",
    "NumberCultureSettings",
    "SettingsSource",
    "resolve_settings",
]
