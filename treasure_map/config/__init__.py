"""
Configuration package for the Treasure Map service.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    SearchProvider,
    MapSettings,
    SearchSettings,
    LocationSettings,
    NavigationSettings,
    settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "SearchProvider",
    "MapSettings",
    "SearchSettings",
    "LocationSettings",
    "NavigationSettings",
    "settings",
    "get_settings",
    "reload_settings",
]
