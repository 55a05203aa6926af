"""Application configuration."""

from .settings import DimensionPolicy, EnvironmentOption, Settings, get_settings, settings

__all__ = [
    "DimensionPolicy",
    "EnvironmentOption",
    "Settings",
    "get_settings",
    "settings",
]
