"""
Configuration package for the LingoPop backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    GeminiSettings,
    StorageSettings,
    SecuritySettings,
    settings,
    get_settings,
    reload_settings,
)
from .loader import ConfigLoader, load_config_for_environment

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "GeminiSettings",
    "StorageSettings",
    "SecuritySettings",
    "settings",
    "get_settings",
    "reload_settings",
    "ConfigLoader",
    "load_config_for_environment",
]
