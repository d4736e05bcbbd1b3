"""
Settings package for armory-stripper.

This package provides a modular, type-safe configuration management system
using Qt's QSettings for cross-platform storage.

Usage:
    from armory_stripper.settings import AppSettings, ValidationResult

    settings = AppSettings()
    result = settings.validate()
"""

from .core import AppSettings
from .types import ConfigVersion, ConfigError, ValidationResult
from .paths import EFT_EXECUTABLE, MOD_DB_RELATIVE_PATH, contains_eft_executable
from .cleanup import CleanupSettings, DEFAULT_WEAPONS_TO_REMOVE

__all__ = [
    "AppSettings",
    "ConfigVersion",
    "ConfigError",
    "ValidationResult",
    "CleanupSettings",
    "DEFAULT_WEAPONS_TO_REMOVE",
    "EFT_EXECUTABLE",
    "MOD_DB_RELATIVE_PATH",
    "contains_eft_executable",
]
