"""
armory-stripper: cleanup tool for the WTT-Armory mod of SPT Escape From Tarkov

Strips unwanted weapons and orphaned attachments from the mod database and
removes quest, preset, assort and loot records that still point at them.
"""

__version__ = "0.1.0"
__author__ = "armory-stripper Contributors"

# Core service imports
from .content import CleanupService, CleanupReport
from .settings import AppSettings, ConfigError
from .utils.logging_config import setup_logging

__all__ = [
    # Services
    "CleanupService",
    "CleanupReport",

    # Settings
    "AppSettings",
    "ConfigError",

    # Logging
    "setup_logging",
]
