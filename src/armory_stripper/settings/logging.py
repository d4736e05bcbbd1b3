"""
Logging-related settings for armory-stripper.

Only the console level is written back (by ``--save``); the on/off switches
are edited in the settings file by hand.
"""

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# Relative to the working directory, next to the game install when run from there
LOG_FILE_PATH = "logs/armory_stripper.csv"

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings:
    """Console and CSV file logging options."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_bool(self, key: str, default: bool) -> bool:
        value = self.settings.value(key, default)
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    @property
    def console_logging(self) -> bool:
        return self._get_bool("logging/console_enabled", True)

    @property
    def console_use_colors(self) -> bool:
        return self._get_bool("logging/console_use_colors", True)

    @property
    def file_logging(self) -> bool:
        """CSV file logging is off unless enabled in the settings file."""
        return self._get_bool("logging/file_enabled", False)

    @property
    def log_file_path(self) -> str:
        return LOG_FILE_PATH

    @property
    def console_log_level(self) -> str:
        value = self.settings.value("logging/console_level", "INFO")
        return str(value).upper() if value is not None else "INFO"

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        if value.upper() not in VALID_LEVELS:
            logger.warning(f"Invalid console log level: {value}, keeping {self.console_log_level}")
            return
        self.settings.setValue("logging/console_level", value.upper())
        self.settings.sync()
