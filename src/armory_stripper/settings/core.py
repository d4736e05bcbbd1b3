"""
Core settings management for armory-stripper.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from PySide6.QtCore import QSettings

from .types import ConfigVersion, ValidationResult
from .validation import SettingsValidator
from .paths import PathSettings
from .cleanup import CleanupSettings
from .logging import LoggingSettings

logger = logging.getLogger(__name__)


class AppSettings:
    """
    Configuration management using QSettings.

    Provides type-safe access to application settings with automatic
    cross-platform storage and validation.
    """

    def __init__(
        self,
        profile: str = "default",
        settings_file: Optional[Union[str, Path]] = None,
    ):
        """Initialize settings with organization, application name, and profile.

        Args:
            profile: Settings profile name (default: "default")
            settings_file: Optional INI file to use instead of native storage
        """
        if settings_file:
            self.settings = QSettings(str(settings_file), QSettings.Format.IniFormat)
        else:
            self.settings = QSettings("mugnum", "armory_stripper")
        self.profile = profile

        # Use profile as a group to create hierarchy: mugnum/armory_stripper/default/...
        self.settings.beginGroup(profile)

        # Initialize subsystems
        self._validator = SettingsValidator(self)
        self._paths = PathSettings(self.settings)
        self._cleanup = CleanupSettings(self.settings)
        self._logging = LoggingSettings(self.settings)

        if not self.settings.contains("app/version"):
            self.settings.setValue("app/version", ConfigVersion.CURRENT.value)

        logger.debug(
            f"Settings initialized for profile '{profile}', stored at: {self.settings.fileName()}"
        )

    @property
    def cleanup(self) -> CleanupSettings:
        """Access cleanup settings subsystem."""
        return self._cleanup

    @property
    def version(self) -> str:
        """Get configuration version."""
        value = self.settings.value("app/version", ConfigVersion.CURRENT.value)
        return str(value) if value is not None else ConfigVersion.CURRENT.value

    # === PATH SETTINGS (DELEGATED) ===

    @property
    def game_path(self) -> Optional[Path]:
        """Get game directory path."""
        return self._paths.game_path

    @game_path.setter
    def game_path(self, value: Optional[Path]) -> None:
        """Set game directory path."""
        self._paths.game_path = value

    @property
    def mod_db_path(self) -> Optional[Path]:
        """Get mod database path (derived from game_path)."""
        return self._paths.mod_db_path

    @property
    def items_path(self) -> Optional[Path]:
        """Get mod items directory path (derived from game_path)."""
        return self._paths.items_path

    # === CLEANUP SETTINGS (DELEGATED) ===

    @property
    def weapons_to_remove(self) -> List[str]:
        """Get weapon file names to remove."""
        return self._cleanup.weapons_to_remove

    @weapons_to_remove.setter
    def weapons_to_remove(self, value: List[str]) -> None:
        """Set weapon file names to remove."""
        self._cleanup.weapons_to_remove = value

    @property
    def reference_mode(self) -> str:
        """Get reference detection mode."""
        return self._cleanup.reference_mode

    @reference_mode.setter
    def reference_mode(self, value: str) -> None:
        """Set reference detection mode."""
        self._cleanup.reference_mode = value

    @property
    def atomic_writes(self) -> bool:
        """Whether rewritten files are replaced atomically."""
        return self._cleanup.atomic_writes

    @atomic_writes.setter
    def atomic_writes(self, value: bool) -> None:
        """Set atomic write mode."""
        self._cleanup.atomic_writes = value

    # === LOGGING SETTINGS (DELEGATED, READ BY setup_logging) ===

    @property
    def console_logging(self) -> bool:
        return self._logging.console_logging

    @property
    def console_log_level(self) -> str:
        return self._logging.console_log_level

    @console_log_level.setter
    def console_log_level(self, value: str) -> None:
        self._logging.console_log_level = value

    @property
    def console_use_colors(self) -> bool:
        return self._logging.console_use_colors

    @property
    def file_logging(self) -> bool:
        return self._logging.file_logging

    @property
    def log_file_path(self) -> str:
        return self._logging.log_file_path

    # === VALIDATION ===

    def validate(
        self,
        game_path: Optional[Path] = None,
        weapons_to_remove: Optional[List[str]] = None,
    ) -> ValidationResult:
        """Validate the stored configuration, or the given game path and removal list."""
        return self._validator.validate(game_path, weapons_to_remove)

    def get_settings_file_path(self) -> str:
        """Get the file path where settings are stored."""
        return self.settings.fileName()
