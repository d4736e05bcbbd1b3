"""
Cleanup-related settings for armory-stripper.
"""

import logging
from typing import List, TYPE_CHECKING, cast

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

logger = logging.getLogger(__name__)

# Weapons stripped from WTT-Armory unless configured otherwise
DEFAULT_WEAPONS_TO_REMOVE = [
    "WeaponAK5C.json",
    "WeaponCarmel.json",
    "WeaponCZScorpion.json",
    "WeaponDragunov.json",
    "WeaponG3.json",
    "WeaponHK417.json",
    "WeaponKACPDW.json",
    "WeaponPatriot.json",
    "WeaponPM9.json",
    "WeaponRemingtonACR.json",
    "WeaponWagesOfSin.json",
    "WeaponX95.json",
    "WeaponXM8.json",
    "WTT_Posters.json",
]

REFERENCE_MODES = ["substring", "structural"]


class CleanupSettings:
    """Manages cleanup run settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_bool(self, key: str, default: bool = False) -> bool:
        """Type-safe boolean retrieval from settings."""
        value = self.settings.value(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ("true", "1", "yes")
        return bool(value) if value is not None else default

    def _get_list(self, key: str, default: List[str]) -> List[str]:
        """Type-safe list retrieval from settings."""
        if not self.settings.contains(key):
            return list(default)
        value = self.settings.value(key)
        if value is None:
            # Empty lists are stored as invalid values by INI backends
            return []
        if isinstance(value, str):
            # Single-item lists come back as a plain string
            return [value] if value else []
        if isinstance(value, list):
            return [
                str(item) if item is not None else ""
                for item in cast(list[object], value)
            ]
        return list(default)

    @property
    def weapons_to_remove(self) -> List[str]:
        """Get weapon file names to remove, in configured order."""
        return self._get_list("cleanup/weapons_to_remove", DEFAULT_WEAPONS_TO_REMOVE)

    @weapons_to_remove.setter
    def weapons_to_remove(self, value: List[str]) -> None:
        """Set weapon file names to remove."""
        self.settings.setValue("cleanup/weapons_to_remove", list(value))
        self.settings.sync()

    def reset_weapons_to_remove(self) -> None:
        """Restore the default removal list."""
        self.settings.remove("cleanup/weapons_to_remove")
        self.settings.sync()

    @property
    def reference_mode(self) -> str:
        """Get reference detection mode ('substring' or 'structural')."""
        value = self.settings.value("cleanup/reference_mode", "substring")
        mode = str(value).lower() if value is not None else "substring"
        return mode if mode in REFERENCE_MODES else "substring"

    @reference_mode.setter
    def reference_mode(self, value: str) -> None:
        """Set reference detection mode."""
        if value.lower() in REFERENCE_MODES:
            self.settings.setValue("cleanup/reference_mode", value.lower())
            self.settings.sync()
        else:
            logger.warning(
                f"Invalid reference mode: {value}, keeping current: {self.reference_mode}"
            )

    @property
    def atomic_writes(self) -> bool:
        """Whether rewritten files go through a temporary file and rename."""
        return self._get_bool("cleanup/atomic_writes", True)

    @atomic_writes.setter
    def atomic_writes(self, value: bool) -> None:
        """Set atomic write mode."""
        self.settings.setValue("cleanup/atomic_writes", value)
        self.settings.sync()
