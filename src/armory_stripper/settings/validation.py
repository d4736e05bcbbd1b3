"""
Settings validation system for armory-stripper.
"""

import logging
from pathlib import Path
from typing import List, Optional, TYPE_CHECKING

from .paths import EFT_EXECUTABLE, MOD_DB_RELATIVE_PATH, contains_eft_executable
from .types import ValidationResult

if TYPE_CHECKING:
    from .core import AppSettings

logger = logging.getLogger(__name__)


class SettingsValidator:
    """Validates configuration settings."""

    def __init__(self, settings: "AppSettings"):
        self.settings = settings

    def validate(
        self,
        game_path: Optional[Path] = None,
        weapons_to_remove: Optional[List[str]] = None,
    ) -> ValidationResult:
        """Validate current configuration.

        Args:
            game_path: Checked instead of the stored game path when given
            weapons_to_remove: Checked instead of the stored removal list when given
        """
        errors: List[str] = []
        warnings: List[str] = []

        if game_path is None:
            game_path = self.settings.game_path
        if weapons_to_remove is None:
            weapons_to_remove = self.settings.weapons_to_remove

        if not game_path:
            errors.append("Game path not set")
        elif not game_path.is_dir():
            errors.append(f"Game path does not exist: {game_path}")
        elif not contains_eft_executable(game_path):
            errors.append(f"Game folder does not contain {EFT_EXECUTABLE}: {game_path}")
        elif not (game_path / MOD_DB_RELATIVE_PATH).is_dir():
            errors.append(f"Mod database not found: {game_path / MOD_DB_RELATIVE_PATH}")
        else:
            items_path = game_path / MOD_DB_RELATIVE_PATH / "Items"
            present = {p.name.lower() for p in items_path.glob("*.json")}
            for file_name in weapons_to_remove:
                if file_name.lower() not in present:
                    warnings.append(f"Weapon file to remove not found: {file_name}")

        return ValidationResult(
            is_valid=len(errors) == 0, errors=errors, warnings=warnings
        )
