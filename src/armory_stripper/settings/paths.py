"""
Path-related settings for armory-stripper.
"""

from pathlib import Path
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from PySide6.QtCore import QSettings

# Executable that marks a valid SPT / Escape From Tarkov install
EFT_EXECUTABLE = "EscapeFromTarkov.exe"

# Mod database location relative to the game folder
MOD_DB_RELATIVE_PATH = Path("user") / "mods" / "WTT-Armory" / "db"


def contains_eft_executable(game_path: Path) -> bool:
    """Check whether the folder contains EscapeFromTarkov.exe."""
    return (Path(game_path) / EFT_EXECUTABLE).is_file()


class PathSettings:
    """Manages path-related settings."""

    def __init__(self, settings: "QSettings"):
        self.settings = settings

    def _get_str(self, key: str, default: str = "") -> str:
        """Type-safe string retrieval from settings."""
        value = self.settings.value(key, default)
        return str(value) if value is not None else default

    @property
    def game_path(self) -> Optional[Path]:
        """Get game directory path."""
        path_str = self._get_str("paths/game", "")
        return Path(path_str) if path_str else None

    @game_path.setter
    def game_path(self, value: Optional[Path]) -> None:
        """Set game directory path."""
        self.settings.setValue("paths/game", str(value) if value else "")
        self.settings.sync()

    @property
    def mod_db_path(self) -> Optional[Path]:
        """Get mod database path (derived from game_path)."""
        if self.game_path:
            return self.game_path / MOD_DB_RELATIVE_PATH
        return None

    @property
    def items_path(self) -> Optional[Path]:
        """Get mod items directory path (derived from game_path)."""
        if self.mod_db_path:
            return self.mod_db_path / "Items"
        return None
