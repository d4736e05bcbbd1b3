"""
Data models for WTT-Armory mod content.

Contains type aliases, folder layout constants and exceptions used throughout
the content package. Documents stay plain dicts as parsed by orjson.
"""

from pathlib import Path
from typing import Any, Dict, List, TypeAlias

from ..settings.types import ConfigError

# Type aliases for clarity
ItemId: TypeAlias = str
"""Key identifying one item definition inside a category file."""

CategoryDocument: TypeAlias = Dict[str, Any]
"""Root object of a category file: ItemId -> item definition."""

DeadIdentifiers: TypeAlias = List[ItemId]
"""Ids found dead during one run, in discovery order."""


# Folder layout under the mod database root
ITEMS_FOLDER = "Items"
IMAGES_FOLDER = "Images"
LOCALES_FOLDER = "locales"

REFERENCE_FOLDERS = [
    "CustomAssortSchemes",
    "CustomLootspawnService",
    "CustomWeaponPresets",
    "Quests",
]

ATTACHMENT_CATEGORY_FILES = [
    "Ammo.json",
    "Attachment_Foregrips.json",
    "Attachment_IronSights.json",
    "Attachment_Magazines.json",
    "Attachment_Muzzles.json",
    "Attachment_PistolGrips.json",
    "Attachment_Scopes.json",
    "Attachment_Suppressors.json",
]

JSON_PATTERN = "*.json"


def excluded_folders(mod_db_path: Path) -> List[Path]:
    """Folders whose content never counts as a reference."""
    return [
        mod_db_path / ITEMS_FOLDER,
        mod_db_path / IMAGES_FOLDER,
        mod_db_path / LOCALES_FOLDER,
    ]


class ContentParseError(Exception):
    """Raised when a content file is malformed or its root is not a JSON object."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot parse {path}: {reason}")
        self.path = path
        self.reason = reason


class ContentDirectoryError(ConfigError):
    """Raised when a content folder in scope does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Content directory not found: {path}")
        self.path = path
