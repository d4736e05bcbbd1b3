"""Shared fixtures: a miniature WTT-Armory install built in tmp_path."""

from pathlib import Path
from typing import Any

import orjson
import pytest

from armory_stripper.content.models import ATTACHMENT_CATEGORY_FILES, REFERENCE_FOLDERS
from armory_stripper.settings.paths import EFT_EXECUTABLE, MOD_DB_RELATIVE_PATH


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(orjson.dumps(data, option=orjson.OPT_INDENT_2))
    return path


def read_json(path: Path) -> Any:
    return orjson.loads(path.read_bytes())


def snapshot(root: Path) -> dict[Path, bytes]:
    """Raw bytes of every file under root, to detect rewrites."""
    return {p: p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}


@pytest.fixture
def game_dir(tmp_path: Path) -> Path:
    """Game folder with the marker executable and an empty mod database."""
    game = tmp_path / "SPT"
    db = game / MOD_DB_RELATIVE_PATH
    (db / "Items").mkdir(parents=True)
    (db / "Images").mkdir()
    (db / "locales").mkdir()
    for folder in REFERENCE_FOLDERS:
        (db / folder).mkdir()
    for file_name in ATTACHMENT_CATEGORY_FILES:
        write_json(db / "Items" / file_name, {})
    (game / EFT_EXECUTABLE).write_bytes(b"")
    return game


@pytest.fixture
def empty_mod_db(game_dir: Path) -> Path:
    return game_dir / MOD_DB_RELATIVE_PATH


@pytest.fixture
def mod_db(empty_mod_db: Path) -> Path:
    """Mod database with one weapon to keep and one to drop.

    WeaponKeep uses Scope_1x, Mag300 and ammo_556. WeaponDrop is the only
    user of Scope_4x, which a quest reward and a preset also mention.
    Muzzle_orphan is used by nothing except locale and image entries.
    """
    db = empty_mod_db
    items = db / "Items"

    write_json(items / "Ammo.json", {"ammo_556": {"_props": {"Caliber": "556"}}})
    write_json(
        items / "Attachment_Scopes.json",
        {
            "Scope_4x": {"_parent": "optic", "_props": {"Zoom": 4}},
            "Scope_1x": {"_parent": "optic", "_props": {"Zoom": 1}},
        },
    )
    write_json(
        items / "Attachment_Magazines.json",
        {
            "Mag30": {"_parent": "magazine", "_props": {"Capacity": 30}},
            "Mag300": {"_parent": "magazine", "_props": {"Capacity": 300}},
        },
    )
    write_json(items / "Attachment_Muzzles.json", {"Muzzle_orphan": {"_parent": "muzzle"}})

    write_json(
        items / "WeaponKeep.json",
        {
            "weapon_keep": {
                "_props": {
                    "Slots": [
                        {"_name": "mod_scope", "_props": {"filters": [{"Filter": ["Scope_1x"]}]}},
                        {"_name": "mod_magazine", "_props": {"filters": [{"Filter": ["Mag300"]}]}},
                    ],
                    "Chambers": [{"_props": {"filters": [{"Filter": ["ammo_556"]}]}}],
                }
            }
        },
    )
    write_json(
        items / "WeaponDrop.json",
        {
            "weapon_drop": {
                "_props": {
                    "Slots": [{"_name": "mod_scope", "_props": {"filters": [{"Filter": ["Scope_4x"]}]}}]
                }
            }
        },
    )

    write_json(
        db / "Quests" / "quests.json",
        {
            "quest_scope": {
                "rewards": {
                    "Success": [
                        {"id": "reward_scope", "type": "Item", "target": "Scope_4x"},
                        {"id": "reward_money", "type": "Item", "target": "money"},
                    ]
                }
            }
        },
    )
    write_json(
        db / "CustomWeaponPresets" / "presets.json",
        {
            "preset_drop": {
                "_id": "preset_drop",
                "_items": [
                    {"_id": "p1", "_tpl": "weapon_drop"},
                    {"_id": "p2", "_tpl": "Scope_4x", "parentId": "p1"},
                ],
            },
            "preset_keep": {"_id": "preset_keep", "_items": [{"_id": "k1", "_tpl": "weapon_keep"}]},
        },
    )
    write_json(
        db / "CustomAssortSchemes" / "assort.json",
        {
            "items": [
                {"_id": "a1", "_tpl": "weapon_drop", "parentId": "hideout"},
                {"_id": "a2", "_tpl": "weapon_keep", "parentId": "hideout"},
            ],
            "loyal_level_items": {"a1": 1, "a2": 2},
        },
    )
    write_json(
        db / "CustomLootspawnService" / "loot.json",
        {"spawns": [{"template": "ammo_556", "relativeProbability": 10}]},
    )
    write_json(db / "locales" / "en.json", {"Muzzle_orphan Name": "Orphan muzzle"})
    write_json(db / "Images" / "icons.json", {"Muzzle_orphan": "muzzle.png"})
    return db
