"""
Weapon removal resolution.

Weapon files marked for removal stay on disk. This module only finds the ids
they define that other content still points at.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .events import CleanupEvent, EventKind, EventSink, Phase, discard
from .loaders import CorpusReader, extract_item_ids, read_category_file
from .models import ITEMS_FOLDER, DeadIdentifiers
from .references import ReferenceDetector


class WeaponRemovalResolver:
    """Finds ids of removed weapons that are still referenced elsewhere."""

    def __init__(
        self,
        mod_db_path: Path,
        weapons_to_remove: Iterable[str] = (),
        detector: Optional[ReferenceDetector] = None,
        reader: Optional[CorpusReader] = None,
        emit: EventSink = discard,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.mod_db_path = Path(mod_db_path)
        self.items_path = self.mod_db_path / ITEMS_FOLDER
        self.weapons_to_remove = list(weapons_to_remove)
        self.detector = detector or ReferenceDetector()
        self.reader = reader or CorpusReader()
        self.emit = emit

    def removed_weapon_files(self) -> List[Path]:
        """Item files present on disk whose name is in the removal list."""
        wanted = {name.lower() for name in self.weapons_to_remove}
        return [
            path
            for path in self.reader.list_files(self.items_path, recursive=False)
            if path.name.lower() in wanted
        ]

    def resolve(self) -> DeadIdentifiers:
        """Return ids defined by removed weapons that other content mentions."""
        dangling: DeadIdentifiers = []
        files = self.removed_weapon_files()

        if files:
            other_content = self.reader.read_other_content(self.mod_db_path)
            for path in files:
                document = read_category_file(path)
                found = [
                    item_id
                    for item_id in extract_item_ids(document)
                    if self.detector.is_referenced(other_content, item_id)
                ]
                self.logger.debug(f"{path.name}: {len(found)} ids still referenced")
                dangling.extend(found)

        if not dangling:
            self.emit(CleanupEvent(Phase.RESOLVE_WEAPONS, EventKind.NOTHING_REMOVED))
        for item_id in dangling:
            self.emit(CleanupEvent(Phase.RESOLVE_WEAPONS, EventKind.ID_NEEDS_CLEANUP, item_id=item_id))
        return dangling
