"""
Attachment pruning.

Removes attachment definitions that no surviving weapon mentions anymore and
reports which of them are still mentioned by quests, presets or loot tables.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .events import CleanupEvent, EventKind, EventSink, Phase, discard
from .loaders import ContentFileLoader, Corpus, CorpusReader, extract_item_ids, read_category_file
from .models import ATTACHMENT_CATEGORY_FILES, ITEMS_FOLDER, DeadIdentifiers, ItemId
from .references import ReferenceDetector


@dataclass
class PruneResult:
    """Outcome of one pruning pass."""
    removed: Dict[Path, List[ItemId]] = field(default_factory=dict)
    unchanged: List[Path] = field(default_factory=list)
    needs_cleanup: DeadIdentifiers = field(default_factory=list)

    @property
    def removed_ids(self) -> List[ItemId]:
        return [item_id for ids in self.removed.values() for item_id in ids]

    @property
    def changed_files(self) -> List[Path]:
        return list(self.removed.keys())


class AttachmentPruner:
    """Prunes attachment category files against the surviving weapon set.

    Weapons listed in ``weapons_to_remove`` are left out of the weapon corpus,
    so attachments used only by them become dead as well.
    """

    def __init__(
        self,
        mod_db_path: Path,
        weapons_to_remove: Iterable[str] = (),
        attachment_files: Optional[Iterable[str]] = None,
        detector: Optional[ReferenceDetector] = None,
        reader: Optional[CorpusReader] = None,
        atomic_writes: bool = True,
        emit: EventSink = discard,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.mod_db_path = Path(mod_db_path)
        self.items_path = self.mod_db_path / ITEMS_FOLDER
        self.weapons_to_remove = list(weapons_to_remove)
        self.attachment_files = list(
            attachment_files if attachment_files is not None else ATTACHMENT_CATEGORY_FILES
        )
        self.detector = detector or ReferenceDetector()
        self.reader = reader or CorpusReader()
        self.atomic_writes = atomic_writes
        self.emit = emit

    def surviving_weapons(self) -> Corpus:
        """Content of every item file except attachment categories and removed weapons."""
        return self.reader.read(
            self.items_path,
            recursive=False,
            skip_names=self.attachment_files + self.weapons_to_remove,
        )

    def prune(self) -> PruneResult:
        """Remove unreferenced attachments and rewrite the changed category files."""
        weapons = self.surviving_weapons()
        other_content = self.reader.read_other_content(self.mod_db_path)
        self.logger.debug(
            f"Checking attachments against {len(weapons)} weapon files "
            f"and {len(other_content)} other files"
        )

        result = PruneResult()
        for file_name in self.attachment_files:
            path = self.items_path / file_name
            document = read_category_file(path)

            dead = [
                item_id
                for item_id in extract_item_ids(document)
                if not self.detector.is_referenced(weapons, item_id)
            ]

            if not dead:
                result.unchanged.append(path)
                self.emit(CleanupEvent(Phase.PRUNE_ATTACHMENTS, EventKind.FILE_UNCHANGED, file=path))
                continue

            for item_id in dead:
                del document[item_id]
                self.emit(
                    CleanupEvent(Phase.PRUNE_ATTACHMENTS, EventKind.ID_REMOVED, file=path, item_id=item_id)
                )
                # Only ids mentioned outside the weapon set leave dangling records
                if self.detector.is_referenced(other_content, item_id):
                    result.needs_cleanup.append(item_id)

            ContentFileLoader.write_document(path, document, atomic=self.atomic_writes)
            result.removed[path] = dead
            self.emit(CleanupEvent(Phase.PRUNE_ATTACHMENTS, EventKind.FILE_CHANGED, file=path))

        if not result.removed:
            self.emit(CleanupEvent(Phase.PRUNE_ATTACHMENTS, EventKind.NOTHING_REMOVED))
        for item_id in result.needs_cleanup:
            self.emit(CleanupEvent(Phase.PRUNE_ATTACHMENTS, EventKind.ID_NEEDS_CLEANUP, item_id=item_id))

        self.logger.info(
            f"Pruned {len(result.removed_ids)} attachments from {len(result.removed)} files, "
            f"{len(result.needs_cleanup)} need reference cleanup"
        )
        return result
