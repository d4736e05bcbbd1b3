"""
Cascading removal of records that reference dead ids.

Scans assort schemes, loot tables, weapon presets and quests. A record is the
object holding a dead id as one of its property values; the whole record is
cut from its container so no half-empty descriptor is left behind.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from .events import CleanupEvent, EventKind, EventSink, Phase, discard
from .loaders import ContentFileLoader, CorpusReader
from .models import REFERENCE_FOLDERS, DeadIdentifiers, ItemId
from .references import ReferenceDetector
from .tree import JsonNode, find_strings


@dataclass(frozen=True)
class RemovedRecord:
    """A record cut from a reference file."""
    file: Path
    item_id: ItemId
    path: str


@dataclass
class RemovalResult:
    """Outcome of one cascading pass."""
    removed: List[RemovedRecord] = field(default_factory=list)
    rewritten_files: List[Path] = field(default_factory=list)
    scanned_files: int = 0


class CascadingReferenceRemover:
    """Removes records mentioning dead ids from the reference folders."""

    def __init__(
        self,
        mod_db_path: Path,
        folders: Optional[Iterable[str]] = None,
        detector: Optional[ReferenceDetector] = None,
        reader: Optional[CorpusReader] = None,
        atomic_writes: bool = True,
        emit: EventSink = discard,
    ):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.mod_db_path = Path(mod_db_path)
        self.folders = list(folders if folders is not None else REFERENCE_FOLDERS)
        self.detector = detector or ReferenceDetector()
        self.reader = reader or CorpusReader()
        self.atomic_writes = atomic_writes
        self.emit = emit

    def reference_files(self) -> List[Path]:
        files: List[Path] = []
        for folder in self.folders:
            files.extend(self.reader.list_files(self.mod_db_path / folder))
        return files

    def remove(self, item_ids: DeadIdentifiers) -> RemovalResult:
        """Cut every record that mentions one of ``item_ids``."""
        result = RemovalResult()
        if not item_ids:
            return result

        for path in self.reference_files():
            result.scanned_files += 1
            text = ContentFileLoader.read_text(path)

            # Substring pre-filter, exact matching happens on the parsed tree
            if not self.detector.mentions_any(text, item_ids):
                continue

            document = ContentFileLoader.parse_object(path, text)
            removed = self.remove_from_document(path, document, item_ids)
            if not removed:
                continue

            ContentFileLoader.write_document(path, document, atomic=self.atomic_writes)
            result.removed.extend(removed)
            result.rewritten_files.append(path)
            self.emit(CleanupEvent(Phase.REMOVE_REFERENCES, EventKind.FILE_CHANGED, file=path))

        self.logger.info(
            f"Removed {len(result.removed)} records from {len(result.rewritten_files)} "
            f"of {result.scanned_files} reference files"
        )
        return result

    def remove_from_document(
        self, path: Path, document: dict, item_ids: DeadIdentifiers
    ) -> List[RemovedRecord]:
        """Detach matching records from an in-memory document."""
        root = JsonNode.root(document)
        removed: List[RemovedRecord] = []

        for item_id in item_ids:
            records: Dict[int, JsonNode] = {}
            for match in find_strings(root, item_id):
                record = match.enclosing_record()
                if record is None:
                    continue
                if record.is_root:
                    self.emit(
                        CleanupEvent(
                            Phase.REMOVE_REFERENCES,
                            EventKind.ROOT_MATCH_SKIPPED,
                            file=path,
                            item_id=item_id,
                            path=match.path,
                        )
                    )
                    continue
                records.setdefault(id(record.value), record)

            # Records nested inside another doomed record go with it
            outermost = [
                record
                for record in records.values()
                if not any(id(ancestor.value) in records for ancestor in record.ancestors())
            ]

            # Paths first, indices shift once siblings are detached
            planned = [(record, record.path) for record in outermost]
            for record, record_path in planned:
                if record.detach():
                    removed.append(RemovedRecord(path, item_id, record_path))
                    self.emit(
                        CleanupEvent(
                            Phase.REMOVE_REFERENCES,
                            EventKind.RECORD_REMOVED,
                            file=path,
                            item_id=item_id,
                            path=record_path,
                        )
                    )
        return removed
