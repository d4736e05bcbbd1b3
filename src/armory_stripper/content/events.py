"""
Structured cleanup events.

Core components never print. They emit CleanupEvent objects through a sink
callable; LoggingReporter turns them into log lines.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional

from .models import ItemId


class Phase(Enum):
    """Stage of a cleanup run."""
    PRUNE_ATTACHMENTS = "prune_attachments"
    RESOLVE_WEAPONS = "resolve_weapons"
    REMOVE_REFERENCES = "remove_references"


class EventKind(Enum):
    """What happened."""
    FILE_CHANGED = "file_changed"
    FILE_UNCHANGED = "file_unchanged"
    ID_REMOVED = "id_removed"
    ID_NEEDS_CLEANUP = "id_needs_cleanup"
    NOTHING_REMOVED = "nothing_removed"
    RECORD_REMOVED = "record_removed"
    ROOT_MATCH_SKIPPED = "root_match_skipped"


@dataclass(frozen=True)
class CleanupEvent:
    """One observable step of a cleanup run."""
    phase: Phase
    kind: EventKind
    file: Optional[Path] = None
    item_id: Optional[ItemId] = None
    path: Optional[str] = None


EventSink = Callable[[CleanupEvent], None]


def discard(event: CleanupEvent) -> None:
    """Sink that ignores events."""


class EventCollector:
    """Sink that keeps every event, mainly for tests and summaries."""

    def __init__(self):
        self.events: List[CleanupEvent] = []

    def __call__(self, event: CleanupEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: EventKind) -> List[CleanupEvent]:
        return [event for event in self.events if event.kind is kind]


class LoggingReporter:
    """Renders cleanup events as log lines."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def __call__(self, event: CleanupEvent) -> None:
        kind = event.kind
        if kind is EventKind.FILE_CHANGED:
            self.logger.info(f"Changed: {event.file}")
        elif kind is EventKind.FILE_UNCHANGED:
            self.logger.info(f"Unchanged: {event.file}")
        elif kind is EventKind.ID_REMOVED:
            self.logger.info(f"  Removed unused attachment {event.item_id} from {_name(event.file)}")
        elif kind is EventKind.ID_NEEDS_CLEANUP:
            if event.phase is Phase.RESOLVE_WEAPONS:
                self.logger.info(f"  Removed weapon still referenced: {event.item_id}")
            else:
                self.logger.info(f"  Attachment still referenced elsewhere: {event.item_id}")
        elif kind is EventKind.NOTHING_REMOVED:
            if event.phase is Phase.RESOLVE_WEAPONS:
                self.logger.info("No weapons removed.")
            else:
                self.logger.info("No unused attachments.")
        elif kind is EventKind.RECORD_REMOVED:
            self.logger.info(f"Removing root: {event.path} ({event.item_id}) in {event.file}")
        elif kind is EventKind.ROOT_MATCH_SKIPPED:
            self.logger.warning(
                f"{event.item_id} is a top-level value of {event.file}, the document root is kept"
            )


def _name(path: Optional[Path]) -> str:
    return path.name if path else "?"
