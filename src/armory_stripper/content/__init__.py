"""
Module for cleaning up WTT-Armory mod content.

Provides the reference heuristic, the attachment pruner, the weapon removal
resolver and the cascading reference remover, plus a service running them in
order.
"""

from .service import CleanupService, CleanupReport
from .models import (
    ItemId,
    CategoryDocument,
    DeadIdentifiers,
    ContentParseError,
    ContentDirectoryError,
    ATTACHMENT_CATEGORY_FILES,
    REFERENCE_FOLDERS,
)
from .loaders import (
    ContentFileLoader,
    Corpus,
    CorpusReader,
    read_category_file,
    extract_item_ids,
)
from .references import ReferenceDetector, ReferenceMode, references
from .pruner import AttachmentPruner, PruneResult
from .resolver import WeaponRemovalResolver
from .remover import CascadingReferenceRemover, RemovalResult, RemovedRecord
from .events import CleanupEvent, EventCollector, EventKind, LoggingReporter, Phase
from .tree import JsonNode, NodeKind

# Public exports
__all__ = [
    # Main service
    "CleanupService",
    "CleanupReport",
    # Type aliases
    "ItemId",
    "CategoryDocument",
    "DeadIdentifiers",
    # Errors
    "ContentParseError",
    "ContentDirectoryError",
    # Constants
    "ATTACHMENT_CATEGORY_FILES",
    "REFERENCE_FOLDERS",
    # Component classes
    "ContentFileLoader",
    "Corpus",
    "CorpusReader",
    "read_category_file",
    "extract_item_ids",
    "ReferenceDetector",
    "ReferenceMode",
    "references",
    "AttachmentPruner",
    "PruneResult",
    "WeaponRemovalResolver",
    "CascadingReferenceRemover",
    "RemovalResult",
    "RemovedRecord",
    # Events
    "CleanupEvent",
    "EventCollector",
    "EventKind",
    "LoggingReporter",
    "Phase",
    # Tree
    "JsonNode",
    "NodeKind",
]
