"""
Reference detection.

An identifier counts as referenced when its text occurs anywhere in the
serialized corpus, ignoring case. There is no tokenization: ``Mag30`` is
referenced by any document mentioning ``Mag300``. Files in this mod use
loosely shaped JSON, so plain containment is the contract. The structural
mode is an opt-in stricter check that only accepts whole string values.
"""

from enum import Enum

from .loaders import Corpus
from .models import ItemId


class ReferenceMode(Enum):
    """How liveness of an identifier is decided."""
    SUBSTRING = "substring"
    STRUCTURAL = "structural"


def references(blob: str, item_id: ItemId) -> bool:
    """True iff ``item_id`` occurs in ``blob``, ignoring case."""
    return item_id.lower() in blob.lower()


class ReferenceDetector:
    """Answers "is this id still used" questions against a Corpus."""

    def __init__(self, mode: ReferenceMode = ReferenceMode.SUBSTRING):
        self.mode = mode

    def is_referenced(self, corpus: Corpus, item_id: ItemId) -> bool:
        if self.mode is ReferenceMode.STRUCTURAL:
            return item_id.lower() in corpus.string_values
        return item_id.lower() in corpus.folded_text

    def mentions_any(self, text: str, item_ids: list[ItemId]) -> bool:
        """Cheap pre-filter: does raw text contain any of the ids."""
        folded = text.lower()
        return any(item_id.lower() in folded for item_id in item_ids)
