"""
Main service for WTT-Armory content cleanup.

Runs the two cleanup passes in order: attachment pruning followed by
cascading reference removal, then weapon removal resolution followed by
cascading reference removal.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, TYPE_CHECKING

from ..settings.paths import EFT_EXECUTABLE, MOD_DB_RELATIVE_PATH, contains_eft_executable
from ..settings.types import ConfigError
from .events import EventSink, LoggingReporter
from .loaders import CorpusReader
from .models import ContentDirectoryError, DeadIdentifiers
from .pruner import AttachmentPruner, PruneResult
from .references import ReferenceDetector, ReferenceMode
from .remover import CascadingReferenceRemover, RemovalResult
from .resolver import WeaponRemovalResolver

if TYPE_CHECKING:
    from ..settings import AppSettings


@dataclass
class CleanupReport:
    """Everything one run changed."""
    attachments: PruneResult = field(default_factory=PruneResult)
    attachment_references: RemovalResult = field(default_factory=RemovalResult)
    removed_weapons: DeadIdentifiers = field(default_factory=list)
    weapon_references: RemovalResult = field(default_factory=RemovalResult)

    @property
    def rewritten_files(self) -> List[Path]:
        files = self.attachments.changed_files
        for path in self.attachment_references.rewritten_files + self.weapon_references.rewritten_files:
            if path not in files:
                files.append(path)
        return files


class CleanupService:
    """Service for stripping weapons and orphaned attachments from WTT-Armory.

    The game folder is validated on construction, before anything is read or
    written. Rewrites are final: there is no backup and no rollback, so an
    error halfway through leaves the files processed so far cleaned.
    """

    def __init__(
        self,
        game_path: str | Path,
        weapons_to_remove: Optional[Iterable[str]] = None,
        reference_mode: ReferenceMode = ReferenceMode.SUBSTRING,
        atomic_writes: bool = True,
        emit: Optional[EventSink] = None,
    ):
        """Initialize the cleanup service.

        Args:
            game_path: Game folder, must contain EscapeFromTarkov.exe.
            weapons_to_remove: Weapon file names under Items/ to strip.
            reference_mode: How "still referenced" is decided.
            atomic_writes: Replace rewritten files through a temporary file.
            emit: Event sink; defaults to a LoggingReporter.
        """
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self.game_path = Path(game_path)
        self.validate_game_path(self.game_path)

        self.mod_db_path = self.game_path / MOD_DB_RELATIVE_PATH
        if not self.mod_db_path.is_dir():
            raise ContentDirectoryError(self.mod_db_path)

        self.weapons_to_remove = list(weapons_to_remove or [])
        self.emit = emit or LoggingReporter()

        detector = ReferenceDetector(reference_mode)
        reader = CorpusReader()
        self.pruner = AttachmentPruner(
            self.mod_db_path,
            self.weapons_to_remove,
            detector=detector,
            reader=reader,
            atomic_writes=atomic_writes,
            emit=self.emit,
        )
        self.resolver = WeaponRemovalResolver(
            self.mod_db_path,
            self.weapons_to_remove,
            detector=detector,
            reader=reader,
            emit=self.emit,
        )
        self.remover = CascadingReferenceRemover(
            self.mod_db_path,
            detector=detector,
            reader=reader,
            atomic_writes=atomic_writes,
            emit=self.emit,
        )
        self.logger.info(f"Initializing CleanupService with path: {self.mod_db_path}")

    @classmethod
    def from_settings(cls, settings: "AppSettings", emit: Optional[EventSink] = None) -> "CleanupService":
        """Build a service from stored application settings."""
        if not settings.game_path:
            raise ConfigError("Game path not set")
        return cls(
            settings.game_path,
            settings.weapons_to_remove,
            reference_mode=ReferenceMode(settings.reference_mode),
            atomic_writes=settings.atomic_writes,
            emit=emit,
        )

    @staticmethod
    def validate_game_path(game_path: Path) -> None:
        """Raise ConfigError unless the folder is a game install."""
        if not game_path.is_dir():
            raise ConfigError(f"Game folder does not exist: {game_path}")
        if not contains_eft_executable(game_path):
            raise ConfigError(f"Game folder does not contain {EFT_EXECUTABLE}: {game_path}")

    def run(self) -> CleanupReport:
        """Run both cleanup passes."""
        report = CleanupReport()

        self.logger.info("Removing unused attachments...")
        report.attachments = self.pruner.prune()
        if report.attachments.needs_cleanup:
            report.attachment_references = self.remover.remove(report.attachments.needs_cleanup)

        self.logger.info("Removing references to removed weapons...")
        report.removed_weapons = self.resolver.resolve()
        if report.removed_weapons:
            report.weapon_references = self.remover.remove(report.removed_weapons)

        self.logger.info(
            f"Cleanup finished: {len(report.attachments.removed_ids)} attachments pruned, "
            f"{len(report.attachment_references.removed) + len(report.weapon_references.removed)} "
            f"records removed, {len(report.rewritten_files)} files rewritten"
        )
        return report
