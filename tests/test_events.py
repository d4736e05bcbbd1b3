"""Tests for event rendering."""

import logging
from pathlib import Path

import pytest

from armory_stripper.content.events import (
    CleanupEvent,
    EventCollector,
    EventKind,
    LoggingReporter,
    Phase,
)


@pytest.fixture
def reporter() -> LoggingReporter:
    return LoggingReporter(logging.getLogger("armory_stripper.test.reporter"))


class TestLoggingReporter:
    def test_nothing_removed_messages(self, reporter: LoggingReporter, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="armory_stripper.test.reporter")
        reporter(CleanupEvent(Phase.PRUNE_ATTACHMENTS, EventKind.NOTHING_REMOVED))
        reporter(CleanupEvent(Phase.RESOLVE_WEAPONS, EventKind.NOTHING_REMOVED))
        assert caplog.messages == ["No unused attachments.", "No weapons removed."]

    def test_record_removed_names_file_and_path(
        self, reporter: LoggingReporter, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="armory_stripper.test.reporter")
        reporter(
            CleanupEvent(
                Phase.REMOVE_REFERENCES,
                EventKind.RECORD_REMOVED,
                file=Path("Quests/quests.json"),
                item_id="Scope_4x",
                path="quest_scope.rewards.Success[0]",
            )
        )
        assert "quest_scope.rewards.Success[0]" in caplog.text
        assert "quests.json" in caplog.text

    def test_root_match_is_a_warning(self, reporter: LoggingReporter, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="armory_stripper.test.reporter")
        reporter(CleanupEvent(Phase.REMOVE_REFERENCES, EventKind.ROOT_MATCH_SKIPPED, item_id="A"))
        assert caplog.records[0].levelno == logging.WARNING
