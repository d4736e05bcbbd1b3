"""Tests for content file loading and corpus reading."""

import codecs
import stat
from pathlib import Path

import pytest

from armory_stripper.content.loaders import (
    ContentFileLoader,
    CorpusReader,
    extract_item_ids,
    read_category_file,
)
from armory_stripper.content.models import ContentDirectoryError, ContentParseError
from armory_stripper.settings import ConfigError

from conftest import read_json, write_json


class TestCategoryFiles:
    def test_extract_item_ids(self, mod_db: Path) -> None:
        document = read_category_file(mod_db / "Items" / "Attachment_Scopes.json")
        assert sorted(extract_item_ids(document)) == ["Scope_1x", "Scope_4x"]

    def test_bom_is_accepted(self, tmp_path: Path) -> None:
        path = tmp_path / "bom.json"
        path.write_bytes(codecs.BOM_UTF8 + b'{"id": {}}')
        assert read_category_file(path) == {"id": {}}

    @pytest.mark.parametrize("content", [b"[1, 2]", b'"text"', b"{not json"])
    def test_non_object_root_is_a_parse_error(self, tmp_path: Path, content: bytes) -> None:
        path = tmp_path / "bad.json"
        path.write_bytes(content)
        with pytest.raises(ContentParseError) as excinfo:
            read_category_file(path)
        assert excinfo.value.path == path

    def test_missing_file_propagates(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_category_file(tmp_path / "missing.json")


class TestWriteDocument:
    @pytest.mark.parametrize("atomic", [True, False])
    def test_indented_rewrite(self, tmp_path: Path, atomic: bool) -> None:
        path = write_json(tmp_path / "doc.json", {"old": 1})
        ContentFileLoader.write_document(path, {"a": {"b": [1, "x"]}}, atomic=atomic)

        text = path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "a": {\n    "b": [\n')
        assert text.endswith("}\n")
        assert read_json(path) == {"a": {"b": [1, "x"]}}
        assert [p.name for p in tmp_path.iterdir()] == ["doc.json"]

    @pytest.mark.parametrize("atomic", [True, False])
    @pytest.mark.parametrize("mode", [0o644, 0o664])
    def test_rewrite_keeps_file_mode(self, tmp_path: Path, atomic: bool, mode: int) -> None:
        path = write_json(tmp_path / "quest.json", {"old": 1})
        path.chmod(mode)

        ContentFileLoader.write_document(path, {"new": 2}, atomic=atomic)

        assert stat.S_IMODE(path.stat().st_mode) == mode
        assert read_json(path) == {"new": 2}

    def test_surviving_definitions_round_trip(self, mod_db: Path) -> None:
        path = mod_db / "Items" / "Attachment_Scopes.json"
        document = read_category_file(path)
        del document["Scope_4x"]
        ContentFileLoader.write_document(path, document)
        assert read_json(path) == {"Scope_1x": {"_parent": "optic", "_props": {"Zoom": 1}}}


class TestCorpusReader:
    def test_exclusion_is_case_insensitive_substring(self) -> None:
        excluded = [Path("/game/db/locales")]
        assert CorpusReader.is_excluded(Path("/game/DB/Locales/en.json"), excluded)
        assert CorpusReader.is_excluded(Path("/game/db/locales/nested/ru.json"), excluded)
        assert not CorpusReader.is_excluded(Path("/game/db/Quests/q.json"), excluded)

    def test_other_content_skips_items_images_and_locales(self, mod_db: Path) -> None:
        corpus = CorpusReader().read_other_content(mod_db)
        names = sorted(path.name for path in corpus.paths)
        assert names == ["assort.json", "loot.json", "presets.json", "quests.json"]
        assert "muzzle_orphan" not in corpus.folded_text

    def test_skip_names_ignore_case(self, mod_db: Path) -> None:
        files = CorpusReader().list_files(
            mod_db / "Items", recursive=False, skip_names=["weapondrop.JSON"]
        )
        assert "WeaponDrop.json" not in [path.name for path in files]
        assert "WeaponKeep.json" in [path.name for path in files]

    def test_text_joins_every_file(self, mod_db: Path) -> None:
        corpus = CorpusReader().read(mod_db / "Quests")
        assert len(corpus) == 1
        assert "reward_scope" in corpus.text

    def test_missing_directory_is_a_config_error(self, tmp_path: Path) -> None:
        with pytest.raises(ContentDirectoryError) as excinfo:
            CorpusReader().read(tmp_path / "nope")
        assert isinstance(excinfo.value, ConfigError)
