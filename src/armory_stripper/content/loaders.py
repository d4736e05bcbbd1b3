"""
File loaders for WTT-Armory mod content.

Handles reading JSON files as raw text (for reference scanning) and as parsed
documents (for mutation), and writing documents back with orjson.
"""

import codecs
import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List, Optional, Set, Tuple

import orjson

from .models import (
    CategoryDocument,
    ContentDirectoryError,
    ContentParseError,
    ItemId,
    JSON_PATTERN,
    excluded_folders,
)
from .tree import JsonNode, NodeKind


def _strip_bom(raw: bytes) -> bytes:
    if raw.startswith(codecs.BOM_UTF8):
        return raw[len(codecs.BOM_UTF8):]
    return raw


class ContentFileLoader:
    """Reads and writes single content files."""

    @staticmethod
    def read_text(path: Path) -> str:
        """Read a file as UTF-8 text (a leading BOM is dropped)."""
        raw = _strip_bom(path.read_bytes())
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ContentParseError(path, f"not valid UTF-8 ({e})") from e

    @staticmethod
    def parse_object(path: Path, text: str) -> CategoryDocument:
        """Parse text that must hold a JSON object at its root."""
        try:
            data = orjson.loads(text)
        except orjson.JSONDecodeError as e:
            raise ContentParseError(path, str(e)) from e

        if not isinstance(data, dict):
            raise ContentParseError(
                path, f"root is a JSON {type(data).__name__}, expected an object"
            )
        return data

    @classmethod
    def read_document(cls, path: Path) -> CategoryDocument:
        """Read and parse a JSON object file."""
        return cls.parse_object(path, cls.read_text(path))

    @staticmethod
    def write_document(path: Path, document: Any, atomic: bool = True) -> None:
        """Rewrite a file with indented JSON, replacing its previous content.

        With ``atomic`` the data goes to a temporary file next to the target
        which then replaces it, so a crash never leaves a truncated file.
        """
        payload = orjson.dumps(document, option=orjson.OPT_INDENT_2) + b"\n"

        if not atomic:
            path.write_bytes(payload)
            return

        fd, temp_name = tempfile.mkstemp(dir=str(path.parent), prefix=path.name + ".tmp.")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
            if path.exists():
                shutil.copymode(path, temp_name)
            os.replace(temp_name, path)
        except BaseException:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise


def read_category_file(path: Path) -> CategoryDocument:
    """Parse a category file: root object mapping ItemId to definition."""
    return ContentFileLoader.read_document(path)


def extract_item_ids(document: CategoryDocument) -> List[ItemId]:
    """Return the top-level keys of a category document."""
    return list(document.keys())


@dataclass
class Corpus:
    """Concatenated raw content of a set of files."""

    files: List[Tuple[Path, str]] = field(default_factory=list)
    _text: Optional[str] = field(default=None, init=False, repr=False)
    _folded: Optional[str] = field(default=None, init=False, repr=False)
    _strings: Optional[Set[str]] = field(default=None, init=False, repr=False)

    @property
    def paths(self) -> List[Path]:
        return [path for path, _ in self.files]

    @property
    def text(self) -> str:
        """All file contents joined by newlines."""
        if self._text is None:
            self._text = "\n".join(content for _, content in self.files)
        return self._text

    @property
    def folded_text(self) -> str:
        """Lower-cased text, computed once for repeated lookups."""
        if self._folded is None:
            self._folded = self.text.lower()
        return self._folded

    @property
    def string_values(self) -> Set[str]:
        """Lower-cased set of every JSON string value in the corpus.

        Files are parsed on first access. Any JSON root is accepted here since
        only values are collected.
        """
        if self._strings is None:
            strings: Set[str] = set()
            for path, content in self.files:
                try:
                    data = orjson.loads(content)
                except orjson.JSONDecodeError as e:
                    raise ContentParseError(path, str(e)) from e
                root = JsonNode.root(data)
                if root.kind is NodeKind.STRING:
                    strings.add(data.lower())
                for node in root.descendants():
                    if node.kind is NodeKind.STRING:
                        strings.add(node.value.lower())
            self._strings = strings
        return self._strings

    def __len__(self) -> int:
        return len(self.files)


class CorpusReader:
    """Collects raw content of JSON files into a scannable Corpus."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @staticmethod
    def is_excluded(path: Path, excluded: Iterable[Path]) -> bool:
        """Whether the file's folder contains any excluded folder path, ignoring case."""
        folder = str(path.parent).lower()
        return any(str(ex).lower() in folder for ex in excluded)

    def list_files(
        self,
        root: Path,
        pattern: str = JSON_PATTERN,
        excluded: Iterable[Path] = (),
        recursive: bool = True,
        skip_names: Iterable[str] = (),
    ) -> List[Path]:
        """List matching files in sorted order, applying folder and name exclusions."""
        if not root.is_dir():
            raise ContentDirectoryError(root)

        excluded = list(excluded)
        skipped = {name.lower() for name in skip_names}
        candidates = root.rglob(pattern) if recursive else root.glob(pattern)

        files: List[Path] = []
        for path in sorted(candidates):
            if not path.is_file():
                continue
            if path.name.lower() in skipped:
                continue
            if excluded and self.is_excluded(path, excluded):
                continue
            files.append(path)
        return files

    def read(
        self,
        root: Path,
        pattern: str = JSON_PATTERN,
        excluded: Iterable[Path] = (),
        recursive: bool = True,
        skip_names: Iterable[str] = (),
    ) -> Corpus:
        """Read every matching file into one Corpus."""
        files = self.list_files(root, pattern, excluded, recursive, skip_names)
        corpus = Corpus([(path, ContentFileLoader.read_text(path)) for path in files])
        self.logger.debug(f"Read {len(corpus)} files under {root} ({pattern})")
        return corpus

    def read_other_content(self, mod_db_path: Path) -> Corpus:
        """Everything under the mod database except item, image and locale folders."""
        return self.read(mod_db_path, excluded=excluded_folders(mod_db_path))
