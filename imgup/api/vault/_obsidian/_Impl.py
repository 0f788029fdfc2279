"""
Obsidian vault integration for imgup.

Implements _AbstractBackend for a vault stored as a plain directory tree.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterator
from pathlib import Path
from urllib.parse import unquote

from ...link.parse_inline_refs import parse_inline_refs
from ...link.parse_wiki_refs import parse_wiki_refs
from ...link.split_linktext import split_linktext
from .._AbstractBackend import _AbstractBackend
from ..Section import Section
from ._LinkResolver import _LinkResolver
from ._split_sections import _split_sections

logger = logging.getLogger(__name__)

TRASH_DIRNAME = ".trash"
CONFIG_DIRNAME = ".obsidian"


class _Impl(_AbstractBackend):
    """Obsidian vault implementation for image link maintenance."""

    def __init__(self, vault_path: Path):
        self._vault_path = Path(vault_path)
        self._resolver: _LinkResolver | None = None

    @property
    def vault_path(self) -> Path:
        return self._vault_path

    def _abspath(self, doc_id: str) -> Path:
        return self._vault_path / doc_id

    def iter_files(self) -> Iterator[str]:
        """Iterate all files in the vault (excludes .obsidian/, .trash/ and other dot folders)."""
        for path in sorted(self._vault_path.rglob("*")):
            rel = path.relative_to(self._vault_path)
            if any(part.startswith(".") for part in rel.parts[:-1]):
                continue
            if path.is_file():
                yield rel.as_posix()

    def iter_notes(self) -> Iterator[str]:
        for doc_id in self.iter_files():
            if doc_id.endswith(".md"):
                yield doc_id

    def read_document(self, doc_id: str) -> str:
        with self._abspath(doc_id).open(encoding="utf-8", newline="") as fh:
            return fh.read()

    def write_document(self, doc_id: str, text: str) -> None:
        path = self._abspath(doc_id)
        existed = path.exists()
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        if not existed:
            self._resolver = None

    def write_file(self, file_id: str, data: bytes) -> None:
        path = self._abspath(file_id)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        self._resolver = None

    def get_sections(self, doc_id: str) -> list[Section]:
        return _split_sections(self.read_document(doc_id))

    def _link_resolver(self) -> _LinkResolver:
        if self._resolver is None:
            self._resolver = _LinkResolver(list(self.iter_files()))
        return self._resolver

    def resolve_link(self, linkpath: str, from_doc: str) -> str | None:
        return self._link_resolver().resolve(linkpath, from_doc)

    def get_forward_link_graph(self) -> dict[str, dict[str, int]]:
        """Count resolved links and embeds of every note, keyed by note then target."""
        graph: dict[str, dict[str, int]] = {}
        for doc_id in self.iter_notes():
            try:
                text = self.read_document(doc_id)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Skipping unreadable note %s: %s", doc_id, exc)
                continue
            links: dict[str, int] = {}
            for match in parse_inline_refs(text, embeds_only=False):
                if match.is_network:
                    continue
                target = self.resolve_link(unquote(match.target), doc_id)
                if target:
                    links[target] = links.get(target, 0) + 1
            for match in parse_wiki_refs(text, embeds_only=False):
                path, _subpath = split_linktext(match.target)
                target = self.resolve_link(path, doc_id)
                if target:
                    links[target] = links.get(target, 0) + 1
            graph[doc_id] = links
        return graph

    def trash(self, doc_id: str) -> None:
        """Move a file into the vault's .trash folder, keeping a unique name."""
        source = self._abspath(doc_id)
        trash_dir = self._vault_path / TRASH_DIRNAME
        trash_dir.mkdir(exist_ok=True)
        destination = trash_dir / source.name
        counter = 1
        while destination.exists():
            destination = trash_dir / f"{source.stem} {counter}{source.suffix}"
            counter += 1
        shutil.move(str(source), str(destination))
        self._resolver = None
        logger.info("Moved %s to %s", doc_id, destination)
