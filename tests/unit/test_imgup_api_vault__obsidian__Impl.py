"""Tests for the Obsidian vault backend."""

import pytest

from imgup.api.vault._obsidian._Impl import _Impl


@pytest.fixture
def backend(write_vault):
    vault = write_vault(
        {
            "note.md": "![](a.png) and ![[b.png]] and [[Other]] ![](https://x.org/y.png) ![](a.png)\n",
            "Other.md": "no links\n",
            "a.png": b"png",
            "assets/b.png": b"png",
            ".obsidian/app.json": "{}",
            ".trash/old.png": b"png",
        }
    )
    return _Impl(vault)


class TestObsidianImpl:
    def test_iter_files_skips_dot_folders(self, backend):
        assert list(backend.iter_files()) == ["Other.md", "a.png", "assets/b.png", "note.md"]
        assert list(backend.iter_notes()) == ["Other.md", "note.md"]

    def test_forward_link_graph_counts_resolved_links(self, backend):
        graph = backend.get_forward_link_graph()
        assert graph["note.md"] == {"a.png": 2, "assets/b.png": 1, "Other.md": 1}
        assert graph["Other.md"] == {}

    def test_read_write_preserves_line_endings(self, backend):
        backend.write_document("new.md", "a\r\nb\n")
        assert backend.read_document("new.md") == "a\r\nb\n"
        assert backend.resolve_link("new", "note.md") == "new.md"

    def test_get_sections(self, backend):
        sections = backend.get_sections("note.md")
        assert [s.type for s in sections] == ["paragraph"]

    def test_trash_moves_file_with_unique_name(self, backend, vault_dir):
        (vault_dir / ".trash" / "a.png").write_bytes(b"old")
        backend.trash("a.png")
        assert not (vault_dir / "a.png").exists()
        assert (vault_dir / ".trash" / "a 1.png").read_bytes() == b"png"
        assert backend.resolve_link("a.png", "note.md") is None

    def test_write_file_creates_folders_and_is_resolvable(self, backend, vault_dir):
        assert backend.resolve_link("c.png", "note.md") is None
        backend.write_file("downloads/new/c.png", b"bytes")
        assert (vault_dir / "downloads" / "new" / "c.png").read_bytes() == b"bytes"
        assert backend.resolve_link("c.png", "note.md") == "downloads/new/c.png"
