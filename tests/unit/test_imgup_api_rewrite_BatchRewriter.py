"""Tests for imgup.api.rewrite.BatchRewriter."""

import pytest

from imgup.api.ledger.UploadLedger import UploadLedger
from imgup.api.rewrite.BatchRewriter import BatchRewriter
from imgup.api.rewrite.BatchStage import BatchStage
from imgup.api.rewrite.RewriteConfig import RewriteConfig
from imgup.api.upload.UploadResult import UploadResult
from imgup.api.vault.Vault import Vault
from imgup.api.vault.VaultConfig import VaultConfig


class FakeUploader:
    """Returns ``https://host/<name>`` per image unless told otherwise."""

    def __init__(self, result: UploadResult | None = None):
        self.result = result
        self.calls: list[list] = []

    def upload(self, images):
        self.calls.append(list(images))
        if self.result is not None:
            return self.result
        return UploadResult(success=True, result=[f"https://host/{image.name}" for image in images])


@pytest.fixture
def vault(vault_dir):
    with Vault(VaultConfig(type="obsidian", base_dir=str(vault_dir))) as v:
        yield v


def _run(rewriter, targets):
    return list(rewriter.run(targets))


def _read(vault_dir, rel):
    return (vault_dir / rel).read_text(encoding="utf-8")


class TestScenarios:
    def test_single_reference_rewritten(self, write_vault, vault, vault_dir):
        write_vault({"doc.md": "intro\n\n![a](./img/x.png)\n\noutro\n", "img/x.png": b"x"})
        rewriter = BatchRewriter(vault, FakeUploader(), RewriteConfig())
        _run(rewriter, ["img/x.png"])

        assert _read(vault_dir, "doc.md") == "intro\n\n![a](https://host/x.png)\n\noutro\n"
        assert rewriter.outcome.success
        assert rewriter.outcome.affected_document_count == 1
        assert rewriter.outcome.aborted_reason is None
        assert rewriter.stage == BatchStage.DONE

    def test_adjacent_references_rewritten_in_one_pass(self, write_vault, vault, vault_dir):
        write_vault({"doc.md": "![a](a.png)![[b.png]]\n", "a.png": b"a", "b.png": b"b"})
        rewriter = BatchRewriter(vault, FakeUploader(), RewriteConfig())
        _run(rewriter, ["a.png", "b.png"])

        assert _read(vault_dir, "doc.md") == "![a](https://host/a.png)![b.png](https://host/b.png)\n"
        assert rewriter.outcome.affected_document_count == 1

    def test_overlapping_matches_exclude_document(self, write_vault, vault, vault_dir):
        nested = "![see ![[a.png]]](a.png)\n"
        write_vault({"nested.md": nested, "plain.md": "![](a.png)\n", "a.png": b"a"})
        rewriter = BatchRewriter(vault, FakeUploader(), RewriteConfig())
        _run(rewriter, ["a.png"])

        assert _read(vault_dir, "nested.md") == nested
        assert _read(vault_dir, "plain.md") == "![image](https://host/a.png)\n"
        assert rewriter.outcome.conflicts == ["nested.md"]
        assert rewriter.outcome.success
        assert any("nested.md" in w for w in rewriter.outcome.warnings)

    def test_upload_count_mismatch_aborts_without_writes(self, write_vault, vault, vault_dir):
        original = "![](a.png) ![](b.png) ![](c.png)\n"
        write_vault({"doc.md": original, "a.png": b"a", "b.png": b"b", "c.png": b"c"})
        uploader = FakeUploader(UploadResult(success=True, result=["https://host/1", "https://host/2"]))
        rewriter = BatchRewriter(vault, uploader, RewriteConfig())
        messages = [m for _, m in _run(rewriter, ["a.png", "b.png", "c.png"])]

        assert _read(vault_dir, "doc.md") == original
        assert not rewriter.outcome.success
        assert rewriter.stage == BatchStage.ABORTED
        assert "2 URL(s) for 3 file(s)" in rewriter.outcome.aborted_reason
        assert any("2 URL(s) for 3 file(s)" in m for m in messages)
        assert rewriter.outcome.url_map == {}

    def test_unreferenced_target_still_uploaded(self, write_vault, vault, vault_dir):
        write_vault({"doc.md": "![](a.png)\n", "a.png": b"a", "lonely.png": b"l"})
        uploader = FakeUploader()
        rewriter = BatchRewriter(vault, uploader, RewriteConfig())
        _run(rewriter, ["a.png", "lonely.png"])

        assert [image.path for image in uploader.calls[0]] == ["a.png", "lonely.png"]
        assert rewriter.outcome.url_map["lonely.png"] == "https://host/lonely.png"
        assert rewriter.outcome.affected_document_count == 1


class TestFailuresAndPolicies:
    def test_transport_failure_aborts_before_mutation(self, write_vault, vault, vault_dir):
        write_vault({"doc.md": "![](a.png)\n", "a.png": b"a"})
        uploader = FakeUploader(UploadResult(success=False, msg="server down"))
        rewriter = BatchRewriter(vault, uploader, RewriteConfig())
        _run(rewriter, ["a.png"])

        assert _read(vault_dir, "doc.md") == "![](a.png)\n"
        assert rewriter.outcome.aborted_reason == "Upload error: server down"
        assert rewriter.log.events[-1].stage == BatchStage.ABORTED

    def test_batch_overlap_policy_aborts_before_upload(self, write_vault, vault, vault_dir):
        write_vault({"nested.md": "![x ![[a.png]]](a.png)\n", "plain.md": "![](a.png)\n", "a.png": b"a"})
        uploader = FakeUploader()
        rewriter = BatchRewriter(vault, uploader, RewriteConfig(overlap_policy="batch"))
        _run(rewriter, ["a.png"])

        assert uploader.calls == []
        assert _read(vault_dir, "plain.md") == "![](a.png)\n"
        assert "nested.md" in rewriter.outcome.aborted_reason

    def test_non_image_targets_dropped(self, write_vault, vault):
        write_vault({"doc.md": "x", "a.png": b"a"})
        uploader = FakeUploader()
        rewriter = BatchRewriter(vault, uploader, RewriteConfig())
        _run(rewriter, ["doc.md", "a.png", "a.png"])

        assert rewriter.outcome.targets == ["a.png"]
        assert any("doc.md is not an image file" in w for w in rewriter.outcome.warnings)

    def test_no_targets_is_a_successful_no_op(self, vault):
        uploader = FakeUploader()
        rewriter = BatchRewriter(vault, uploader, RewriteConfig())
        assert _run(rewriter, []) == [(1.0, "No image files to upload")]
        assert rewriter.outcome.success
        assert uploader.calls == []

    def test_stale_document_skipped(self, write_vault, vault, vault_dir):
        write_vault({"doc.md": "![](a.png)\n", "a.png": b"a"})

        class EditingUploader(FakeUploader):
            def upload(self, images):
                (vault_dir / "doc.md").write_text("edited ![](a.png)\n", encoding="utf-8")
                return super().upload(images)

        rewriter = BatchRewriter(vault, EditingUploader(), RewriteConfig())
        _run(rewriter, ["a.png"])

        assert _read(vault_dir, "doc.md") == "edited ![](a.png)\n"
        assert rewriter.outcome.skipped == ["doc.md"]
        assert rewriter.outcome.affected_document_count == 0

    def test_naming_policy_applied(self, write_vault, vault, vault_dir):
        write_vault({"doc.md": "![cat](a.png)\n", "a.png": b"a"})
        config = RewriteConfig(image_size_suffix="|300")
        _run(BatchRewriter(vault, FakeUploader(), config), ["a.png"])
        assert _read(vault_dir, "doc.md") == "![cat|300](https://host/a.png)\n"

    def test_code_block_allow_list(self, write_vault, vault, vault_dir):
        content = "```\n![](a.png)\n```\n\n```ad-quote\n![](a.png)\n```\n"
        write_vault({"doc.md": content, "a.png": b"a"})
        _run(BatchRewriter(vault, FakeUploader(), RewriteConfig()), ["a.png"])
        assert _read(vault_dir, "doc.md") == content.replace(
            "```ad-quote\n![](a.png)", "```ad-quote\n![image](https://host/a.png)"
        )

    def test_progress_stream_and_history(self, write_vault, vault):
        write_vault({"doc.md": "![](a.png)\n", "a.png": b"a"})
        rewriter = BatchRewriter(vault, FakeUploader(), RewriteConfig())
        progress = _run(rewriter, ["a.png"])

        fractions = [fraction for fraction, _ in progress]
        assert fractions == sorted(fractions)
        assert progress[-1] == (1.0, "Rewrote 1 note(s)")
        assert "Finding relevant notes for a.png (1/1)..." in [m for _, m in progress]
        assert rewriter.log.messages() == [
            "Resolving links in vault (1/1)... Done",
            "Finding relevant notes for 1 image file(s)... Done",
            "Uploading 1 image file(s), it may take a while... Done",
            "Replacing links in 1 file(s)... Done",
            "Rewrote 1 note(s)",
        ]


    def test_link_graph_marks_precede_span_search(self, write_vault, vault):
        write_vault({"a.md": "![](x.png)\n", "b.md": "plain\n", "x.png": b"x"})
        messages = [m for _, m in _run(BatchRewriter(vault, FakeUploader(), RewriteConfig()), ["x.png"])]

        marks = [m for m in messages if m.startswith("Resolving links in vault (")]
        assert marks == ["Resolving links in vault (1/2)...", "Resolving links in vault (2/2)..."]
        first_search = next(i for i, m in enumerate(messages) if m.startswith("Finding relevant notes"))
        assert messages.index(marks[-1]) < first_search


class TestDeletion:
    def test_sources_trashed_and_ledger_updated(self, write_vault, vault, vault_dir, tmp_path):
        write_vault({"doc.md": "![](a.png)\n", "a.png": b"a"})
        ledger = UploadLedger(tmp_path / "uploaded.json")
        rewriter = BatchRewriter(vault, FakeUploader(), RewriteConfig(delete_source=True), ledger=ledger)
        _run(rewriter, ["a.png"])

        assert rewriter.outcome.deleted == ["a.png"]
        assert not (vault_dir / "a.png").exists()
        assert (vault_dir / ".trash" / "a.png").exists()
        (entry,) = UploadLedger(tmp_path / "uploaded.json").entries
        assert entry.img_url == "https://host/a.png"
        assert entry.path is None

    def test_source_kept_while_excluded_note_links_it(self, write_vault, vault, vault_dir):
        write_vault({"nested.md": "![x ![[a.png]]](a.png)\n", "a.png": b"a"})
        rewriter = BatchRewriter(vault, FakeUploader(), RewriteConfig(delete_source=True))
        _run(rewriter, ["a.png"])

        assert (vault_dir / "a.png").exists()
        assert rewriter.outcome.deleted == []
        assert any("Kept a.png" in w for w in rewriter.outcome.warnings)

    def test_source_kept_when_graph_link_yields_no_span(self, write_vault, vault, vault_dir):
        write_vault({"notes/n.md": "![](a.png)\n", "a.png": b"a"})
        rewriter = BatchRewriter(vault, FakeUploader(), RewriteConfig(delete_source=True))
        _run(rewriter, ["a.png"])

        assert _read(vault_dir, "notes/n.md") == "![](a.png)\n"
        assert (vault_dir / "a.png").exists()
        assert rewriter.outcome.deleted == []
        assert "Kept a.png: still linked from notes/n.md" in rewriter.outcome.warnings

    def test_source_kept_when_only_plain_link_points_at_it(self, write_vault, vault, vault_dir):
        write_vault({"doc.md": "![](a.png)\n", "a.png": b"a", "other.md": "[see](a.png)\n"})
        rewriter = BatchRewriter(vault, FakeUploader(), RewriteConfig(delete_source=True))
        _run(rewriter, ["a.png"])

        assert _read(vault_dir, "other.md") == "[see](a.png)\n"
        assert (vault_dir / "a.png").exists()
        assert any(w.startswith("Kept a.png") and "other.md" in w for w in rewriter.outcome.warnings)

    def test_parenthesised_file_name_rewritten_then_trashed(self, write_vault, vault, vault_dir):
        write_vault({"doc.md": "![a](shot(1).png)\n", "shot(1).png": b"s"})
        rewriter = BatchRewriter(vault, FakeUploader(), RewriteConfig(delete_source=True))
        _run(rewriter, ["shot(1).png"])

        assert _read(vault_dir, "doc.md") == "![a](https://host/shot(1).png)\n"
        assert rewriter.outcome.deleted == ["shot(1).png"]
        assert not (vault_dir / "shot(1).png").exists()


class TestWriteFailure:
    def test_failed_write_keeps_earlier_notes_and_skips_deletion(self, write_vault, vault, vault_dir, monkeypatch):
        write_vault({"a.md": "![](x.png)\n", "b.md": "![](x.png)\n", "x.png": b"x"})
        written: list[str] = []
        original_write = vault.write_document

        def failing_write(doc_id, text):
            written.append(doc_id)
            if len(written) == 2:
                raise OSError("disk full")
            original_write(doc_id, text)

        monkeypatch.setattr(vault, "write_document", failing_write)
        rewriter = BatchRewriter(vault, FakeUploader(), RewriteConfig(delete_source=True))
        _run(rewriter, ["x.png"])

        first, second = written
        assert _read(vault_dir, first) == "![image](https://host/x.png)\n"
        assert _read(vault_dir, second) == "![](x.png)\n"
        assert rewriter.stage == BatchStage.ABORTED
        assert not rewriter.outcome.success
        assert rewriter.outcome.affected_document_count == 1
        assert "1 note(s) already rewritten" in rewriter.outcome.aborted_reason
        assert rewriter.outcome.deleted == []
        assert (vault_dir / "x.png").exists()
