"""Unit tests for rewrite cmd_note."""

import json

from imgup.api.rewrite.cmd_note import cmd_note


class TestCmdNote:
    def test_uploads_all_images_in_note(self, configured_home, write_vault, vault_dir, run_cmd):
        write_vault(
            {
                "notes/n.md": "![one](./a.png)\n![[b.png|200]]\n![net](https://web.org/c.png)\n![gone](nope.png)\n",
                "notes/a.png": b"a",
                "assets/b.png": b"b",
            }
        )
        result = run_cmd(cmd_note, str(vault_dir / "notes" / "n.md"))

        assert result.success, result.output
        assert result.output["note"] == "notes/n.md"
        assert [image["path"] for image in result.output["images"]] == ["notes/a.png", "assets/b.png"]
        assert (vault_dir / "notes" / "n.md").read_text() == (
            "![one](https://img.example.com/a.png)\n"
            "![b|200](https://img.example.com/b.png)\n"
            "![net](https://web.org/c.png)\n"
            "![gone](nope.png)\n"
        )
        ledger = json.loads((configured_home / "uploaded.json").read_text())
        assert [entry["path"] for entry in ledger] == ["notes/a.png", "assets/b.png"]

    def test_only_restricts_to_one_file(self, configured_home, write_vault, vault_dir, run_cmd):
        write_vault({"n.md": "![](a.png) ![](b.png)", "a.png": b"a", "b.png": b"b"})
        result = run_cmd(cmd_note, str(vault_dir / "n.md"), only="b.png")
        assert result.success
        assert (vault_dir / "n.md").read_text() == "![](a.png) ![](https://img.example.com/b.png)"

    def test_network_images_when_enabled(self, write_config, write_vault, vault_dir, run_cmd):
        write_config(rewrite={"work_on_network": True, "network_black_domains": "blocked.org"})
        write_vault({"n.md": "![a](https://web.org/a.png) ![b](https://cdn.blocked.org/b.png)"})
        result = run_cmd(cmd_note, str(vault_dir / "n.md"))
        assert result.success
        assert (vault_dir / "n.md").read_text() == (
            "![a](https://img.example.com/a.png) ![b](https://cdn.blocked.org/b.png)"
        )

    def test_delete_source(self, write_config, write_vault, vault_dir, run_cmd):
        write_config(rewrite={"delete_source": True, "image_desc": "none"})
        write_vault({"n.md": "![x](a.png)", "a.png": b"a"})
        result = run_cmd(cmd_note, str(vault_dir / "n.md"))
        assert result.success
        assert result.output["deleted"] == ["a.png"]
        assert (vault_dir / "n.md").read_text() == "![](https://img.example.com/a.png)"
        assert not (vault_dir / "a.png").exists()

    def test_no_images(self, configured_home, write_vault, vault_dir, run_cmd):
        write_vault({"n.md": "plain text"})
        result = run_cmd(cmd_note, str(vault_dir / "n.md"))
        assert not result.success
        assert result.output["errors"] == ["Can not find image file"]

    def test_note_outside_vault(self, configured_home, tmp_path, run_cmd):
        outside = tmp_path / "n.md"
        outside.write_text("x")
        result = run_cmd(cmd_note, str(outside))
        assert not result.success
        assert "is not in the vault" in result.output["errors"][0]
