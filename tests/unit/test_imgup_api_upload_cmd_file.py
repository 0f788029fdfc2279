"""Unit tests for upload cmd_file."""

import json

from imgup.api.upload.cmd_file import cmd_file


class TestCmdFile:
    def test_uploads_and_returns_embeds(self, write_config, tmp_path, run_cmd):
        write_config(rewrite={"image_size_suffix": "|100"})
        image = tmp_path / "drop.png"
        image.write_bytes(b"x")
        result = run_cmd(cmd_file, [str(image)])

        assert result.success
        assert result.output["urls"] == ["https://img.example.com/drop.png"]
        assert result.output["embeds"] == ["![drop.png|100](https://img.example.com/drop.png)"]

    def test_records_ledger(self, configured_home, tmp_path, run_cmd):
        image = tmp_path / "drop.png"
        image.write_bytes(b"x")
        run_cmd(cmd_file, [str(image)])
        (entry,) = json.loads((configured_home / "uploaded.json").read_text())
        assert entry["name"] == "drop.png"

    def test_rejects_missing_and_non_image_files(self, configured_home, tmp_path, run_cmd):
        text = tmp_path / "notes.txt"
        text.write_text("x")
        result = run_cmd(cmd_file, [str(tmp_path / "missing.png"), str(text)])
        assert not result.success
        assert len(result.output["errors"]) == 2
        assert "File not found" in result.output["errors"][0]
        assert "Not an image file" in result.output["errors"][1]
