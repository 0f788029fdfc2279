"""Unit tests for config cmd_show and cmd_version."""

from imgup.api.config.cmd_show import cmd_show
from imgup.api.config.cmd_version import cmd_version


class TestCmdShow:
    def test_lists_sections(self, configured_home, run_cmd):
        result = run_cmd(cmd_show, "")
        assert result.success
        assert result.output["content"] == {"sections": ["vault", "uploader", "rewrite", "log"]}

    def test_single_section(self, configured_home, run_cmd):
        result = run_cmd(cmd_show, "rewrite")
        assert result.success
        assert result.output["content"]["overlap_policy"] == "document"

    def test_unknown_section(self, configured_home, run_cmd):
        result = run_cmd(cmd_show, "nope")
        assert not result.success
        assert "Unknown section" in result.output["errors"][0]

    def test_invalid_config_file(self, imgup_home, run_cmd):
        (imgup_home / "config.json").write_text("{invalid json")
        result = run_cmd(cmd_show, "vault")
        assert result.success is False
        assert result.output["section"] == "vault"
        assert result.output["errors"]


def test_cmd_version(run_cmd):
    result = run_cmd(cmd_version)
    assert result.success
    assert result.output["version"]
