"""Tests for the imgup CLI."""

from typer.testing import CliRunner

from imgup.cli import main
from imgup.cli._create_app import _create_app

runner = CliRunner()


def test_version_flag(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("imgup ")


def test_help_without_command():
    result = runner.invoke(_create_app(), [])
    assert result.exit_code == 0
    assert "rewrite" in result.output


def test_invalid_display_format():
    result = runner.invoke(_create_app(), ["--display", "xml", "config", "version"])
    assert result.exit_code == 1


def test_config_version_json():
    result = runner.invoke(_create_app(), ["--display", "json", "config", "version"])
    assert result.exit_code == 0
    assert '"version"' in result.output


def test_config_show_unknown_section_fails(configured_home):
    result = runner.invoke(_create_app(), ["config", "show", "nope"])
    assert result.exit_code == 1
    assert "Unknown section" in result.output


def test_rewrite_files(configured_home, write_vault, vault_dir):
    write_vault({"n.md": "![](a.png)\n", "a.png": b"a"})
    result = runner.invoke(_create_app(), ["--display", "json", "rewrite", "files", str(vault_dir / "a.png")])
    assert result.exit_code == 0, result.output
    assert (vault_dir / "n.md").read_text() == "![image](https://img.example.com/a.png)\n"
    assert '"affected_document_count": 1' in result.output


def test_rewrite_paste_reads_stdin(write_config):
    write_config(rewrite={"work_on_network": True})
    result = runner.invoke(_create_app(), ["rewrite", "paste"], input="![a](https://web.org/a.png)")
    assert result.exit_code == 0
    assert "https://img.example.com/a.png" in result.output


def test_rewrite_help_lists_download():
    result = runner.invoke(_create_app(), ["rewrite", "--help"])
    assert result.exit_code == 0
    assert "download" in result.output
