"""Rewrite Typer app factory."""

import sys

import typer

from imgup.api.rewrite.cmd_download import cmd_download
from imgup.api.rewrite.cmd_files import cmd_files
from imgup.api.rewrite.cmd_note import cmd_note
from imgup.api.rewrite.cmd_paste import cmd_paste
from imgup.cli._handle_stage_result import _handle_stage_result


def rewrite() -> typer.Typer:
    """Create and configure the rewrite Typer app."""
    app = typer.Typer(
        name="rewrite",
        help="Upload images and rewrite the links that point at them",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="files")
    def files_cmd(
        paths: list[str] = typer.Argument(..., help="Image files in the vault"),
    ) -> None:
        """Upload image files and rewrite every note that embeds them."""
        _handle_stage_result(cmd_files)(paths)

    @app.command(name="note")
    def note_cmd(
        note: str = typer.Argument(..., help="Note in the vault"),
        only: str | None = typer.Option(None, "--only", help="Only upload the image with this file name"),
    ) -> None:
        """Upload all images embedded in a note."""
        _handle_stage_result(cmd_note)(note, only=only)

    @app.command(name="download")
    def download_cmd(
        note: str = typer.Argument(..., help="Note in the vault"),
    ) -> None:
        """Download the network images embedded in a note into the vault."""
        _handle_stage_result(cmd_download)(note)

    @app.command(name="paste")
    def paste_cmd(
        text: str = typer.Argument("-", help="Markdown text, or '-' to read stdin"),
    ) -> None:
        """Re-upload network images in a piece of markdown."""
        if text == "-":
            text = sys.stdin.read()
        _handle_stage_result(cmd_paste)(text)

    return app
