"""Upload Typer app factory."""

import typer

from imgup.api.upload.cmd_file import cmd_file
from imgup.cli._handle_stage_result import _handle_stage_result


def upload() -> typer.Typer:
    """Create and configure the upload Typer app."""
    app = typer.Typer(
        name="upload",
        help="Upload images without touching any note",
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

    @app.command(name="file")
    def file_cmd(
        paths: list[str] = typer.Argument(..., help="Image files to upload"),
    ) -> None:
        """Upload image files and print markdown embeds."""
        _handle_stage_result(cmd_file)(paths)

    return app
