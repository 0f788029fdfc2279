"""Ledger Typer app factory."""

import typer

from imgup.api.ledger.cmd_delete import cmd_delete
from imgup.api.ledger.cmd_list import cmd_list
from imgup.cli._handle_stage_result import _handle_stage_result


def ledger() -> typer.Typer:
    """Create and configure the ledger Typer app."""
    app = typer.Typer(
        name="ledger",
        help="Uploaded image records",
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

    @app.command(name="list")
    def list_cmd() -> None:
        """List uploaded images."""
        _handle_stage_result(cmd_list)()

    @app.command(name="delete")
    def delete_cmd(
        img_url: str = typer.Argument(..., help="Uploaded image URL"),
    ) -> None:
        """Delete an uploaded image from the image host."""
        _handle_stage_result(cmd_delete)(img_url)

    return app
