"""CLI - main entry point."""

import sys


def _log_level() -> str:
    from imgup.api.config.ImgupConfig import ImgupConfig

    try:
        return ImgupConfig.load().log.level
    except ValueError:
        return "INFO"


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from imgup.cli._create_app import _create_app
    from imgup.utils.configure_logging import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from imgup.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(f"imgup {result.output.get('version', 'unknown')}")
        return 0 if result.success else 1

    try:
        configure_logging(level=_log_level())
    except OSError as e:
        typer.echo(f"Warning: file logging disabled: {e}", err=True)

    app = _create_app()
    try:
        app(argv, standalone_mode=False)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 1
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.Abort:
        return 1
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
