"""CLI - main entry point."""

import importlib
import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from godir.cli._create_app import _create_app

    # Typer raises the exception classes of the click it runs on, bundled or not
    click_exceptions = importlib.import_module(typer.BadParameter.__module__)

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-V" in argv:
        from godir.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(result.output["full_version"])
        return 0 if result.success else 1

    app = _create_app()
    try:
        rv = app(argv, prog_name="godir", standalone_mode=False)
    except click_exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except typer.Abort:
        typer.echo("Aborted!", err=True)
        return 130
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return rv if isinstance(rv, int) else 0
