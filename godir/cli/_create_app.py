"""Create the godir Typer CLI app."""

from pathlib import Path
from typing import Optional

import typer

from godir.api.config.cmd_list import cmd_list
from godir.api.config.get_config_path import get_config_path
from godir.api.errors import GodirError
from godir.api.platform.detect_platform_policy import detect_platform_policy
from godir.api.resolve.Resolver import Resolver
from godir.constants import CONFIG_FILENAME, GODIR_HOME_DISPLAY
from godir.utils.get_logger import get_logger
from godir.utils.normalize_path import normalize_path

from ._run_single_execution import _run_single_execution
from .ConsolePrompter import ConsolePrompter
from .display.CLIDisplay import CLIDisplay

_EPILOG = f"""
godir keeps a list of known directories in {GODIR_HOME_DISPLAY}/{CONFIG_FILENAME}.

Examples:

    godir .             # Add current directory

    godir dev           # Match any directory containing 'dev'

    godir ^/Users       # Match directories starting with '/Users'

    godir project$      # Match directories ending with 'project'

Shell integration:  cd "$(godir dev)"
"""


def _create_app() -> typer.Typer:
    """Create and configure the godir Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        add_completion=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )

    @app.command(
        help="A fuzzy directory navigation tool. Prints the matching directory on stdout.",
        epilog=_EPILOG,
    )
    def godir(
        pattern: Optional[str] = typer.Argument(None, help="Regular expression matched against known directories"),
        list_config: bool = typer.Option(False, "--list", "-l", help="Print the directory list and exclusions"),
        ignore_case: bool = typer.Option(False, "--ignore-case", "-i", help="Match without regard to case"),
        case_sensitive: bool = typer.Option(False, "--case-sensitive", help="Match case exactly"),
        scan_root: Optional[Path] = typer.Option(None, "--scan-root", help="Start full scans here instead of /"),
        follow_symlinks: bool = typer.Option(False, "--follow-symlinks", help="Descend into symlinked directories"),
    ) -> None:
        display = CLIDisplay()

        if list_config:
            _run_single_execution(cmd_list, (), {}, display, result_printer=lambda out: display.json_output(out["content"]))

        if pattern is None:
            display.info("Usage: godir <pattern>")
            display.info("Try 'godir --help' for more information.")
            return

        if ignore_case and case_sensitive:
            raise typer.BadParameter("--ignore-case and --case-sensitive are mutually exclusive")
        case_override = True if ignore_case else (False if case_sensitive else None)
        policy = detect_platform_policy().with_case_insensitive(case_override)
        resolver = Resolver(
            get_config_path(),
            ConsolePrompter(display.stderr_console),
            display,
            policy,
            scan_root=normalize_path(scan_root),
            follow_symlinks=follow_symlinks,
        )
        try:
            directory = resolver.resolve(pattern)
        except GodirError as e:
            get_logger("cli").error("%s", e)
            display.error(str(e))
            raise typer.Exit(1) from e

        if directory is not None:
            typer.echo(directory)

    return app
