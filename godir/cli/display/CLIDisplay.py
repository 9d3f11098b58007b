"""CLI display implementation using Rich library."""

import json
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax

from godir.api.display.Display import Display


class CLIDisplay(Display):
    """Rich display: messages on STDERR, command output on STDOUT."""

    def __init__(self):
        # Main console outputs to stdout (for data output)
        self.console = Console(file=sys.stdout, soft_wrap=True)
        # stderr console for status messages, prompts and progress
        self.stderr_console = Console(file=sys.stderr, soft_wrap=True, highlight=False)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        """Display a status message in blue (to STDERR per CLI guidelines)."""
        self.stderr_console.print(f"[blue]i[/blue] {escape(message)}")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        """Display a success message in green (to STDERR per CLI guidelines)."""
        self.stderr_console.print(f"[green]✓[/green] {escape(message)}")

    def error(self, message: str, **kwargs) -> None:
        """Display an error message in red (to STDERR per CLI guidelines)."""
        self.stderr_console.print(f"[red]✗[/red] {escape(message)}")
        details = kwargs.get("details", "")
        if details:
            self.stderr_console.print(f"  [dim]{escape(details)}[/dim]")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        """Display a warning message in yellow (to STDERR per CLI guidelines)."""
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def info(self, message: str, **kwargs) -> None:
        """Display an informational message (to STDERR per CLI guidelines).

        Pass ``markup=True`` for messages that carry Rich markup.
        """
        if kwargs.get("markup", False):
            self.stderr_console.print(message)
        else:
            self.stderr_console.print(message, markup=False)

    def spinner_start(self, description: str = "", **kwargs) -> Any:  # noqa: ARG002
        """Start a spinner on STDERR."""
        status = self.stderr_console.status(escape(description), spinner="dots")
        status.start()
        return status

    def spinner_update(self, handle: Any, description: str, **kwargs) -> None:  # noqa: ARG002
        """Update spinner description."""
        if handle:
            handle.update(escape(description))

    def spinner_finish(self, handle: Any, message: str = "", **kwargs) -> None:  # noqa: ARG002
        """Stop spinner."""
        if handle:
            handle.stop()
        if message:
            self.info(message)

    def json_output(self, data: Any, **kwargs) -> None:
        """Output JSON with syntax highlighting in terminal, valid when redirected."""
        indent = kwargs.get("indent", 4)
        json_str = json.dumps(data, indent=indent, ensure_ascii=False)

        # Only use syntax highlighting if stdout is a TTY (interactive terminal)
        if sys.stdout.isatty():
            syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)
            self.console.print(syntax)
        else:
            print(json_str, flush=True)
