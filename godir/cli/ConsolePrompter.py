"""Prompter that asks questions on STDERR and reads answers from STDIN."""

import typer
from rich.console import Console

from godir.api.resolve.Prompter import Prompter


class ConsolePrompter(Prompter):
    """Line-based prompts that never touch STDOUT.

    End of input answers with an empty string; Ctrl-C aborts the command.
    """

    def __init__(self, console: Console):
        self.console = console

    def ask(self, question: str) -> str:
        try:
            answer = self.console.input(f"{question} ", markup=False)
        except EOFError:
            self.console.print()
            return ""
        except KeyboardInterrupt:
            self.console.print()
            raise typer.Abort() from None
        return answer.rstrip("\r\n")
