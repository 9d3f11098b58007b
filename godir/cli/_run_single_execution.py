"""Run command once and display result using 4-stage pattern."""

from collections.abc import Callable
from datetime import datetime
from typing import Any

import typer

from godir.api.display.Display import Display


def _run_single_execution(
    func: Callable,
    args: tuple,
    kwargs: dict,
    display: Display,
    result_printer: Callable[[dict], None] | None = None,
) -> None:
    """Run command once and display result.

    Stages 1-3 (announce, progress, result) go to STDERR; stage 4 (output)
    goes to STDOUT.

    Raises:
        typer.Exit: Always, with 0 on success and 1 on failure
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress - progress_callback is a generator of (progress_percent, message)
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})", markup=True)

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)
        for error in result.output.get("errors", []):
            display.error(error)

    # Stage 4: Output
    if result.success:
        output: Any = result.output
        if result_printer:
            result_printer(output)
        else:
            display.json_output(output)

    raise typer.Exit(0 if result.success else 1)
