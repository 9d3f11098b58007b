"""Unit test fixtures.

Configuration helpers are in tests/conftest.py. This file holds the fakes
used to drive the resolver without a terminal.
"""

from pathlib import Path
from typing import Any

import pytest

from godir.api.display.Display import Display
from godir.api.platform.PlatformPolicy import PlatformPolicy
from godir.api.resolve.Prompter import Prompter
from godir.api.resolve.Resolver import Resolver

__all__ = ["RecordingDisplay", "ScriptedPrompter"]


class RecordingDisplay(Display):
    """Display that records every message by kind."""

    def __init__(self):
        self.messages: dict[str, list[str]] = {
            "status": [],
            "success": [],
            "error": [],
            "warning": [],
            "info": [],
        }
        self.spinner_updates: list[str] = []
        self.spinners_started = 0
        self.spinners_finished = 0
        self.json: list[Any] = []

    def status(self, message: str, **kwargs) -> None:
        self.messages["status"].append(message)

    def success(self, message: str, **kwargs) -> None:
        self.messages["success"].append(message)

    def error(self, message: str, **kwargs) -> None:
        self.messages["error"].append(message)

    def warning(self, message: str, **kwargs) -> None:
        self.messages["warning"].append(message)

    def info(self, message: str, **kwargs) -> None:
        self.messages["info"].append(message)

    def spinner_start(self, description: str = "", **kwargs) -> Any:
        self.spinners_started += 1
        return self.spinners_started

    def spinner_update(self, handle: Any, description: str, **kwargs) -> None:
        self.spinner_updates.append(description)

    def spinner_finish(self, handle: Any, message: str = "", **kwargs) -> None:
        self.spinners_finished += 1

    def json_output(self, data: Any, **kwargs) -> None:
        self.json.append(data)


class ScriptedPrompter(Prompter):
    """Prompter that replays canned answers and records the questions."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.questions: list[str] = []

    def ask(self, question: str) -> str:
        self.questions.append(question)
        return self.answers.pop(0) if self.answers else ""


@pytest.fixture
def display() -> RecordingDisplay:
    return RecordingDisplay()


@pytest.fixture
def make_resolver(config_path: Path, display: RecordingDisplay):
    """Factory building a Resolver around the isolated config and recording display."""

    def _make(*answers: str, policy: PlatformPolicy | None = None, scan_root: Path | None = None, **kwargs):
        prompter = ScriptedPrompter(*answers)
        resolver = Resolver(
            config_path,
            prompter,
            display,
            policy or PlatformPolicy(skip_dirnames=frozenset({".Trash"})),
            scan_root=scan_root,
            **kwargs,
        )
        return resolver, prompter

    return _make
