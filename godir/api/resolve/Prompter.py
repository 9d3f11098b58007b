"""Capability boundary for asking the user questions."""

from abc import ABC, abstractmethod

_YES_ANSWERS = frozenset({"y", "yes"})


class Prompter(ABC):
    """Ask the user a line-based question and return the answer."""

    @abstractmethod
    def ask(self, question: str) -> str:
        """Show ``question`` and return one line of input without its newline.

        Returns an empty string when input is exhausted.
        """
        pass

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question; anything but ``y``/``yes`` means no."""
        return self.ask(question).strip().lower() in _YES_ANSWERS
