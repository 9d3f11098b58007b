"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Abstract base for the status stream.

    Everything a Display prints goes to the secondary stream, except
    ``json_output`` which writes command output to the primary stream.
    """

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status message.

        Args:
            message: Status text to display
            kwargs: Implementation-specific options
        """
        pass

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""
        pass

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., details)
        """
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message."""
        pass

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message."""
        pass

    @abstractmethod
    def spinner_start(self, description: str = "", **kwargs) -> Any:
        """Start a spinner for indeterminate operations.

        Args:
            description: Description of operation
            kwargs: Implementation-specific options

        Returns:
            Spinner handle/context for updates
        """
        pass

    @abstractmethod
    def spinner_update(self, handle: Any, description: str, **kwargs) -> None:
        """Update spinner description in place."""
        pass

    @abstractmethod
    def spinner_finish(self, handle: Any, message: str = "", **kwargs) -> None:
        """Stop spinner, optionally printing a final message."""
        pass

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Write ``data`` as pretty-printed JSON to the primary stream."""
        pass
