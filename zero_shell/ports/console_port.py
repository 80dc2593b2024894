"""
Console port interface: where builtin output and errors are written.
"""

from abc import ABC, abstractmethod


class ConsolePort(ABC):
    """Port interface for console output."""

    @abstractmethod
    def write(self, text: str = "") -> None:
        """Write one line to the output stream."""
        pass

    @abstractmethod
    def error(self, text: str) -> None:
        """Write one line to the error stream."""
        pass
