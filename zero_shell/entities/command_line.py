"""
Command line domain entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandLine:
    """A tokenized input line: the command name followed by its arguments."""

    command: str
    args: tuple[str, ...] = ()

    @classmethod
    def parse(cls, line: str) -> "CommandLine":
        """
        Split a line on runs of whitespace.

        No quoting, escaping or comment handling is performed. An empty or
        whitespace-only line yields an empty command and no arguments.

        Args:
            line: Raw input line

        Returns:
            CommandLine instance
        """
        tokens = line.split()
        if not tokens:
            return cls(command="")
        return cls(command=tokens[0], args=tuple(tokens[1:]))

    def is_empty(self) -> bool:
        return self.command == ""
