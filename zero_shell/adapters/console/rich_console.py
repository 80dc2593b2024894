"""
Console adapter backed by rich.
"""

from typing import Optional

from rich.console import Console
from typing_extensions import override

from zero_shell.ports.console_port import ConsolePort


class RichConsoleAdapter(ConsolePort):
    """Console implementation writing to stdout and stderr through rich consoles."""

    def __init__(
        self,
        out: Optional[Console] = None,
        err: Optional[Console] = None,
        error_style: Optional[str] = "red",
    ):
        """
        Initialize the adapter.

        Args:
            out: Console for the output stream. Defaults to stdout.
            err: Console for the error stream. Defaults to stderr.
            error_style: Rich style applied to error lines when the stream is a terminal
        """
        self._out = out or Console(soft_wrap=True, highlight=False)
        self._err = err or Console(stderr=True, soft_wrap=True, highlight=False)
        self._error_style = error_style

    @override
    def write(self, text: str = "") -> None:
        # Written to the underlying file: rich would expand tabs and drop control codes
        self._out.file.write(f"{text}\n")
        self._out.file.flush()

    @override
    def error(self, text: str) -> None:
        self._err.print(
            text,
            style=self._error_style,
            markup=False,
            emoji=False,
            highlight=False,
            soft_wrap=True,
        )
        self._err.file.flush()

    def read_line(self, prompt: str) -> str:
        """
        Show the prompt and read one line from standard input.

        Raises:
            EOFError: At end of input
        """
        return self._out.input(prompt, markup=False, emoji=False)
