"""
Dispatcher mapping command names to builtin use cases.
"""

import logging
from typing import Iterable, Optional

from zero_shell.entities.command_line import CommandLine
from zero_shell.exceptions import ShellExit
from zero_shell.ports.console_port import ConsolePort
from zero_shell.use_cases.builtins.base import Builtin

EXIT_COMMAND = "exit"
COMMAND_NOT_FOUND_STATUS = 127


class Dispatcher:
    """
    Route a command line to exactly one builtin.

    Names match exactly and case-sensitively. 'exit' ends the session by
    raising ShellExit; any other unknown name, including the empty one, is
    reported as not found on the output stream.
    """

    def __init__(
        self,
        builtins: Iterable[Builtin],
        console: ConsolePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            builtins: Builtin use cases, keyed by their name
            console: Destination of the not-found message
            logger: Logger instance to use for logging
        """
        self._builtins: dict[str, Builtin] = {b.name: b for b in builtins}
        self._console = console
        self._logger = logger or logging.getLogger(__name__)

    @property
    def command_names(self) -> list[str]:
        return sorted(self._builtins)

    def dispatch(self, command_line: CommandLine) -> int:
        """
        Execute a command line.

        Args:
            command_line: Tokenized command and arguments

        Returns:
            Exit status of the builtin, or 127 for an unknown command

        Raises:
            ShellExit: For the 'exit' command
        """
        name = command_line.command
        if name == EXIT_COMMAND:
            self._logger.debug("exit requested")
            raise ShellExit(0)

        builtin = self._builtins.get(name)
        if builtin is None:
            self._logger.debug(f"Unknown command: {name!r}")
            self._console.write(f"Command '{name}' not found")
            return COMMAND_NOT_FOUND_STATUS

        self._logger.debug(f"Running {name} with {list(command_line.args)}")
        try:
            return builtin.execute(command_line.args)
        except Exception as e:
            self._logger.exception(f"Unexpected error in {name}")
            self._console.error(f"{name}: {e}")
            return 1
