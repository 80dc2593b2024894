"""
Base class shared by the builtin use cases.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from typing_extensions import override

from zero_shell.entities.arguments import ArgumentSpec, ParsedArguments
from zero_shell.exceptions import ShellError, from_os_error
from zero_shell.ports.console_port import ConsolePort
from zero_shell.ports.environment_port import EnvironmentPort


class Builtin(ABC):
    """
    A command implemented inside the shell.

    Subclasses declare their name and argument contract and implement run().
    Errors raised from run() are reported on the error stream, prefixed with
    the builtin's name; they never propagate to the caller.
    """

    name: str = ""
    spec: ArgumentSpec = ArgumentSpec()

    def __init__(
        self,
        environment: EnvironmentPort,
        console: ConsolePort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the builtin.

        Args:
            environment: Working directory and home lookup
            console: Destination of output and error lines
            logger: Logger instance to use for logging
        """
        self._environment = environment
        self._console = console
        self._logger = logger or logging.getLogger(self.__class__.__module__)

    def execute(self, args: tuple[str, ...] | list[str]) -> int:
        """
        Run the builtin with raw argument tokens.

        Args:
            args: Argument tokens in input order

        Returns:
            Exit status: 0 on success, 1 on failure, 2 on bad arguments
        """
        try:
            parsed = self.spec.parse(args)
            return self.run(parsed)
        except ShellError as e:
            self.report(e)
            return e.status
        except OSError as e:
            error = from_os_error(e)
            self.report(error)
            return error.status

    @abstractmethod
    def run(self, parsed: ParsedArguments) -> int:
        """Perform the command; may raise ShellError or OSError."""
        pass

    def report(self, error: ShellError) -> None:
        self._logger.warning(f"{self.name} failed: {error.render()}")
        self._console.error(f"{self.name}: {error.render()}")

    def resolve(self, path: str) -> str:
        return self._environment.resolve_path(path)


class MultiOperandBuiltin(Builtin):
    """
    A builtin applied to each operand in turn.

    A failure on one operand is reported and the remaining operands are
    still processed.
    """

    @override
    def run(self, parsed: ParsedArguments) -> int:
        """
        Apply run_one() to every operand, reporting failures independently.

        Returns:
            0 if every operand succeeded, otherwise the last failure's status
        """
        status = 0
        for operand in parsed.operands:
            try:
                self.run_one(operand, parsed)
            except ShellError as e:
                self.report(e)
                status = e.status
            except OSError as e:
                error = from_os_error(e, operand)
                self.report(error)
                status = error.status
        return status

    @abstractmethod
    def run_one(self, operand: str, parsed: ParsedArguments) -> None:
        """Process a single operand; may raise ShellError or OSError."""
        pass
