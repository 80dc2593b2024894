"""
Interactive read-evaluate-print loop.
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from zero_shell.config.settings import Settings, parse_log_level
from zero_shell.container import DependencyContainer
from zero_shell.entities.command_line import CommandLine
from zero_shell.exceptions import ConfigurationError, ShellExit
from zero_shell.ports.console_port import ConsolePort
from zero_shell.use_cases.dispatcher import Dispatcher

logger = logging.getLogger(__name__)


class Repl:
    """Prompt, read, trim and dispatch lines until 'exit' or end of input."""

    def __init__(
        self,
        dispatcher: Dispatcher,
        console: ConsolePort,
        read_line: Callable[[str], str],
        prompt: str = "$ ",
    ):
        self._dispatcher = dispatcher
        self._console = console
        self._read_line = read_line
        self._prompt = prompt

    def execute_line(self, line: str) -> int:
        """Tokenize and dispatch one line. Empty lines are a no-op."""
        command_line = CommandLine.parse(line)
        if command_line.is_empty():
            return 0
        return self._dispatcher.dispatch(command_line)

    def run(self) -> int:
        """
        Run the loop.

        Returns:
            Process exit status
        """
        while True:
            try:
                line = self._read_line(self._prompt)
            except EOFError:
                self._console.write()
                return 0
            except KeyboardInterrupt:
                self._console.write()
                continue
            except OSError as e:
                self._console.error(f"Error reading input: {e}")
                return 1

            try:
                self.execute_line(line.strip())
            except ShellExit as e:
                return e.status


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zero-shell",
        description="Minimalist Unix-like shell with built-in file commands.",
    )
    parser.add_argument("--prompt", default=None, help="Prompt shown before each line")
    parser.add_argument(
        "--no-banner", action="store_true", help="Do not print the startup banner"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: ZERO_SHELL_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = Settings()
        if args.log_level is not None:
            settings.log_level = parse_log_level(args.log_level)
    except ConfigurationError as e:
        print(f"zero-shell: {e}", file=sys.stderr)
        return 2
    if args.prompt is not None:
        settings.prompt = args.prompt

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    container = DependencyContainer(settings=settings)
    console = container.get_console()
    read_line = getattr(console, "read_line", input)

    if not args.no_banner and settings.banner:
        console.write(settings.banner)

    logger.debug("Starting REPL")
    repl = Repl(container.get_dispatcher(), console, read_line, settings.prompt)
    return repl.run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
