"""
Process environment adapter backed by the os module.
"""

import logging
import os
from typing import Optional

from typing_extensions import override

from zero_shell.ports.environment_port import EnvironmentPort


class ProcessEnvironmentAdapter(EnvironmentPort):
    """Environment implementation that reads and mutates the real process state."""

    def __init__(
        self, home_variable: str = "HOME", logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the adapter.

        Args:
            home_variable: Name of the environment variable holding the home directory
            logger: Logger instance to use for logging
        """
        self._home_variable = home_variable
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    @override
    def get_cwd(self) -> str:
        return os.getcwd()

    @override
    def set_cwd(self, path: str) -> None:
        os.chdir(path)
        self._logger.debug(f"Working directory changed to {path}")

    @override
    def get_home(self) -> Optional[str]:
        home = os.environ.get(self._home_variable)
        if not home:
            return None
        return home
