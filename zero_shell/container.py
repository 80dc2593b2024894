"""
Dependency injection container for managing shell dependencies.
"""

import logging
from typing import Any, Optional

from zero_shell.adapters.console.rich_console import RichConsoleAdapter
from zero_shell.adapters.environment.process_environment import (
    ProcessEnvironmentAdapter,
)
from zero_shell.config.settings import Settings
from zero_shell.ports.console_port import ConsolePort
from zero_shell.ports.environment_port import EnvironmentPort
from zero_shell.use_cases.builtins.base import Builtin
from zero_shell.use_cases.builtins.cat import CatBuiltin
from zero_shell.use_cases.builtins.cd import CdBuiltin
from zero_shell.use_cases.builtins.cp import CpBuiltin
from zero_shell.use_cases.builtins.echo import EchoBuiltin
from zero_shell.use_cases.builtins.ls import LsBuiltin
from zero_shell.use_cases.builtins.mkdir import MkdirBuiltin
from zero_shell.use_cases.builtins.mv import MvBuiltin
from zero_shell.use_cases.builtins.pwd import PwdBuiltin
from zero_shell.use_cases.builtins.rm import RmBuiltin
from zero_shell.use_cases.dispatcher import Dispatcher


class DependencyContainer:
    """
    Container for managing shell dependencies using dependency injection.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        environment: Optional[EnvironmentPort] = None,
        console: Optional[ConsolePort] = None,
    ):
        """
        Initialize the container. Explicit collaborators replace the defaults.

        Args:
            settings: Shell settings, loaded from the environment when None
            environment: Environment port implementation
            console: Console port implementation
        """
        self._instances: dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)
        if settings is not None:
            self._instances["settings"] = settings
        if environment is not None:
            self._instances["environment"] = environment
        if console is not None:
            self._instances["console"] = console

    def get_settings(self) -> Settings:
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_environment(self) -> EnvironmentPort:
        """
        Get environment adapter instance.

        Returns:
            EnvironmentPort implementation
        """
        if "environment" not in self._instances:
            self._instances["environment"] = ProcessEnvironmentAdapter(
                logger=self._logger
            )
        return self._instances["environment"]

    def get_console(self) -> ConsolePort:
        """
        Get console adapter instance.

        Returns:
            ConsolePort implementation
        """
        if "console" not in self._instances:
            self._instances["console"] = RichConsoleAdapter()
        return self._instances["console"]

    def get_builtins(self) -> list[Builtin]:
        """
        Get every builtin, wired to the environment and console.

        Returns:
            List of builtin use cases
        """
        if "builtins" not in self._instances:
            environment = self.get_environment()
            console = self.get_console()
            builtins: list[Builtin] = [
                builtin_class(environment, console)
                for builtin_class in (
                    PwdBuiltin,
                    CdBuiltin,
                    EchoBuiltin,
                    CatBuiltin,
                    MkdirBuiltin,
                    RmBuiltin,
                    CpBuiltin,
                    LsBuiltin,
                )
            ]
            builtins.append(
                MvBuiltin(
                    environment,
                    console,
                    cross_device_directories=self.get_settings().mv_cross_device_dirs,
                )
            )
            self._instances["builtins"] = builtins
        return self._instances["builtins"]

    def get_dispatcher(self) -> Dispatcher:
        """
        Get dispatcher instance.

        Returns:
            Dispatcher wired with every builtin
        """
        if "dispatcher" not in self._instances:
            self._instances["dispatcher"] = Dispatcher(
                self.get_builtins(), self.get_console()
            )
        return self._instances["dispatcher"]
