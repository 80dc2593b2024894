"""
Change the working directory.
"""

import os

from typing_extensions import override

from zero_shell.entities.arguments import ArgumentSpec, ParsedArguments
from zero_shell.exceptions import EnvironmentMissingError, from_os_error
from zero_shell.use_cases.builtins.base import Builtin


class CdBuiltin(Builtin):
    """
    Change the process working directory.

    With no operand the target is the home directory. '~' and '~/<rest>' are
    expanded against the home directory; any other operand is used verbatim.
    """

    name = "cd"
    spec = ArgumentSpec(max_operands=1)

    @override
    def run(self, parsed: ParsedArguments) -> int:
        target = self._target(parsed.operands[0] if parsed.operands else None)
        try:
            self._environment.set_cwd(self.resolve(target))
        except OSError as e:
            raise from_os_error(e, target)
        self._logger.debug(f"cd: now in {target}")
        return 0

    def _home(self) -> str:
        home = self._environment.get_home()
        if home is None:
            raise EnvironmentMissingError("HOME environment variable not set")
        return home

    def _target(self, operand: str | None) -> str:
        if operand is None or operand == "~":
            return self._home()
        if operand.startswith("~/"):
            return os.path.join(self._home(), operand[2:])
        return operand
