from typing_extensions import override

from zero_shell.entities.arguments import ParsedArguments
from zero_shell.use_cases.builtins.base import Builtin


class PwdBuiltin(Builtin):
    """Print the absolute current working directory. Arguments are ignored."""

    name = "pwd"

    @override
    def run(self, parsed: ParsedArguments) -> int:
        self._console.write(self._environment.get_cwd())
        return 0
