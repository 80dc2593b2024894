from typing_extensions import override

from zero_shell.entities.arguments import ParsedArguments
from zero_shell.use_cases.builtins.base import Builtin


class EchoBuiltin(Builtin):
    """Write the arguments joined by single spaces. No escape sequences are interpreted."""

    name = "echo"

    @override
    def run(self, parsed: ParsedArguments) -> int:
        self._console.write(" ".join(parsed.operands))
        return 0
