"""
Create directories.
"""

import os

from typing_extensions import override

from zero_shell.entities.arguments import ArgumentSpec, ParsedArguments
from zero_shell.exceptions import AlreadyExistsError
from zero_shell.use_cases.builtins.base import MultiOperandBuiltin


class MkdirBuiltin(MultiOperandBuiltin):
    """Create each named directory. Parents are never created."""

    name = "mkdir"
    spec = ArgumentSpec(min_operands=1)

    @override
    def run_one(self, operand: str, parsed: ParsedArguments) -> None:
        path = self.resolve(operand)
        if os.path.lexists(path):
            if os.path.isdir(path):
                raise AlreadyExistsError("File exists", operand)
            raise AlreadyExistsError("File exists (not a directory)", operand)
        os.mkdir(path)
        self._logger.info(f"Created directory {path}")
