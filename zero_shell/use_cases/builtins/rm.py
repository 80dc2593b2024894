"""
Remove files and directories.
"""

import os
import shutil
import stat

from typing_extensions import override

from zero_shell.entities.arguments import ArgumentSpec, ParsedArguments
from zero_shell.exceptions import (
    IsADirectoryShellError,
    NotFoundError,
    UnsupportedOperationError,
)
from zero_shell.use_cases.builtins.base import MultiOperandBuiltin


class RmBuiltin(MultiOperandBuiltin):
    """
    Remove each named path.

    Regular files and symbolic links are unlinked (a link's target is left
    alone). Directories require the recursive flag and are then removed
    with all their contents. Other file types are refused.
    """

    name = "rm"
    spec = ArgumentSpec(min_operands=1, flags={"r": "recursive"})

    @override
    def run_one(self, operand: str, parsed: ParsedArguments) -> None:
        path = self.resolve(operand)
        try:
            mode = os.lstat(path).st_mode
        except FileNotFoundError:
            raise NotFoundError("No such file or directory", operand)

        if stat.S_ISREG(mode) or stat.S_ISLNK(mode):
            os.remove(path)
        elif stat.S_ISDIR(mode):
            if not parsed.flag("recursive"):
                raise IsADirectoryShellError(
                    "Is a directory (use -r to remove directories)", operand
                )
            shutil.rmtree(path)
        else:
            raise UnsupportedOperationError("Not a regular file or directory", operand)
        self._logger.info(f"Removed {path}")
