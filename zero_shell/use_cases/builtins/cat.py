"""
Concatenate files to the output stream.
"""

import os

from typing_extensions import override

from zero_shell.entities.arguments import ArgumentSpec, ParsedArguments
from zero_shell.exceptions import (
    IsADirectoryShellError,
    NotFoundError,
    OperationFailedError,
    UnsupportedOperationError,
)
from zero_shell.use_cases.builtins.base import MultiOperandBuiltin


class CatBuiltin(MultiOperandBuiltin):
    """
    Stream each named file to the output stream, line by line.

    Files are processed independently: a missing file, a directory, a special
    file or a read error is reported and the remaining files are still
    printed. Special files are never opened. A read error in the middle of
    a file stops that file after the lines already written.
    """

    name = "cat"
    spec = ArgumentSpec(min_operands=1, arity_message="no files specified")

    def __init__(self, *args, encoding: str = "utf-8", **kwargs):
        super().__init__(*args, **kwargs)
        self._encoding = encoding

    @override
    def run_one(self, operand: str, parsed: ParsedArguments) -> None:
        path = self.resolve(operand)
        if not os.path.exists(path):
            raise NotFoundError("No such file or directory", operand)
        if os.path.isdir(path):
            raise IsADirectoryShellError("Is a directory", operand)
        if not os.path.isfile(path):
            raise UnsupportedOperationError("Not a regular file", operand)

        with open(path, "r", encoding=self._encoding) as f:
            try:
                for line in f:
                    self._console.write(line[:-1] if line.endswith("\n") else line)
            except (UnicodeDecodeError, OSError) as e:
                raise OperationFailedError(f"Error reading file: {e}", operand)
