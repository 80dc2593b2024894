"""
Copy a file.
"""

import os
import shutil

from typing_extensions import override

from zero_shell.entities.arguments import ArgumentSpec, ParsedArguments
from zero_shell.exceptions import (
    IsADirectoryShellError,
    NotFoundError,
    OperationFailedError,
    UnsupportedOperationError,
    from_os_error,
)
from zero_shell.use_cases.builtins.base import Builtin
from zero_shell.utils.file_copy import copy_file_with_mode, resolve_destination


class CpBuiltin(Builtin):
    """
    Copy a regular file, preserving its permission bits.

    When the destination is an existing directory the file is copied into it
    under its own base name; otherwise the destination path is written,
    replacing an existing file. Directory sources are refused.
    """

    name = "cp"
    spec = ArgumentSpec(
        min_operands=2,
        max_operands=2,
        arity_message="usage: cp <source> <destination>",
    )

    @override
    def run(self, parsed: ParsedArguments) -> int:
        source, destination = parsed.operands
        source_path = self.resolve(source)

        if not os.path.exists(source_path):
            raise NotFoundError("No such file or directory", source)
        if os.path.isdir(source_path):
            raise IsADirectoryShellError(
                "Is a directory (directory copying not supported)", source
            )
        if not os.path.isfile(source_path):
            raise UnsupportedOperationError("Not a regular file", source)

        target = resolve_destination(source_path, self.resolve(destination))
        try:
            copy_file_with_mode(source_path, target)
        except shutil.SameFileError:
            raise OperationFailedError(
                f"'{source}' and '{destination}' are the same file"
            )
        except OSError as e:
            operand = source if e.filename == source_path else destination
            raise from_os_error(e, operand)
        self._logger.info(f"Copied {source_path} to {target}")
        return 0
