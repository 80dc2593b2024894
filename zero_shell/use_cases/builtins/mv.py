"""
Move or rename a file or directory.
"""

import errno
import logging
import os
import shutil
from typing import Optional

from typing_extensions import override

from zero_shell.entities.arguments import ArgumentSpec, ParsedArguments
from zero_shell.exceptions import (
    NotFoundError,
    UnsupportedOperationError,
    from_os_error,
)
from zero_shell.ports.console_port import ConsolePort
from zero_shell.ports.environment_port import EnvironmentPort
from zero_shell.use_cases.builtins.base import Builtin
from zero_shell.utils.file_copy import (
    copy_file_with_mode,
    resolve_destination,
    same_path,
)


class MvBuiltin(Builtin):
    """
    Move a path with an atomic rename.

    Only when the rename fails with EXDEV (source and destination on
    different filesystems) does the move fall back to copy, chmod and
    delete. That fallback covers regular files; directories are refused
    unless cross_device_directories is enabled, in which case they are
    copied recursively and then removed.
    """

    name = "mv"
    spec = ArgumentSpec(
        min_operands=2,
        max_operands=2,
        arity_message="usage: mv <source> <destination>",
    )

    def __init__(
        self,
        environment: EnvironmentPort,
        console: ConsolePort,
        logger: Optional[logging.Logger] = None,
        cross_device_directories: bool = False,
    ):
        super().__init__(environment, console, logger)
        self._cross_device_directories = cross_device_directories

    @override
    def run(self, parsed: ParsedArguments) -> int:
        source, destination = parsed.operands
        source_path = self.resolve(source)

        if not os.path.lexists(source_path):
            raise NotFoundError("No such file or directory", source)

        target = resolve_destination(source_path, self.resolve(destination))
        if same_path(source_path, target):
            self._logger.debug(f"mv: {source} is already at {target}")
            return 0

        try:
            os.rename(source_path, target)
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise from_os_error(e, source)
            self._logger.info(f"Rename across devices, copying {source_path}")
            self._move_across_devices(source, source_path, target)
        self._logger.info(f"Moved {source_path} to {target}")
        return 0

    def _move_across_devices(self, source: str, source_path: str, target: str) -> None:
        try:
            if os.path.isfile(source_path) and not os.path.islink(source_path):
                copy_file_with_mode(source_path, target)
                os.remove(source_path)
            elif os.path.isdir(source_path) and not os.path.islink(source_path):
                if not self._cross_device_directories:
                    raise UnsupportedOperationError(
                        "Cross-device directory moves not supported", source
                    )
                shutil.copytree(source_path, target, symlinks=True)
                shutil.rmtree(source_path)
            else:
                raise UnsupportedOperationError(
                    "Source is not a regular file or directory", source
                )
        except OSError as e:
            raise from_os_error(e, source)
