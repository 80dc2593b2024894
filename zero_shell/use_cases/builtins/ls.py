"""
List directory contents.
"""

import os

from typing_extensions import override

from zero_shell.entities.arguments import ArgumentSpec, ParsedArguments
from zero_shell.entities.directory_entry import DirectoryEntry
from zero_shell.exceptions import from_os_error
from zero_shell.use_cases.builtins.base import Builtin


class LsBuiltin(Builtin):
    """
    List a directory, the current one by default.

    Flags:
        -a  include entries whose name starts with '.'
        -l  one detailed metadata line per entry
        -F  append '/' to directories and '*' to executable files
    """

    name = "ls"
    spec = ArgumentSpec(
        max_operands=1,
        flags={"a": "show_all", "l": "long_format", "F": "classify"},
    )

    @override
    def run(self, parsed: ParsedArguments) -> int:
        operand = parsed.operands[0] if parsed.operands else "."
        try:
            entries = self.list_entries(
                self.resolve(operand), show_all=parsed.flag("show_all")
            )
        except OSError as e:
            raise from_os_error(e, operand)

        classify = parsed.flag("classify")
        for entry in entries:
            if parsed.flag("long_format"):
                self._console.write(entry.long_format())
            else:
                self._console.write(entry.display_name(classify))
        return 0

    def list_entries(self, path: str, show_all: bool = False) -> list[DirectoryEntry]:
        """
        Capture the entries of a directory, sorted by name.

        Args:
            path: Directory to enumerate
            show_all: Whether to keep hidden entries

        Returns:
            List of DirectoryEntry snapshots

        Raises:
            OSError: If the directory cannot be enumerated
        """
        entries: list[DirectoryEntry] = []
        with os.scandir(path) as it:
            for item in it:
                if not show_all and item.name.startswith("."):
                    continue
                entries.append(DirectoryEntry.from_scandir(item))
        entries.sort(key=lambda entry: entry.name)
        self._logger.debug(f"Listed {len(entries)} entries in {path}")
        return entries
