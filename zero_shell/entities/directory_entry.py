"""
Directory entry domain entity.
"""

import os
import stat
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from zero_shell.utils.permissions import format_mode, is_executable


@dataclass(frozen=True)
class DirectoryEntry:
    """
    A directory entry with a metadata snapshot captured once per listing.

    The snapshot comes from lstat, so symbolic links describe themselves
    rather than their targets.
    """

    name: str
    path: str
    metadata: os.stat_result

    @classmethod
    def from_scandir(cls, entry: os.DirEntry) -> "DirectoryEntry":
        """Capture an entry from os.scandir without following symlinks."""
        return cls(
            name=entry.name,
            path=entry.path,
            metadata=entry.stat(follow_symlinks=False),
        )

    @property
    def mode(self) -> int:
        return self.metadata.st_mode

    @property
    def is_dir(self) -> bool:
        return stat.S_ISDIR(self.mode)

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def is_executable(self) -> bool:
        return is_executable(self.mode)

    def classifier(self) -> str:
        """Suffix appended by the classify flag: '/' for directories, '*' for executables."""
        if self.is_dir:
            return "/"
        if self.is_executable:
            return "*"
        return ""

    def display_name(self, classify: bool = False) -> str:
        return self.name + self.classifier() if classify else self.name

    def format_time(self) -> str:
        """Render the modification time as 'Mon dd HH:MM' in local time."""
        modified = datetime.fromtimestamp(self.metadata.st_mtime)
        return f"{modified:%b} {modified.day:2d} {modified:%H:%M}"

    def get_details(self) -> dict[str, Any]:
        """
        Get the fields shown by the long listing format.

        Returns:
            Dictionary with entry information
        """
        return {
            "mode": format_mode(self.mode),
            "nlink": self.metadata.st_nlink,
            "uid": self.metadata.st_uid,
            "gid": self.metadata.st_gid,
            "size": self.metadata.st_size,
            "mtime": self.format_time(),
            "name": self.name,
        }

    def long_format(self) -> str:
        """Render the long listing line. The name always carries its classifier."""
        details = self.get_details()
        return (
            f"{details['mode']} {details['nlink']:3} "
            f"{details['uid']}:{details['gid']} {details['size']:8} "
            f"{details['mtime']} {self.display_name(classify=True)}"
        )
