"""
Environment port interface: process-wide working directory and home lookup.
"""

import os
from abc import ABC, abstractmethod
from typing import Optional


class EnvironmentPort(ABC):
    """Port interface for process environment access."""

    @abstractmethod
    def get_cwd(self) -> str:
        """
        Get the absolute current working directory.

        Raises:
            OSError: If the directory can no longer be resolved
        """
        pass

    @abstractmethod
    def set_cwd(self, path: str) -> None:
        """
        Change the current working directory.

        Args:
            path: Absolute path of the new working directory

        Raises:
            OSError: If the path is missing, not a directory or not accessible
        """
        pass

    @abstractmethod
    def get_home(self) -> Optional[str]:
        """
        Get the home directory.

        Returns:
            The home directory, or None when it is not set
        """
        pass

    def resolve_path(self, path: str) -> str:
        """Resolve a user-supplied path against the current working directory."""
        if os.path.isabs(path):
            return path
        return os.path.join(self.get_cwd(), path)
