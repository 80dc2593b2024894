"""
Pytest configuration and shared fixtures.
"""

import errno
import os
import tempfile
from typing import Optional
from unittest.mock import MagicMock

import pytest

from zero_shell.ports.console_port import ConsolePort
from zero_shell.ports.environment_port import EnvironmentPort


class FakeEnvironment(EnvironmentPort):
    """Environment that keeps its working directory in memory instead of calling chdir."""

    def __init__(self, cwd: str, home: Optional[str] = None):
        self.cwd = cwd
        self.home = home

    def get_cwd(self) -> str:
        if not os.path.isdir(self.cwd):
            raise FileNotFoundError(errno.ENOENT, "No such file or directory")
        return self.cwd

    def set_cwd(self, path: str) -> None:
        if not os.path.exists(path):
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        if not os.path.isdir(path):
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
        self.cwd = os.path.normpath(path)

    def get_home(self) -> Optional[str]:
        return self.home


class RecordingConsole(ConsolePort):
    """Console that records output and error lines."""

    def __init__(self):
        self.out: list[str] = []
        self.err: list[str] = []

    def write(self, text: str = "") -> None:
        self.out.append(text)

    def error(self, text: str) -> None:
        self.err.append(text)


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.\n")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')\n")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.\n")

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def environment(temp_directory):
    """Fake environment rooted at the temporary directory, with HOME set to subdir."""
    return FakeEnvironment(
        cwd=temp_directory, home=os.path.join(temp_directory, "subdir")
    )


@pytest.fixture
def console():
    return RecordingConsole()
