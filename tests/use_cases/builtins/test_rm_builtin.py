"""
Tests for rm.
"""

import os
from unittest.mock import patch

from zero_shell.use_cases.builtins.rm import RmBuiltin


class TestRmBuiltin:
    """Test cases for rm."""

    def test_remove_file(self, environment, console, temp_directory, mock_logger):
        status = RmBuiltin(environment, console, mock_logger).execute(["test1.txt"])

        assert status == 0
        assert not os.path.exists(os.path.join(temp_directory, "test1.txt"))

    def test_remove_nonexistent_file(self, environment, console, mock_logger):
        status = RmBuiltin(environment, console, mock_logger).execute(["nope.txt"])

        assert status == 1
        assert console.err == ["rm: nope.txt: No such file or directory"]

    def test_remove_directory_without_recursive(self, environment, console, temp_directory, mock_logger):
        os.mkdir(os.path.join(temp_directory, "empty"))

        status = RmBuiltin(environment, console, mock_logger).execute(
            ["empty", "subdir"]
        )

        assert status == 1
        assert console.err == [
            "rm: empty: Is a directory (use -r to remove directories)",
            "rm: subdir: Is a directory (use -r to remove directories)",
        ]
        assert os.path.isdir(os.path.join(temp_directory, "empty"))
        assert os.path.isfile(os.path.join(temp_directory, "subdir", "test3.md"))

    def test_remove_directory_with_recursive(self, environment, console, temp_directory, mock_logger):
        nested = os.path.join(temp_directory, "subdir", "deeper")
        os.mkdir(nested)
        with open(os.path.join(nested, "nested.txt"), "w") as f:
            f.write("nested")

        status = RmBuiltin(environment, console, mock_logger).execute(["-r", "subdir"])

        assert status == 0
        assert not os.path.exists(os.path.join(temp_directory, "subdir"))

    def test_flag_after_operand(self, environment, console, temp_directory, mock_logger):
        RmBuiltin(environment, console, mock_logger).execute(["subdir", "-r"])

        assert not os.path.exists(os.path.join(temp_directory, "subdir"))

    def test_remove_multiple_files(self, environment, console, temp_directory, mock_logger):
        status = RmBuiltin(environment, console, mock_logger).execute(
            ["test1.txt", "missing", "test2.py"]
        )

        assert status == 1
        assert console.err == ["rm: missing: No such file or directory"]
        assert not os.path.exists(os.path.join(temp_directory, "test1.txt"))
        assert not os.path.exists(os.path.join(temp_directory, "test2.py"))

    def test_remove_symlink_keeps_target(self, environment, console, temp_directory, mock_logger):
        link = os.path.join(temp_directory, "link")
        os.symlink(os.path.join(temp_directory, "subdir"), link)

        status = RmBuiltin(environment, console, mock_logger).execute(["link"])

        assert status == 0
        assert not os.path.lexists(link)
        assert os.path.isdir(os.path.join(temp_directory, "subdir"))

    def test_special_file_rejected(self, environment, console, temp_directory, mock_logger):
        fifo = os.path.join(temp_directory, "pipe")
        os.mkfifo(fifo)

        status = RmBuiltin(environment, console, mock_logger).execute(["-r", "pipe"])

        assert status == 1
        assert console.err == ["rm: pipe: Not a regular file or directory"]
        assert os.path.exists(fifo)

    def test_invalid_option(self, environment, console, temp_directory, mock_logger):
        status = RmBuiltin(environment, console, mock_logger).execute(["-rf", "test1.txt"])

        assert status == 2
        assert console.err == ["rm: invalid option -- 'f'"]
        assert os.path.exists(os.path.join(temp_directory, "test1.txt"))

    def test_missing_operand(self, environment, console, mock_logger):
        status = RmBuiltin(environment, console, mock_logger).execute(["-r"])

        assert status == 2
        assert console.err == ["rm: missing operand"]

    @patch("os.remove")
    def test_os_error_reported(self, mock_remove, environment, console, mock_logger):
        mock_remove.side_effect = PermissionError(13, "Permission denied")

        status = RmBuiltin(environment, console, mock_logger).execute(["test1.txt"])

        assert status == 1
        assert console.err == ["rm: test1.txt: Permission denied"]
