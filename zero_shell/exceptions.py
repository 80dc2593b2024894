"""
Custom exceptions for the shell.
"""

import errno
from typing import Optional


class ShellError(Exception):
    """Base exception class for errors raised while running a builtin."""

    status: int = 1

    def __init__(self, message: str, operand: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.operand = operand

    def render(self) -> str:
        """Render the error as shown to the user, without the builtin prefix."""
        if self.operand is None:
            return self.message
        return f"{self.operand}: {self.message}"


class NotFoundError(ShellError):
    """Exception raised when a path does not exist."""

    pass


class WrongTypeError(ShellError):
    """Exception raised when a path has the wrong file type."""

    pass


class IsADirectoryShellError(WrongTypeError):
    """Exception raised when a file was expected but a directory was found."""

    pass


class NotADirectoryShellError(WrongTypeError):
    """Exception raised when a directory was expected but something else was found."""

    pass


class AlreadyExistsError(ShellError):
    """Exception raised when a path that must not exist already does."""

    pass


class PermissionDeniedError(ShellError):
    """Exception raised when the operating system refuses an operation."""

    pass


class CrossDeviceError(ShellError):
    """Exception raised when a rename crosses a filesystem boundary."""

    pass


class UnsupportedOperationError(ShellError):
    """Exception raised for operations this shell deliberately does not perform."""

    pass


class BadArgumentError(ShellError):
    """Exception raised for malformed command arguments."""

    status = 2


class UsageError(BadArgumentError):
    """Exception raised when a builtin receives the wrong number of operands."""

    pass


class InvalidOptionError(BadArgumentError):
    """Exception raised for an unrecognized flag character."""

    def __init__(self, option: str):
        super().__init__(f"invalid option -- '{option}'")
        self.option = option


class EnvironmentMissingError(ShellError):
    """Exception raised when a required environment variable is not set."""

    pass


class OperationFailedError(ShellError):
    """Exception raised for any other operating system failure."""

    pass


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    pass


class ShellExit(Exception):
    """Raised by the 'exit' command to end the session."""

    def __init__(self, status: int = 0):
        super().__init__(status)
        self.status = status


_ERRNO_CLASSES: dict[int, type[ShellError]] = {
    errno.ENOENT: NotFoundError,
    errno.EISDIR: IsADirectoryShellError,
    errno.ENOTDIR: NotADirectoryShellError,
    errno.EEXIST: AlreadyExistsError,
    errno.EACCES: PermissionDeniedError,
    errno.EPERM: PermissionDeniedError,
    errno.EXDEV: CrossDeviceError,
}


def from_os_error(exc: OSError, operand: Optional[str] = None) -> ShellError:
    """
    Convert an OSError into the matching ShellError.

    Args:
        exc: The error raised by the operating system
        operand: The user-supplied path the error refers to, if any

    Returns:
        A ShellError subclass instance carrying the platform message
    """
    error_class = _ERRNO_CLASSES.get(exc.errno or 0, OperationFailedError)
    message = exc.strerror or str(exc)
    return error_class(message, operand)
