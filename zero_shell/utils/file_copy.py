"""Helpers shared by cp and mv."""

import os
import shutil


def resolve_destination(source: str, destination: str) -> str:
    """Return the final target path: inside destination when it is a directory."""
    if os.path.isdir(destination):
        base_name = os.path.basename(os.path.normpath(source))
        return os.path.join(destination, base_name)
    return destination


def copy_file_with_mode(source: str, destination: str) -> None:
    """
    Copy file content, then the permission bits.

    The order matters: creating the destination applies the default mode,
    which copymode then replaces with the source's bits.
    """
    shutil.copyfile(source, destination)
    shutil.copymode(source, destination)


def same_path(first: str, second: str) -> bool:
    return os.path.normpath(os.path.abspath(first)) == os.path.normpath(
        os.path.abspath(second)
    )
