"""Permission-bit rendering helpers used by ls."""

import stat

_FILE_TYPES: tuple[tuple[int, str], ...] = (
    (stat.S_IFDIR, "d"),
    (stat.S_IFLNK, "l"),
    (stat.S_IFREG, "-"),
    (stat.S_IFBLK, "b"),
    (stat.S_IFCHR, "c"),
    (stat.S_IFIFO, "p"),
    (stat.S_IFSOCK, "s"),
)

_PERMISSION_BITS: tuple[tuple[int, str], ...] = (
    (stat.S_IRUSR, "r"),
    (stat.S_IWUSR, "w"),
    (stat.S_IXUSR, "x"),
    (stat.S_IRGRP, "r"),
    (stat.S_IWGRP, "w"),
    (stat.S_IXGRP, "x"),
    (stat.S_IROTH, "r"),
    (stat.S_IWOTH, "w"),
    (stat.S_IXOTH, "x"),
)

EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def file_type_char(mode: int) -> str:
    file_type = stat.S_IFMT(mode)
    for mask, char in _FILE_TYPES:
        if file_type == mask:
            return char
    return "?"


def format_mode(mode: int) -> str:
    """Render a st_mode value as a 10-character string such as '-rwxr-xr-x'.

    Set-id and sticky bits are not rendered.
    """
    perms = "".join(char if mode & bit else "-" for bit, char in _PERMISSION_BITS)
    return file_type_char(mode) + perms


def is_executable(mode: int) -> bool:
    """True for regular files with at least one execute bit set."""
    return stat.S_ISREG(mode) and bool(mode & EXECUTE_BITS)
