"""Locate executables on the search path.

A command name starting with ``/`` or ``.`` is taken as a path and checked
directly. Anything else is looked up in each search directory in turn.
"""

import logging
import os
import stat
from collections.abc import Sequence

logger = logging.getLogger(__name__)


def is_executable(path: str) -> bool:
    """Check whether the current user may execute ``path``.

    The file must exist and be a regular file. Permission follows the POSIX
    classes: the owner bit applies when we own the file, the group bit when
    the file's group is ours, and the other bit applies to everyone.
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError):
        # ValueError: embedded null byte
        return False
    if not stat.S_ISREG(st.st_mode):
        return False
    if st.st_uid == os.getuid() and st.st_mode & stat.S_IXUSR:
        return True
    if st.st_gid == os.getgid() and st.st_mode & stat.S_IXGRP:
        return True
    return bool(st.st_mode & stat.S_IXOTH)


def resolve(command: str, search_path: Sequence[str]) -> str | None:
    """Find the executable for ``command``.

    Args:
        command: Command name or path as typed.
        search_path: Directories to search, in order.

    Returns:
        The executable path (the command itself for direct paths, otherwise
        ``directory/command`` for the first match), or None if not found.
    """
    if not command:
        return None

    if command.startswith(("/", ".")):
        if is_executable(command):
            return command
        logger.debug("Not executable: %s", command)
        return None

    for directory in search_path:
        candidate = f"{directory}/{command}"
        if is_executable(candidate):
            logger.debug("Resolved %s -> %s", command, candidate)
            return candidate

    logger.debug("%s not found in %d search directories", command, len(search_path))
    return None
