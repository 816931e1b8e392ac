"""Commands handled by the shell itself: cd, pwd, history (h).

Built-ins are matched on the first word and never spawn a process.
"""

import logging
import os
from collections.abc import Callable, Sequence

from .errors import DirectoryNotFoundError, ResourceError
from .history import HistoryStore, format_entry

logger = logging.getLogger(__name__)

# Sentinel returned when the first word is not a built-in.
NOT_BUILTIN = object()


def handle_builtin(tokens: Sequence[str], *, history: HistoryStore) -> str | object:
    """Run ``tokens`` as a built-in.

    Args:
        tokens: The expanded words of the command line.
        history: The shell's history store.

    Returns:
        - Text to display to the user.
        - NOT_BUILTIN if the first word does not name a built-in.

    Raises:
        DirectoryNotFoundError: ``cd`` target does not exist.
        ResourceError: The history file cannot be written.
    """
    if not tokens:
        return NOT_BUILTIN

    handler = BUILTINS.get(tokens[0])
    if handler is None:
        return NOT_BUILTIN
    return handler(tokens[1:], history)


def change_directory(target: str | None) -> str:
    """Change the working directory and return the new absolute path.

    With no target, goes to the home directory. A relative target is taken
    from the current working directory.
    """
    if target is None:
        destination = os.environ.get("HOME") or os.path.expanduser("~")
    else:
        destination = os.path.join(os.getcwd(), target)

    try:
        os.chdir(destination)
    except (OSError, ValueError) as exc:
        logger.debug("chdir(%s) failed: %s", destination, exc)
        raise DirectoryNotFoundError(target or destination) from exc
    return os.getcwd()


def show_history(history: HistoryStore) -> str:
    """Save the history window and return it formatted for display."""
    try:
        history.persist()
    except OSError as exc:
        raise ResourceError(f"{history.path}: {exc.strerror}") from exc
    return "\n".join(format_entry(entry) for entry in history.entries())


def _cd(args: Sequence[str], history: HistoryStore) -> str:
    return change_directory(args[0] if args else None)


def _pwd(args: Sequence[str], history: HistoryStore) -> str:
    return os.getcwd()


def _history(args: Sequence[str], history: HistoryStore) -> str:
    return show_history(history)


# First word -> handler(args, history), returning text to display.
BUILTINS: dict[str, Callable[[Sequence[str], HistoryStore], str]] = {
    "cd": _cd,
    "pwd": _pwd,
    "history": _history,
    "h": _history,
}
