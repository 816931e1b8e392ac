"""History references: ``!!`` and ``!N``.

A reference must make up the whole line. The fetched line is used as is;
it is never substituted again.
"""

from .errors import HistorySubstitutionError
from .history import HistoryStore

HISTORY_MARK = "!"
REPEAT_LAST = "!!"


def substitute(line: str, history: HistoryStore) -> str | None:
    """Resolve a history reference in ``line``.

    Args:
        line: A trimmed input line.
        history: The shell's history store.

    Returns:
        The referenced command line, or None if ``line`` is not a history
        reference.

    Raises:
        HistorySubstitutionError: The reference is malformed or names a
            command outside the resident window.
    """
    if not line.startswith(HISTORY_MARK):
        return None

    if line == REPEAT_LAST:
        sequence = history.next_sequence - 1
        if sequence < 1:
            raise HistorySubstitutionError("No previous command")
    else:
        digits = line[len(HISTORY_MARK):]
        if not (digits.isascii() and digits.isdigit()):
            raise HistorySubstitutionError("Invalid history substitution")
        try:
            sequence = int(digits)
        except ValueError as exc:
            # Too long to convert; no such entry can be resident.
            raise HistorySubstitutionError(f"No command #{digits}") from exc
        if sequence < 1:
            raise HistorySubstitutionError("Invalid history substitution")

    command_line = history.get(sequence)
    if command_line is None:
        raise HistorySubstitutionError(f"No command #{sequence}")
    return command_line
