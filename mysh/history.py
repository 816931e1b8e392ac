"""Numbered command history with a fixed-size resident window.

Each recorded line gets a sequence number, starting at 1 and never reused.
Only the most recent MAX_HISTORY entries stay resident; older ones are
evicted in sequence order. The window is persisted to HISTORY_FILE in the
working directory, one entry per line::

      1  ls -l
      2  cat out.txt

The same window backs prompt_toolkit's line editing, so up-arrow recall
shows exactly the entries that ``!N`` can reach.
"""

import logging
import re
import warnings
from collections import deque
from collections.abc import AsyncGenerator, Iterable
from dataclasses import dataclass

from prompt_toolkit.history import History

from .config import HISTORY_FILE, MAX_HISTORY
from .errors import PersistenceWarning

logger = logging.getLogger(__name__)

# " %3d  %s": right-aligned sequence number, two spaces, command text.
_ENTRY_RE = re.compile(r"^ *([0-9]+)  (.+)$")


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """One recorded command line.

    Attributes:
        sequence: Position in the full history, 1-based.
        command_line: The line as typed, or as resolved by substitution.
    """

    sequence: int
    command_line: str


def format_entry(entry: HistoryEntry) -> str:
    """Render an entry in the persisted line format (no newline)."""
    return f" {entry.sequence:3d}  {entry.command_line}"


def parse_entry(line: str) -> HistoryEntry | None:
    """Parse one persisted line, returning None if it is malformed."""
    match = _ENTRY_RE.match(line.rstrip("\r\n"))
    if match is None:
        return None
    try:
        sequence = int(match.group(1))
    except ValueError:
        return None
    if sequence < 1:
        return None
    return HistoryEntry(sequence, match.group(2))


class HistoryStore:
    """Bounded, sequence-ordered command history.

    Usage::

        store = HistoryStore(".mymysh_history")
        store.load()
        store.record("ls -l")
        store.get(1)        # "ls -l"
        store.persist()

    Entries are always in ascending sequence order. Adding to a full store
    evicts the entry with the smallest sequence number; the survivors keep
    their numbers.
    """

    def __init__(self, path: str = HISTORY_FILE, capacity: int = MAX_HISTORY) -> None:
        if capacity < 1:
            raise ValueError(f"History capacity must be positive, got {capacity}")
        self.path = path
        self.capacity = capacity
        self._entries: deque[HistoryEntry] = deque()
        self._next_sequence = 1

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def next_sequence(self) -> int:
        """Sequence number the next recorded line will receive."""
        return self._next_sequence

    @property
    def is_full(self) -> bool:
        return len(self._entries) >= self.capacity

    # --- Persistence ---

    def load(self) -> int:
        """Replace the resident window with the contents of the history file.

        Malformed lines, and lines whose sequence number does not increase,
        are skipped. A missing file means an empty history. An unreadable
        file degrades to an empty history with a PersistenceWarning.

        Returns:
            The next sequence number to assign.
        """
        self._entries.clear()
        self._next_sequence = 1
        try:
            with open(self.path, encoding="utf-8") as f:
                lines = f.readlines()
        except FileNotFoundError:
            logger.debug("No history file at %s", self.path)
            return self._next_sequence
        except (OSError, UnicodeDecodeError) as exc:
            warnings.warn(
                f"Cannot read history file {self.path}: {exc}",
                PersistenceWarning,
                stacklevel=2,
            )
            return self._next_sequence

        self._extend(lines)
        logger.debug(
            "Loaded %d history entries from %s (next #%d)",
            len(self._entries), self.path, self._next_sequence,
        )
        return self._next_sequence

    def _extend(self, lines: Iterable[str]) -> None:
        skipped = 0
        for line in lines:
            entry = parse_entry(line)
            if entry is None or entry.sequence < self._next_sequence:
                skipped += 1
                continue
            self.add(entry.command_line, entry.sequence)
        if skipped:
            warnings.warn(
                f"Skipped {skipped} malformed line(s) in {self.path}",
                PersistenceWarning,
                stacklevel=3,
            )

    def persist(self) -> None:
        """Overwrite the history file with the resident entries.

        Raises:
            OSError: If the file cannot be written.
        """
        with open(self.path, "w", encoding="utf-8") as f:
            for entry in self._entries:
                f.write(format_entry(entry) + "\n")
        logger.debug("Saved %d history entries to %s", len(self._entries), self.path)

    # --- Window maintenance ---

    def add(self, command_line: str, sequence: int) -> HistoryEntry:
        """Insert ``command_line`` under ``sequence``.

        Raises:
            ValueError: If ``sequence`` is not above every number already
                assigned.
        """
        if sequence < self._next_sequence:
            raise ValueError(
                f"Sequence number {sequence} already used "
                f"(next is {self._next_sequence})"
            )
        if self.is_full:
            self.evict_oldest()
        entry = HistoryEntry(sequence, command_line)
        self._entries.append(entry)
        self._next_sequence = sequence + 1
        return entry

    def record(self, command_line: str) -> HistoryEntry:
        """Insert ``command_line`` under the next free sequence number."""
        return self.add(command_line, self._next_sequence)

    def evict_oldest(self) -> HistoryEntry | None:
        """Drop and return the entry with the smallest sequence number."""
        if not self._entries:
            return None
        return self._entries.popleft()

    # --- Lookup ---

    def get(self, sequence: int) -> str | None:
        """Return the command line recorded as ``sequence``, if resident."""
        for entry in self._entries:
            if entry.sequence == sequence:
                return entry.command_line
        return None

    def entries(self) -> list[HistoryEntry]:
        """Return the resident entries in ascending sequence order."""
        return list(self._entries)


class StoreHistory(History):
    """prompt_toolkit history view over a HistoryStore.

    The view keeps no strings of its own: every load reads the store's
    current window. Recording is left to the shell loop, which stores the
    substituted line rather than the raw input, so typed lines handed to
    ``append_string`` are dropped.
    """

    def __init__(self, store: HistoryStore) -> None:
        super().__init__()
        self.store = store

    async def load(self) -> AsyncGenerator[str, None]:
        # prompt_toolkit calls this before every prompt.
        for line in self.load_history_strings():
            yield line

    def get_strings(self) -> list[str]:
        return [entry.command_line for entry in self.store.entries()]

    def append_string(self, string: str) -> None:
        self.store_string(string)

    def load_history_strings(self) -> Iterable[str]:
        # Newest first.
        for entry in reversed(self.store.entries()):
            yield entry.command_line

    def store_string(self, string: str) -> None:
        pass
