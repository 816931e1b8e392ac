"""Shell constants and startup configuration.

The constants mirror the conventions of the classic ``mysh`` teaching shell:
a fixed prompt, a 20-entry history window persisted to ``.mymysh_history``
in the working directory, and a ``/bin:/usr/bin`` fallback search path.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

# --- Interactive surface ---

PROMPT = "mymysh$ "

# Printed around a child's output, before and after it runs.
STATUS_RULE = "-" * 20

# --- History ---

HISTORY_FILE = ".mymysh_history"
MAX_HISTORY = 20

# --- Search path ---

PATH_VARIABLE = "PATH"
DEFAULT_PATH = "/bin:/usr/bin"
PATH_SEPARATOR = ":"

# --- Tokenizing ---

TOKEN_SEPARATORS = " \t"


def parse_search_path(value: str | None) -> tuple[str, ...]:
    """Split a colon-separated search path, dropping empty components.

    ``None`` or an empty string falls back to DEFAULT_PATH.
    """
    if not value:
        value = DEFAULT_PATH
    return tuple(part for part in value.split(PATH_SEPARATOR) if part)


@dataclass(frozen=True, slots=True)
class ShellConfig:
    """Settings fixed for the lifetime of one shell process.

    Attributes:
        search_path: Directories searched for executables, in order.
        history_path: File the history window is loaded from and saved to.
        prompt: Prompt string shown before each line.
    """

    search_path: tuple[str, ...]
    history_path: str = HISTORY_FILE
    prompt: str = PROMPT

    @classmethod
    def from_environment(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        history_path: str | None = None,
        prompt: str | None = None,
    ) -> "ShellConfig":
        """Build a config from the process environment (parsed once)."""
        if environ is None:
            environ = os.environ
        return cls(
            search_path=parse_search_path(environ.get(PATH_VARIABLE)),
            history_path=history_path or HISTORY_FILE,
            prompt=PROMPT if prompt is None else prompt,
        )
