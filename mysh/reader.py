"""Reading input lines, with line editing when attached to a terminal."""

import sys
from typing import TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import History
from rich.console import Console

from .display import console as default_console
from .tokenizer import trim


class LineReader:
    """Supplies one trimmed input line per call.

    On a terminal, input goes through a prompt_toolkit session so the user
    gets line editing and history recall. Otherwise lines are read from
    ``stream`` and the prompt is written to the console.
    """

    def __init__(
        self,
        prompt: str,
        *,
        history: History | None = None,
        stream: TextIO | None = None,
        console: Console | None = None,
    ) -> None:
        self.prompt = prompt
        self.history = history
        self.stream = stream if stream is not None else sys.stdin
        self.console = console or default_console
        self._session: PromptSession | None = None
        # Undecodable input bytes become U+FFFD instead of ending the shell.
        reconfigure = getattr(self.stream, "reconfigure", None)
        if reconfigure is not None:
            reconfigure(errors="replace")

    @property
    def interactive(self) -> bool:
        return self.stream is sys.stdin and self.stream.isatty()

    def read_line(self) -> str | None:
        """Return the next trimmed line, or None at end of input."""
        if self.interactive:
            return self._prompt()

        self.console.print(self.prompt, end="", markup=False)
        line = self.stream.readline()
        if not line:
            return None
        return trim(line)

    def _prompt(self) -> str | None:
        if self._session is None:
            self._session = PromptSession(history=self.history)
        try:
            line = self._session.prompt(self.prompt)
        except EOFError:
            return None
        except KeyboardInterrupt:
            # Ctrl-C: cancel current line
            return ""
        return trim(line)
