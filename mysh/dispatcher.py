"""Route an expanded command line to a built-in or an external program."""

import logging
import sys
from collections.abc import Sequence

from rich.console import Console

from .builtins import NOT_BUILTIN, handle_builtin
from .display import console as default_console
from .display import print_error, print_output, print_running, print_status
from .errors import CommandNotFoundError
from .history import HistoryStore
from .launcher import LaunchResult, launch, plan_redirection
from .resolver import resolve

logger = logging.getLogger(__name__)


class Dispatcher:
    """Runs one command line's words.

    Usage::

        dispatcher = Dispatcher(history, search_path=("/bin", "/usr/bin"))
        dispatcher.dispatch(["ls", "-l"])

    The history store and search path belong to the shell loop; the
    dispatcher only borrows them between child runs.
    """

    def __init__(
        self,
        history: HistoryStore,
        *,
        search_path: Sequence[str],
        console: Console | None = None,
    ) -> None:
        self.history = history
        self.search_path = tuple(search_path)
        self.console = console or default_console

    def dispatch(self, tokens: Sequence[str]) -> LaunchResult | None:
        """Run ``tokens`` and return the child's result.

        Returns:
            None for built-ins, otherwise the LaunchResult of the child.

        Raises:
            CommandNotFoundError: The first word names no executable.
            DirectoryNotFoundError: ``cd`` target does not exist.
            ResourceError: A redirection file or the history file could not
                be opened.
        """
        if not tokens:
            return None

        output = handle_builtin(tokens, history=self.history)
        if output is not NOT_BUILTIN:
            print_output(output, out=self.console)
            return None

        executable = resolve(tokens[0], self.search_path)
        if executable is None:
            raise CommandNotFoundError(tokens[0])

        plan = plan_redirection(tokens)
        result = launch(executable, plan, announce=self._announce)
        if not result.success:
            print_error(result.error, out=self.console)
        print_status(result.status, out=self.console)
        return result

    def _announce(self, executable: str) -> None:
        print_running(executable, out=self.console)
        # Our buffered output must reach the terminal before the child's.
        sys.stdout.flush()
