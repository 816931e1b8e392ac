"""Main read-eval loop.

Each line goes through: history substitution, tokenizing, recording in
history, wildcard expansion, then dispatch to a built-in or a child
process. Errors are reported and the loop carries on; only ``exit`` or end
of input stop it.
"""

import logging

from rich.console import Console

from .config import ShellConfig
from .dispatcher import Dispatcher
from .display import console as default_console
from .display import print_error, print_output
from .errors import ShellError
from .expander import expand
from .history import HistoryStore, StoreHistory
from .reader import LineReader
from .substitution import substitute
from .tokenizer import tokenize, trim

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def process_line(
    line: str,
    *,
    history: HistoryStore,
    dispatcher: Dispatcher,
    console: Console = default_console,
) -> bool:
    """Handle one input line.

    Returns:
        False if the shell should exit, True otherwise.
    """
    line = trim(line)
    if not line:
        return True
    if line == EXIT_COMMAND:
        return False

    try:
        substituted = substitute(line, history)
        if substituted is not None:
            line = substituted
            print_output(line, out=console)

        history.record(line)
        tokens = tokenize(line)
        tokens = expand(tokens) or tokens
        dispatcher.dispatch(tokens)
    except ShellError as exc:
        print_error(str(exc), out=console)

    return True


def run_repl(
    config: ShellConfig,
    *,
    reader: LineReader | None = None,
    console: Console = default_console,
) -> int:
    """Run the shell until ``exit`` or end of input.

    Args:
        config: Startup configuration.
        reader: Line source; defaults to standard input.
        console: Where the shell's own messages go.

    Returns:
        The shell's exit code.
    """
    history = HistoryStore(config.history_path)
    history.load()

    if reader is None:
        reader = LineReader(config.prompt, history=StoreHistory(history), console=console)
    dispatcher = Dispatcher(history, search_path=config.search_path, console=console)

    try:
        while True:
            line = reader.read_line()
            if line is None:
                break
            if not process_line(line, history=history, dispatcher=dispatcher, console=console):
                break
    finally:
        try:
            history.persist()
        except OSError as exc:
            logger.warning("Could not save history to %s: %s", history.path, exc)
        console.print()

    return 0
