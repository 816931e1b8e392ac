"""Click CLI entry point for mysh.

Handles argument parsing and logging setup, then hands off to the REPL.
"""

import logging
import sys

import click

from . import __version__
from .config import HISTORY_FILE, PROMPT, ShellConfig
from .repl import run_repl

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@click.command()
@click.option(
    "--history-file",
    "history_path",
    default=HISTORY_FILE,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="File the command history is loaded from and saved to.",
)
@click.option(
    "--prompt",
    default=PROMPT,
    show_default=True,
    help="Prompt shown before each command.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Log resolution, redirection and process details to stderr.",
)
@click.version_option(version=__version__, prog_name="mysh")
def cli(history_path: str, prompt: str, verbose: bool) -> None:
    """A small interactive shell with numbered, persisted history.

    Supports !! and !N history references, filename wildcards, the cd, pwd
    and history built-ins, and a trailing <file or >file redirection.
    """
    _configure_logging(verbose)
    config = ShellConfig.from_environment(history_path=history_path, prompt=prompt)
    sys.exit(run_repl(config))


def _configure_logging(verbose: bool) -> None:
    """Send log records and PersistenceWarnings to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    logging.captureWarnings(True)
