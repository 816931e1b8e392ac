"""Run external commands as child processes.

A trailing ``< file`` or ``> file`` on the command line rebinds the child's
standard input or output. Only the last two words are inspected; a
redirection anywhere else is passed to the program as ordinary arguments.
"""

import logging
import subprocess
from collections.abc import Callable, Sequence
from contextlib import ExitStack
from dataclasses import dataclass
from typing import IO

from .errors import RedirectionError

logger = logging.getLogger(__name__)

INPUT_REDIRECT = "<"
OUTPUT_REDIRECT = ">"

# Status reported when the program could not be executed at all.
EXEC_FAILURE_STATUS = 127


@dataclass(frozen=True, slots=True)
class RedirectionPlan:
    """Argument vector and stream bindings for one child process.

    Attributes:
        argv: Arguments with any redirection words removed.
        stdin: File to read standard input from, if redirected.
        stdout: File to write standard output to, if redirected.
    """

    argv: tuple[str, ...]
    stdin: str | None = None
    stdout: str | None = None


@dataclass(frozen=True, slots=True)
class LaunchResult:
    """Outcome of running a child process.

    Attributes:
        success: True if the child was started and waited for.
        status: Exit status; ``128 + N`` if killed by signal N.
        error: Description of why the child could not run.
    """

    success: bool
    status: int = 0
    error: str = ""


def plan_redirection(tokens: Sequence[str]) -> RedirectionPlan:
    """Split a trailing redirection off ``tokens``.

        >>> plan_redirection(["sort", "<", "names.txt"])
        RedirectionPlan(argv=('sort',), stdin='names.txt', stdout=None)
    """
    argv = tuple(tokens)
    if len(argv) >= 3:
        operator, target = argv[-2], argv[-1]
        if operator == INPUT_REDIRECT:
            return RedirectionPlan(argv[:-2], stdin=target)
        if operator == OUTPUT_REDIRECT:
            return RedirectionPlan(argv[:-2], stdout=target)
    return RedirectionPlan(argv)


def _open_redirection(stack: ExitStack, path: str, mode: str) -> IO[bytes]:
    try:
        return stack.enter_context(open(path, mode))
    except OSError as exc:
        raise RedirectionError(f"{path}: {exc.strerror}") from exc
    except ValueError as exc:
        raise RedirectionError(f"{path}: {exc}") from exc


def launch(
    executable: str,
    plan: RedirectionPlan,
    *,
    announce: Callable[[str], None] | None = None,
) -> LaunchResult:
    """Run ``executable`` with ``plan.argv`` and wait for it to finish.

    The child inherits the shell's environment. Redirection files are
    opened here and closed before returning, whatever the outcome.
    ``announce`` is called with the executable once the redirection files
    are open, just before spawning.

    Raises:
        RedirectionError: If a redirection file cannot be opened. Nothing
            is spawned in that case.
    """
    with ExitStack() as stack:
        stdin = _open_redirection(stack, plan.stdin, "rb") if plan.stdin else None
        stdout = _open_redirection(stack, plan.stdout, "wb") if plan.stdout else None
        if announce is not None:
            announce(executable)

        logger.debug("Spawning %s %r (stdin=%s, stdout=%s)",
                     executable, plan.argv, plan.stdin, plan.stdout)
        try:
            proc = subprocess.Popen(
                list(plan.argv),
                executable=executable,
                stdin=stdin,
                stdout=stdout,
            )
        except (OSError, ValueError) as exc:
            logger.debug("Failed to execute %s: %s", executable, exc)
            return LaunchResult(
                success=False,
                status=EXEC_FAILURE_STATUS,
                error=f"{executable}: {getattr(exc, 'strerror', None) or exc}",
            )
        status = _wait(proc)

    logger.debug("%s (pid %d) exited with %d", executable, proc.pid, status)
    return LaunchResult(success=True, status=status)


def _wait(proc: subprocess.Popen) -> int:
    while True:
        try:
            returncode = proc.wait()
        except KeyboardInterrupt:
            # The child shares the terminal and gets the interrupt itself.
            continue
        if returncode < 0:
            return 128 - returncode
        return returncode
