"""Output formatting for the shell's own messages.

Program output never passes through here: children write straight to the
terminal. Text that came from the user or the filesystem is wrapped in
``Text`` so Rich applies no markup or emoji codes to it.
"""

from rich.console import Console
from rich.text import Text

from .config import STATUS_RULE

console = Console(highlight=False)


def print_output(text: str, *, out: Console = console) -> None:
    """Print text exactly as given (built-in output, echoed history lines)."""
    if text:
        out.print(Text(text), soft_wrap=True)


def print_error(message: str, *, out: Console = console) -> None:
    """Print a user-facing error line in red."""
    out.print(Text(message, style="red"), soft_wrap=True)


def print_running(executable: str, *, out: Console = console) -> None:
    """Announce a child process about to run."""
    out.print(Text(f"Running {executable} ...", style="bold"), soft_wrap=True)
    out.print(STATUS_RULE, style="dim", markup=False)


def status_style(status: int) -> str:
    """Return a Rich style for an exit status."""
    return "green" if status == 0 else "red"


def print_status(status: int, *, out: Console = console) -> None:
    """Report a finished child's exit status."""
    out.print(STATUS_RULE, style="dim", markup=False)
    text = Text("Returns ")
    text.append(str(status), style=status_style(status))
    out.print(text)
