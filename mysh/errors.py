"""Exceptions raised while processing a command line.

Every ShellError is reported to the user and the loop carries on; none of
them ends the shell. PersistenceWarning is only ever logged.
"""


class ShellError(Exception):
    """Base class for errors reported at the prompt."""


# --- User input ---


class UserInputError(ShellError):
    """The line the user typed cannot be carried out."""


class HistorySubstitutionError(UserInputError):
    """A ``!!`` or ``!N`` reference could not be resolved."""


class CommandNotFoundError(UserInputError):
    """No executable matches the command name."""

    def __init__(self, command: str) -> None:
        super().__init__("Command not found")
        self.command = command


class DirectoryNotFoundError(UserInputError):
    """``cd`` was given a directory that does not exist."""

    def __init__(self, directory: str) -> None:
        super().__init__(f"{directory}: No such file or directory")
        self.directory = directory


# --- Resources ---


class ResourceError(ShellError):
    """An OS resource needed for the command could not be acquired."""


class RedirectionError(ResourceError):
    """A redirection file could not be opened."""


class PersistenceWarning(UserWarning):
    """The history file could not be read or contained malformed lines."""
