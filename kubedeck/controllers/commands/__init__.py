"""Console command execution."""

from kubedeck.controllers.commands.executor import CommandExecutor, CommandResult
from kubedeck.controllers.commands.validation import (
    CommandError,
    CommandValidationError,
    NoReleaseError,
    RemoteCommandError,
    UnknownCommandError,
)

__all__ = [
    "CommandError",
    "CommandExecutor",
    "CommandResult",
    "CommandValidationError",
    "NoReleaseError",
    "RemoteCommandError",
    "UnknownCommandError",
]
