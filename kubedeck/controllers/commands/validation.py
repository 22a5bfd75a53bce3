"""Command parsing and input validation."""

from __future__ import annotations

from dataclasses import dataclass

from kubedeck.constants.limits import MAX_K8S_NAME_LENGTH
from kubedeck.constants.patterns import K8S_NAME_PATTERN, POSITIVE_INTEGER_PATTERN


class CommandError(Exception):
    """Base exception for command failures."""


class CommandValidationError(CommandError):
    """Input was rejected before any remote call."""


class NoReleaseError(CommandValidationError):
    """The workload has no Helm release to act on."""

    def __init__(self) -> None:
        super().__init__("No Helm release associated")


class UnknownCommandError(CommandValidationError):
    """The verb is not recognised."""

    def __init__(self, verb: str) -> None:
        super().__init__(f"Unknown command: {verb}" if verb else "Empty command")
        self.verb = verb


class RemoteCommandError(CommandError):
    """A validated command failed on the cluster."""

    def __init__(self, action: str, cause: Exception) -> None:
        super().__init__(f"{action} failed: {cause}")
        self.action = action
        self.cause = cause


@dataclass(frozen=True)
class ParsedCommand:
    verb: str
    args: tuple[str, ...] = ()

    @property
    def argument(self) -> str:
        return self.args[0] if self.args else ""


def parse_command(text: str) -> ParsedCommand:
    """Split command input into a lower-cased verb and its arguments.

    A leading ``:`` is accepted and ignored.
    """
    parts = text.strip().removeprefix(":").split()
    if not parts:
        return ParsedCommand(verb="")
    return ParsedCommand(verb=parts[0].lower(), args=tuple(parts[1:]))


def is_positive_integer(value: str) -> bool:
    """Digits only and not zero. Signs, spaces and decimals are rejected."""
    return POSITIVE_INTEGER_PATTERN.fullmatch(value) is not None and int(value) > 0


def is_valid_k8s_name(name: str) -> bool:
    """DNS-1123 subdomain-style name check used for deployment names."""
    return (
        0 < len(name) <= MAX_K8S_NAME_LENGTH
        and K8S_NAME_PATTERN.fullmatch(name) is not None
    )


def require_positive_integer(value: str, label: str, usage: str) -> int:
    if not value:
        raise CommandValidationError(f"Usage: {usage}")
    if not is_positive_integer(value):
        raise CommandValidationError(f"Invalid {label}: {value}")
    return int(value)


def require_workload(workload: str | None) -> str:
    if not workload:
        raise CommandValidationError("No deployment selected")
    return workload
