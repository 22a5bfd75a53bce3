"""Errors raised by the kubectl/helm collaborator."""

from __future__ import annotations


class KubeError(Exception):
    """Base exception for remote cluster calls."""


class KubeCommandError(KubeError):
    """A kubectl or helm invocation failed."""

    def __init__(self, message: str, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class KubeTimeoutError(KubeError):
    """A kubectl or helm invocation did not finish within its timeout."""

    def __init__(self, command: str, timeout: float) -> None:
        super().__init__(f"{command} timed out after {timeout:g}s")
        self.command = command
        self.timeout = timeout


def humanize_error(stderr: str, resource: str, name: str) -> str:
    """Translate CLI error output into a short message.

    Unrecognised output is returned as-is.
    """
    text = stderr.strip()
    lowered = text.lower()
    if "notfound" in lowered or "not found" in lowered:
        return f"{resource} '{name}' not found"
    if "forbidden" in lowered:
        return f"permission denied accessing {resource} '{name}'"
    if "unauthorized" in lowered or "must be logged in" in lowered:
        return "authentication failed"
    if "timeout" in lowered or "timed out" in lowered or "deadline exceeded" in lowered:
        return "kubernetes API timeout"
    if "the object has been modified" in lowered or "conflict" in lowered:
        return f"{resource} '{name}' was modified, please retry"
    if "is invalid" in lowered:
        return f"invalid {resource} specification: {text}"
    return text or f"{resource} '{name}' request failed"
