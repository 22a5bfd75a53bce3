"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Resource Enums
# =============================================================================

class ItemKind(Enum):
    """Kinds of rows in the topology list, valued by their display code."""

    WORKLOAD = "DEP"
    INSTANCE = "POD"
    RELEASE = "HELM"
    SECRET = "SEC"
    CONFIG = "CM"
    HEADER = "HDR"


class LogLevel(Enum):
    """Severity keywords recognised in log lines."""

    FATAL = "FATAL"
    ERROR = "ERROR"
    ERR = "ERR"
    WARN = "WARN"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"
    TRACE = "TRACE"


# =============================================================================
# Fetch State Enums
# =============================================================================

class FetchState(Enum):
    """Data fetch state values."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


# =============================================================================
# Input Enums
# =============================================================================

class InputMode(Enum):
    """Command bar modes of the deck screen."""

    NONE = ""
    COMMAND = "command"
    FILTER = "filter"
    SCALE = "scale"
    ROLLBACK = "rollback"
    ADD = "add"
    REMOVE = "remove"


class CommandVerb(Enum):
    """Verbs accepted by the command executor."""

    SCALE = "scale"
    RESTART = "restart"
    ROLLBACK = "rollback"
    ADD = "add"
    REMOVE = "remove"
    FETCH = "fetch"


__all__ = [
    "CommandVerb",
    "FetchState",
    "InputMode",
    "ItemKind",
    "LogLevel",
]
