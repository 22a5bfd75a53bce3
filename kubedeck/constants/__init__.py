"""Constants module for KubeDeck TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, colors with Final)
- timeouts.py: Timeout values (seconds)
- limits.py: Limit values (max/min, tail sizes)
- defaults.py: Default values for settings
- patterns.py: Compiled regex patterns

Note: Keyboard bindings are defined in kubedeck.keyboard module.
"""

from kubedeck.constants.defaults import (
    LOG_FORMAT_MODE_DEFAULT,
    NAMESPACE_DEFAULT,
    THEME_DEFAULT,
)
from kubedeck.constants.enums import (
    CommandVerb,
    FetchState,
    InputMode,
    ItemKind,
    LogLevel,
)
from kubedeck.constants.limits import (
    DEFAULT_LOG_TAIL_LINES,
    MAX_K8S_NAME_LENGTH,
    WORKLOAD_LOG_TAIL_LINES,
)
from kubedeck.constants.timeouts import (
    MUTATING_COMMAND_TIMEOUT,
    READ_COMMAND_TIMEOUT,
    REFRESH_INTERVAL,
)
from kubedeck.constants.values import (
    APP_TITLE,
    COLOR_PRIMARY,
    COLOR_SECONDARY,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Colors
    "COLOR_PRIMARY",
    "COLOR_SECONDARY",
    # Limits
    "DEFAULT_LOG_TAIL_LINES",
    # Defaults
    "LOG_FORMAT_MODE_DEFAULT",
    "MAX_K8S_NAME_LENGTH",
    # Timeouts
    "MUTATING_COMMAND_TIMEOUT",
    "NAMESPACE_DEFAULT",
    "READ_COMMAND_TIMEOUT",
    "REFRESH_INTERVAL",
    "THEME_DEFAULT",
    "WORKLOAD_LOG_TAIL_LINES",
    # Enums
    "CommandVerb",
    "FetchState",
    "InputMode",
    "ItemKind",
    "LogLevel",
]
