"""Timeout constants for the TUI.

All timeout and interval values for kubectl/helm requests and refresh cycles.
"""

from typing import Final

# ============================================================================
# Process-level command timeouts (float, in seconds)
# ============================================================================

# Read operations (descriptor, pod list, logs, events)
READ_COMMAND_TIMEOUT: Final = 2.0

# Mutating control actions (scale, restart, rollback)
MUTATING_COMMAND_TIMEOUT: Final = 5.0

# ============================================================================
# Refresh cycles (float, in seconds)
# ============================================================================

REFRESH_INTERVAL: Final = 1.0
STATUS_MESSAGE_TIMEOUT: Final = 2.0

__all__ = [
    "MUTATING_COMMAND_TIMEOUT",
    "READ_COMMAND_TIMEOUT",
    "REFRESH_INTERVAL",
    "STATUS_MESSAGE_TIMEOUT",
]
