"""Limit and threshold constants for the TUI.

All limit values, tail sizes, and validation ranges.
"""

from typing import Final

# ============================================================================
# Log limits
# ============================================================================

DEFAULT_LOG_TAIL_LINES: Final = 200
WORKLOAD_LOG_TAIL_LINES: Final = 100

# ============================================================================
# Display limits
# ============================================================================

MAX_SUGGESTIONS: Final = 5

# ============================================================================
# Validation limits
# ============================================================================

MAX_K8S_NAME_LENGTH: Final = 253
REFRESH_INTERVAL_MIN: Final = 0.5
LOG_TAIL_LINES_MIN: Final = 1
LOG_TAIL_LINES_MAX: Final = 10000

__all__ = [
    "DEFAULT_LOG_TAIL_LINES",
    "LOG_TAIL_LINES_MAX",
    "LOG_TAIL_LINES_MIN",
    "MAX_K8S_NAME_LENGTH",
    "MAX_SUGGESTIONS",
    "REFRESH_INTERVAL_MIN",
    "WORKLOAD_LOG_TAIL_LINES",
]
