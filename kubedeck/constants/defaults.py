"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from pathlib import Path
from typing import Final

# ============================================================================
# Cluster defaults
# ============================================================================

NAMESPACE_DEFAULT: Final = "default"

# ============================================================================
# UI defaults
# ============================================================================

THEME_DEFAULT: Final = "textual-dark"
LOG_FORMAT_MODE_DEFAULT: Final = True

# ============================================================================
# Persistence defaults
# ============================================================================

SETTINGS_PATH_DEFAULT: Final = Path.home() / ".config" / "kubedeck" / "settings.json"
LOG_FILE_DEFAULT: Final = "/tmp/kubedeck.log"
LOG_LEVEL_ENV_VAR: Final = "KUBEDECK_LOG_LEVEL"

__all__ = [
    "LOG_FILE_DEFAULT",
    "LOG_FORMAT_MODE_DEFAULT",
    "LOG_LEVEL_ENV_VAR",
    "NAMESPACE_DEFAULT",
    "SETTINGS_PATH_DEFAULT",
    "THEME_DEFAULT",
]
