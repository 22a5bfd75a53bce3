"""Scalar constants for the TUI (titles, labels, colors)."""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KubeDeck"

# ============================================================================
# Release discovery keys (checked in this order, first non-empty wins)
# ============================================================================

RELEASE_ANNOTATION_KEY: Final = "meta.helm.sh/release-name"
RELEASE_LABEL_KEY: Final = "meta.helm.sh/release-name"
RELEASE_FALLBACK_LABEL_KEY: Final = "app.kubernetes.io/instance"

# ============================================================================
# Item statuses
# ============================================================================

STATUS_WORKLOAD: Final = "Active"
STATUS_RELEASE: Final = "Release"
STATUS_REFERENCE: Final = "Ref"
STATUS_ERROR_TAG: Final = "(error)"

# ============================================================================
# Colors (Rich color names)
# ============================================================================

COLOR_PRIMARY: Final = "color(62)"
COLOR_SECONDARY: Final = "color(39)"
COLOR_SUCCESS: Final = "color(42)"
COLOR_ERROR: Final = "color(196)"
COLOR_WARNING: Final = "color(220)"
COLOR_MUTED: Final = "color(240)"
COLOR_TRACE: Final = "color(238)"
COLOR_DEFAULT: Final = "color(255)"
COLOR_RELEASE: Final = "color(201)"

# Source prefix palette for multi-source logs
SOURCE_COLOR_PALETTE: Final = (
    "color(39)",  # Cyan
    "color(42)",  # Green
    "color(220)",  # Yellow
    "color(201)",  # Magenta
    "color(141)",  # Purple
    "color(208)",  # Orange
    "color(51)",  # Light Blue
    "color(82)",  # Light Green
    "color(213)",  # Pink
    "color(228)",  # Light Yellow
)

SOURCE_PREFIX_ICON: Final = "●"

__all__ = [
    "APP_TITLE",
    "COLOR_DEFAULT",
    "COLOR_ERROR",
    "COLOR_MUTED",
    "COLOR_PRIMARY",
    "COLOR_RELEASE",
    "COLOR_SECONDARY",
    "COLOR_SUCCESS",
    "COLOR_TRACE",
    "COLOR_WARNING",
    "RELEASE_ANNOTATION_KEY",
    "RELEASE_FALLBACK_LABEL_KEY",
    "RELEASE_LABEL_KEY",
    "SOURCE_COLOR_PALETTE",
    "SOURCE_PREFIX_ICON",
    "STATUS_ERROR_TAG",
    "STATUS_REFERENCE",
    "STATUS_RELEASE",
    "STATUS_WORKLOAD",
]
