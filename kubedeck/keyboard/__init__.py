"""Keyboard bindings module.

- app: App-level bindings (APP_BINDINGS)
- navigation: Screen-specific bindings (DECK_SCREEN_BINDINGS)
"""

from kubedeck.keyboard.app import APP_BINDINGS
from kubedeck.keyboard.navigation import DECK_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "DECK_SCREEN_BINDINGS",
]
