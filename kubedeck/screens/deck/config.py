"""Deck screen configuration - table columns, tab labels and input prompts."""

from __future__ import annotations

from kubedeck.constants.enums import InputMode, ItemKind
from kubedeck.constants.values import (
    COLOR_PRIMARY,
    COLOR_RELEASE,
    COLOR_SECONDARY,
    COLOR_SUCCESS,
    COLOR_WARNING,
)

ITEM_TABLE_COLUMNS: list[tuple[str, int]] = [
    ("TYPE", 6),
    ("NAME", 40),
    ("STATUS", 18),
]

TAB_LABELS: dict[ItemKind, tuple[str, ...]] = {
    ItemKind.WORKLOAD: ("YAML", "Events", "Logs"),
    ItemKind.INSTANCE: ("YAML", "Logs"),
}

INPUT_PROMPTS: dict[InputMode, tuple[str, str]] = {
    InputMode.COMMAND: (":", "scale 3 | restart | rollback 2 | add <name> | remove <name> | fetch"),
    InputMode.FILTER: ("/", "Search..."),
    InputMode.SCALE: ("Scale to:", "Number of replicas"),
    InputMode.ROLLBACK: ("Rollback to revision:", "Revision number"),
    InputMode.ADD: ("Add deployment:", "Type to search deployments..."),
    InputMode.REMOVE: ("Remove deployment:", "Select deployment to remove..."),
}

# Shortcut modes build a command from the input value
SHORTCUT_VERBS: dict[InputMode, str] = {
    InputMode.SCALE: "scale",
    InputMode.ROLLBACK: "rollback",
    InputMode.ADD: "add",
    InputMode.REMOVE: "remove",
}

KIND_STYLES: dict[ItemKind, str] = {
    ItemKind.WORKLOAD: f"bold {COLOR_SECONDARY}",
    ItemKind.INSTANCE: COLOR_SUCCESS,
    ItemKind.RELEASE: COLOR_RELEASE,
    ItemKind.SECRET: COLOR_WARNING,
    ItemKind.CONFIG: "color(141)",
    ItemKind.HEADER: f"bold {COLOR_PRIMARY}",
}
