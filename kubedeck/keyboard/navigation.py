"""Screen-specific keyboard bindings."""

from textual.binding import Binding

# ============================================================================
# Deck Screen Bindings
# ============================================================================

DECK_SCREEN_BINDINGS: list[Binding] = [
    # Selection
    Binding("j", "cursor_down", "Down", show=False),
    Binding("k", "cursor_up", "Up", show=False),
    Binding("1", "jump('1')", "Deployments", show=False),
    Binding("2", "jump('2')", "Releases", show=False),
    Binding("3", "jump('3')", "ConfigMaps", show=False),
    Binding("4", "jump('4')", "Secrets", show=False),
    Binding("5", "jump('5')", "Pods", show=False),
    Binding("tab", "next_tab", "Tab", priority=True),
    # Details pane
    Binding("f", "toggle_format", "Format"),
    Binding("y", "yank", "Yank"),
    Binding("ctrl+d", "scroll_details(1)", "Half page down", show=False),
    Binding("ctrl+u", "scroll_details(-1)", "Half page up", show=False),
    Binding("slash", "open_input('filter')", "Filter"),
    Binding("escape", "cancel", "Cancel", show=False),
    # Commands
    Binding("colon", "open_input('command')", "Command"),
    Binding("r", "restart_prefix", "rr Restart"),
    Binding("s", "open_input('scale')", "Scale"),
    Binding("R", "open_input('rollback')", "Rollback"),
    Binding("plus", "open_input('add')", "Add"),
    Binding("minus", "open_input('remove')", "Remove"),
    Binding("ctrl+f", "refresh", "Refresh"),
]

__all__ = [
    "DECK_SCREEN_BINDINGS",
]
