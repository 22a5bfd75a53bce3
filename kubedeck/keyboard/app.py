"""Bindings active on every KubeDeck screen."""

from textual.binding import Binding

APP_BINDINGS: list[Binding] = [
    Binding("q", "app.quit", "Quit"),
    Binding("ctrl+c", "app.quit", "Quit", show=False, priority=True),
]

__all__ = [
    "APP_BINDINGS",
]
