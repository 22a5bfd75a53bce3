"""Deck screen module."""

from kubedeck.screens.deck.deck_screen import DeckScreen
from kubedeck.screens.deck.presenter import DeckPresenter

__all__ = ["DeckPresenter", "DeckScreen"]
