"""Screens for KubeDeck."""

from kubedeck.screens.deck import DeckScreen

__all__ = ["DeckScreen"]
