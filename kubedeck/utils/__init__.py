"""Utility helpers for KubeDeck."""
