"""deckpad — a slide editor with a markdown dual representation."""

__version__ = "0.1.0"
