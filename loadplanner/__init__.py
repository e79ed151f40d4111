"""ULD load planning for aircraft cargo decks."""

__version__ = "1.0.0"
