"""A card-matching memory game played with the mouse."""

__version__ = "0.1.0"
__all__ = ["cards", "game", "hit", "mouse"]