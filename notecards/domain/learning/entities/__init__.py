"""Learning context entities."""

from .flashcard import Flashcard

__all__ = ["Flashcard"]
