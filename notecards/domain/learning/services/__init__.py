"""Learning context domain services."""

from .flashcard_normalizer import FlashcardNormalizer

__all__ = ["FlashcardNormalizer"]
