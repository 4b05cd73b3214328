"""Learning use cases."""

from .flashcard_use_case import FlashcardUseCase
from .generate_flashcards_use_case import GenerateFlashcardsUseCase

__all__ = ["FlashcardUseCase", "GenerateFlashcardsUseCase"]
