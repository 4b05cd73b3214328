"""Learning context schemas."""

from notecards.infrastructure.learning.schemas.flashcard_schemas import (
    Flashcard,
    FlashcardBase,
    FlashcardDeleteResponse,
    FlashcardDraftItem,
    FlashcardsListResponse,
    FlashcardsSaveRequest,
    GenerateFlashcardsRequest,
    GenerateFlashcardsResponse,
    GenerationErrorResponse,
)

__all__ = [
    "Flashcard",
    "FlashcardBase",
    "FlashcardDeleteResponse",
    "FlashcardDraftItem",
    "FlashcardsListResponse",
    "FlashcardsSaveRequest",
    "GenerateFlashcardsRequest",
    "GenerateFlashcardsResponse",
    "GenerationErrorResponse",
]
