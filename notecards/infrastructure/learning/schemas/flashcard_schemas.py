"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class FlashcardBase(BaseModel):
    """Base schema for Flashcard."""

    question: str = Field(..., min_length=1, description="Question text for the flashcard")
    answer: str = Field(..., min_length=1, description="Answer text for the flashcard")


class Flashcard(FlashcardBase):
    """Schema for a saved flashcard."""

    id: int
    notes: str | None = None
    created_at: datetime

    model_config = {"from_attributes": True}


class GenerateFlashcardsRequest(BaseModel):
    """Schema for a generation request; notes are validated by the use case."""

    notes: Any = Field(None, description="Study notes to turn into flashcards")


class FlashcardDraftItem(BaseModel):
    """Schema for a single generated question/answer pair."""

    question: str = Field(..., description="Generated question")
    answer: str = Field(..., description="Generated answer")


class GenerateFlashcardsResponse(BaseModel):
    """Schema for a successful generation response."""

    flashcards: list[FlashcardDraftItem] = Field(
        ..., description="Generated flashcards in provider order"
    )


class GenerationErrorResponse(BaseModel):
    """Schema for a failed generation response."""

    error: str = Field(..., description="Short human-readable message")
    details: str = Field(..., description="What was expected")
    code: str = Field(..., description="Stable error kind")


class FlashcardsSaveRequest(BaseModel):
    """Schema for saving generated flashcards."""

    notes: str | None = Field(None, description="Notes the flashcards were generated from")
    flashcards: list[FlashcardBase] = Field(..., min_length=1, description="Flashcards to save")


class FlashcardsListResponse(BaseModel):
    """Schema for list of flashcards response."""

    flashcards: list[Flashcard] = Field(..., description="List of flashcards")


class FlashcardDeleteResponse(BaseModel):
    """Schema for flashcard deletion response."""

    success: bool = Field(..., description="Whether the deletion was successful")
    message: str = Field(..., description="Response message")
