"""
Flashcard entity for saved study cards.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime

from notecards.domain.common.entity import Entity
from notecards.domain.common.exceptions import ValidationError
from notecards.domain.common.value_objects import FlashcardId
from notecards.domain.learning.generation import FlashcardDraft


@dataclass
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard saved from a generation.

    Business Rules:
    - Question and answer cannot be empty
    - Keeps the notes it was generated from
    """

    id: FlashcardId
    question: str
    answer: str
    notes: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.question or not self.question.strip():
            raise ValidationError("Question cannot be empty", field="question")
        if not self.answer or not self.answer.strip():
            raise ValidationError("Answer cannot be empty", field="answer")

    @classmethod
    def from_draft(cls, draft: FlashcardDraft, notes: str | None = None) -> "Flashcard":
        """Create a new flashcard from a generated draft (ID will be 0 until persisted)."""
        return cls(
            id=FlashcardId.generate(),
            question=draft.question,
            answer=draft.answer,
            notes=notes.strip() if notes else None,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        question: str,
        answer: str,
        notes: str | None,
        created_at: datetime,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            question=question,
            answer=answer,
            notes=notes,
            created_at=created_at,
        )
