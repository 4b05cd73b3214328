"""Use case for saved flashcard operations."""

import structlog

from notecards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from notecards.domain.common.value_objects.ids import FlashcardId
from notecards.domain.learning.entities.flashcard import Flashcard
from notecards.domain.learning.generation import FlashcardDraft
from notecards.exceptions import FlashcardNotFoundError

logger = structlog.get_logger(__name__)


class FlashcardUseCase:
    """Use case for saving, listing and deleting flashcards."""

    def __init__(self, flashcard_repository: FlashcardRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.flashcard_repository = flashcard_repository

    def save_generated(self, notes: str | None, drafts: list[FlashcardDraft]) -> list[Flashcard]:
        """
        Persist generated drafts together with the notes they came from.

        Args:
            notes: Source notes (optional)
            drafts: Question/answer drafts in display order

        Returns:
            Saved flashcard entities in the same order
        """
        flashcards = [Flashcard.from_draft(draft, notes) for draft in drafts]
        saved = self.flashcard_repository.save_all(flashcards)

        logger.info("saved_flashcards", flashcard_count=len(saved))
        return saved

    def list_flashcards(self) -> list[Flashcard]:
        """Get all flashcards, newest first."""
        return self.flashcard_repository.find_all()

    def delete_flashcard(self, flashcard_id: int) -> None:
        """
        Delete a flashcard.

        Args:
            flashcard_id: ID of the flashcard to delete

        Raises:
            FlashcardNotFoundError: If flashcard is not found
        """
        deleted = self.flashcard_repository.delete(FlashcardId(flashcard_id))
        if not deleted:
            raise FlashcardNotFoundError(flashcard_id)

        logger.info("deleted_flashcard", flashcard_id=flashcard_id)
