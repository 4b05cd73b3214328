"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from notecards.domain.common.value_objects.ids import FlashcardId
from notecards.domain.learning.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def find_all(self) -> list[Flashcard]:
        """
        Get all flashcards.

        Returns:
            List of flashcard entities ordered by created_at DESC
        """
        ...

    def save_all(self, flashcards: list[Flashcard]) -> list[Flashcard]:
        """
        Insert new flashcards in one transaction.

        Returns:
            Saved entities with database-generated values, in input order
        """
        ...

    def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        ...
