"""Repository for Flashcard domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from notecards.domain.common.value_objects.ids import FlashcardId
from notecards.domain.learning.entities.flashcard import Flashcard
from notecards.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper
from notecards.models import Flashcard as FlashcardORM


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def find_all(self) -> list[Flashcard]:
        """
        Get all flashcards.

        Returns:
            List of flashcard entities ordered by created_at DESC
        """
        stmt = select(FlashcardORM).order_by(
            FlashcardORM.created_at.desc(), FlashcardORM.id.desc()
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def save_all(self, flashcards: list[Flashcard]) -> list[Flashcard]:
        """
        Insert new flashcards in one transaction.

        Args:
            flashcards: New flashcard entities (placeholder IDs)

        Returns:
            Saved flashcard entities in input order
        """
        orm_models = [self.mapper.to_orm(flashcard) for flashcard in flashcards]
        self.db.add_all(orm_models)
        self.db.commit()
        for orm_model in orm_models:
            self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def delete(self, flashcard_id: FlashcardId) -> bool:
        """
        Delete a flashcard.

        Returns:
            True if deleted, False if not found
        """
        flashcard_orm = self.db.get(FlashcardORM, flashcard_id.value)

        if not flashcard_orm:
            return False

        self.db.delete(flashcard_orm)
        self.db.commit()
        return True
