"""Mapper for Flashcard ORM ↔ Domain conversion."""

from notecards.domain.common.value_objects import FlashcardId
from notecards.domain.learning.entities.flashcard import Flashcard
from notecards.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            question=orm_model.question,
            answer=orm_model.answer,
            notes=orm_model.notes,
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Flashcard) -> FlashcardORM:
        """Convert a new domain entity to an ORM model; the database assigns id and created_at."""
        return FlashcardORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            question=domain_entity.question,
            answer=domain_entity.answer,
            notes=domain_entity.notes,
        )
