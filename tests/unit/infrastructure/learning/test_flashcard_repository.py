"""Tests for the SQLAlchemy flashcard repository."""

from sqlalchemy.orm import Session

from notecards.application.learning.protocols.flashcard_repository import (
    FlashcardRepositoryProtocol,
)
from notecards.domain.common.value_objects import FlashcardId
from notecards.domain.learning.entities.flashcard import Flashcard
from notecards.domain.learning.generation import FlashcardDraft
from notecards.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)


class TestFlashcardRepository:
    def test_protocol_covers_what_use_cases_call(self) -> None:
        operations = {
            name for name in vars(FlashcardRepositoryProtocol) if not name.startswith("_")
        }
        assert operations == {"find_all", "save_all", "delete"}
        assert all(hasattr(FlashcardRepository, name) for name in operations)

    def test_save_all_then_delete(self, db_session: Session) -> None:
        repository = FlashcardRepository(db_session)
        saved = repository.save_all(
            [
                Flashcard.from_draft(FlashcardDraft("Q1", "A1"), notes="notes"),
                Flashcard.from_draft(FlashcardDraft("Q2", "A2"), notes="notes"),
            ]
        )

        assert [f.question for f in saved] == ["Q1", "Q2"]
        assert all(f.id.value > 0 for f in saved)

        assert repository.delete(saved[0].id) is True
        assert [f.question for f in repository.find_all()] == ["Q2"]

    def test_delete_missing_returns_false(self, db_session: Session) -> None:
        assert FlashcardRepository(db_session).delete(FlashcardId(424242)) is False
