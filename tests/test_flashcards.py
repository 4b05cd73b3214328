"""Tests for saved flashcards API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from notecards import models
from tests.conftest import create_test_flashcard


class TestSaveFlashcards:
    """Test suite for POST /flashcards endpoint."""

    def test_save_flashcards_success(self, client: TestClient, db_session: Session) -> None:
        """Test saving generated flashcards with their notes."""
        response = client.post(
            "/api/v1/flashcards",
            json={
                "notes": "Mitochondria produce ATP.",
                "flashcards": [
                    {"question": "What produces ATP?", "answer": "Mitochondria"},
                    {"question": "What is ATP?", "answer": "The energy currency of the cell"},
                ],
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        saved = response.json()["flashcards"]
        assert [f["question"] for f in saved] == ["What produces ATP?", "What is ATP?"]
        assert all(f["notes"] == "Mitochondria produce ATP." for f in saved)
        assert all(f["id"] > 0 for f in saved)

        # Verify flashcards were created in database
        assert db_session.query(models.Flashcard).count() == 2

    def test_save_flashcards_without_notes(self, client: TestClient) -> None:
        """Test notes are optional when saving."""
        response = client.post(
            "/api/v1/flashcards",
            json={"flashcards": [{"question": "Q", "answer": "A"}]},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["flashcards"][0]["notes"] is None

    def test_save_flashcards_trims_text(self, client: TestClient) -> None:
        """Test surrounding whitespace is removed before saving."""
        response = client.post(
            "/api/v1/flashcards",
            json={"flashcards": [{"question": "  Q  ", "answer": "\tA\n"}]},
        )

        assert response.status_code == status.HTTP_201_CREATED
        flashcard = response.json()["flashcards"][0]
        assert flashcard["question"] == "Q"
        assert flashcard["answer"] == "A"

    def test_save_flashcards_empty_list(self, client: TestClient) -> None:
        """Test saving an empty list fails."""
        response = client.post("/api/v1/flashcards", json={"flashcards": []})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_save_flashcards_empty_question(self, client: TestClient) -> None:
        """Test saving a flashcard with an empty question fails."""
        response = client.post(
            "/api/v1/flashcards",
            json={"flashcards": [{"question": "", "answer": "A"}]},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT

    def test_save_flashcards_whitespace_answer(
        self, client: TestClient, db_session: Session
    ) -> None:
        """Test a whitespace-only answer is rejected by the domain."""
        response = client.post(
            "/api/v1/flashcards",
            json={"flashcards": [{"question": "Q", "answer": "   "}]},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
        assert db_session.query(models.Flashcard).count() == 0


class TestListFlashcards:
    """Test suite for GET /flashcards endpoint."""

    def test_list_flashcards_empty(self, client: TestClient) -> None:
        """Test listing when nothing is saved."""
        response = client.get("/api/v1/flashcards")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"flashcards": []}

    def test_list_flashcards_newest_first(self, client: TestClient, db_session: Session) -> None:
        """Test flashcards are returned newest first."""
        first = create_test_flashcard(db_session, question="First?", answer="1")
        second = create_test_flashcard(db_session, question="Second?", answer="2", notes=None)

        response = client.get("/api/v1/flashcards")

        assert response.status_code == status.HTTP_200_OK
        flashcards = response.json()["flashcards"]
        assert [f["id"] for f in flashcards] == [second.id, first.id]
        assert flashcards[0]["notes"] is None
        assert flashcards[1]["notes"] == "Mitochondria produce ATP."
        assert flashcards[1]["created_at"]


class TestDeleteFlashcard:
    """Test suite for DELETE /flashcards/:id endpoint."""

    def test_delete_flashcard_success(self, client: TestClient, db_session: Session) -> None:
        """Test successful deletion of a flashcard."""
        flashcard = create_test_flashcard(db_session)

        response = client.delete(f"/api/v1/flashcards/{flashcard.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"success": True, "message": "Flashcard deleted successfully"}
        assert db_session.query(models.Flashcard).filter_by(id=flashcard.id).first() is None

    def test_delete_flashcard_not_found(self, client: TestClient) -> None:
        """Test deleting a non-existent flashcard."""
        response = client.delete("/api/v1/flashcards/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "Flashcard with id 99999 not found"}

    def test_delete_flashcard_invalid_id(self, client: TestClient) -> None:
        """Test non-positive ids are rejected before reaching the database."""
        response = client.delete("/api/v1/flashcards/0")

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_CONTENT
