"""API routes for saved flashcard management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status

from notecards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from notecards.core import container
from notecards.domain.common.exceptions import DomainError
from notecards.domain.learning.entities.flashcard import Flashcard as FlashcardEntity
from notecards.domain.learning.generation import FlashcardDraft
from notecards.exceptions import NotecardsError
from notecards.infrastructure.common.di import inject_use_case
from notecards.infrastructure.learning.schemas import (
    Flashcard,
    FlashcardDeleteResponse,
    FlashcardsListResponse,
    FlashcardsSaveRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


def _to_schema(flashcard: FlashcardEntity) -> Flashcard:
    return Flashcard(
        id=flashcard.id.value,
        question=flashcard.question,
        answer=flashcard.answer,
        notes=flashcard.notes,
        created_at=flashcard.created_at,
    )


@router.get("", response_model=FlashcardsListResponse, status_code=status.HTTP_200_OK)
def list_flashcards(
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardsListResponse:
    """Get all saved flashcards, newest first."""
    flashcards = use_case.list_flashcards()
    return FlashcardsListResponse(flashcards=[_to_schema(f) for f in flashcards])


@router.post("", response_model=FlashcardsListResponse, status_code=status.HTTP_201_CREATED)
def save_flashcards(
    request: FlashcardsSaveRequest,
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardsListResponse:
    """
    Save generated flashcards.

    Args:
        request: Flashcards to save and the notes they came from
        use_case: FlashcardUseCase injected via dependency container

    Returns:
        Saved flashcards in request order

    Raises:
        HTTPException: If saving fails
    """
    try:
        drafts = [FlashcardDraft.create(f.question, f.answer) for f in request.flashcards]
        saved = use_case.save_generated(request.notes, drafts)
        return FlashcardsListResponse(flashcards=[_to_schema(f) for f in saved])
    except DomainError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=e.message
        ) from e
    except NotecardsError:
        raise
    except Exception as e:
        logger.error(f"Failed to save flashcards: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{flashcard_id}",
    response_model=FlashcardDeleteResponse,
    status_code=status.HTTP_200_OK,
)
def delete_flashcard(
    flashcard_id: Annotated[int, Path(ge=1)],
    use_case: FlashcardUseCase = Depends(inject_use_case(container.flashcard_use_case)),
) -> FlashcardDeleteResponse:
    """
    Delete a flashcard.

    Raises:
        HTTPException: If flashcard not found or deletion fails
    """
    try:
        use_case.delete_flashcard(flashcard_id=flashcard_id)
        return FlashcardDeleteResponse(
            success=True,
            message="Flashcard deleted successfully",
        )
    except NotecardsError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete flashcard {flashcard_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
