"""AI-powered flashcard generation from study notes."""

import structlog
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from notecards.application.learning.use_cases.generate_flashcards_use_case import (
    GenerateFlashcardsUseCase,
)
from notecards.core import container
from notecards.domain.learning.errors import GenerationError
from notecards.infrastructure.common.di import resolve
from notecards.infrastructure.learning.schemas import (
    FlashcardDraftItem,
    GenerateFlashcardsRequest,
    GenerateFlashcardsResponse,
    GenerationErrorResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["generation"])

GENERATION_PATH = "/generate-flashcards"


@router.post(
    GENERATION_PATH,
    response_model=GenerateFlashcardsResponse,
    status_code=status.HTTP_200_OK,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": GenerationErrorResponse},
        status.HTTP_402_PAYMENT_REQUIRED: {"model": GenerationErrorResponse},
        status.HTTP_429_TOO_MANY_REQUESTS: {"model": GenerationErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": GenerationErrorResponse},
    },
)
async def generate_flashcards(
    request: GenerateFlashcardsRequest,
    use_case: GenerateFlashcardsUseCase = Depends(
        resolve(container.generate_flashcards_use_case)
    ),
) -> GenerateFlashcardsResponse | JSONResponse:
    """
    Generate question/answer flashcards from study notes.

    Makes one AI provider call. Nothing is saved; the caller persists the
    result through the flashcards endpoints.
    """
    try:
        result = await use_case.generate(request.notes)
    except GenerationError:
        raise
    except Exception as e:
        logger.error("flashcard_generation_unexpected_error", error=str(e), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "An unexpected error occurred. Please try again later.",
                "details": "Failed to generate flashcards from the provided notes",
                "code": "internal_error",
            },
        )

    return GenerateFlashcardsResponse(
        flashcards=[
            FlashcardDraftItem(question=draft.question, answer=draft.answer) for draft in result
        ]
    )
