"""Use case for generating flashcards from study notes."""

import structlog

from notecards.application.learning.services.generation_gateway import (
    FlashcardGenerationGateway,
)
from notecards.domain.learning.errors import GenerationError
from notecards.domain.learning.generation import GenerationResult, NoteInput
from notecards.domain.learning.services.flashcard_normalizer import FlashcardNormalizer

logger = structlog.get_logger(__name__)

_LOGGED_INPUT_LENGTH = 100


def _truncate(value: object) -> str:
    text = value if isinstance(value, str) else repr(value)
    if len(text) <= _LOGGED_INPUT_LENGTH:
        return text
    return text[:_LOGGED_INPUT_LENGTH] + "..."


class GenerateFlashcardsUseCase:
    """Use case for turning notes into an ordered list of flashcard drafts."""

    def __init__(
        self,
        gateway: FlashcardGenerationGateway,
        normalizer: FlashcardNormalizer,
    ) -> None:
        self.gateway = gateway
        self.normalizer = normalizer

    async def generate(self, notes: object) -> GenerationResult:
        """
        Generate flashcards for raw request notes.

        Notes are validated before anything else; invalid notes never reach
        the provider.

        Args:
            notes: The untrusted ``notes`` value from the request

        Returns:
            Non-empty GenerationResult in provider order

        Raises:
            GenerationError: For any failure, see GenerationErrorKind
        """
        try:
            note_input = NoteInput.parse(notes)
            raw = await self.gateway.generate(note_input)
            result = self.normalizer.normalize(raw)
        except GenerationError as e:
            logger.error(
                "flashcard_generation_failed",
                error_kind=e.kind.value,
                error=e.message,
                details=e.detail_message,
                notes_excerpt=_truncate(notes),
            )
            raise

        logger.info(
            "flashcard_generation_succeeded",
            flashcard_count=len(result),
            model_name=raw.model_name,
        )
        return result
