"""Application service that sends study notes to the completion provider."""

import time

import structlog

from notecards.application.learning.prompts import SYSTEM_PROMPT, build_user_prompt
from notecards.application.learning.protocols.text_completion_provider import (
    TextCompletionProviderProtocol,
)
from notecards.domain.learning.errors import GenerationError
from notecards.domain.learning.generation import NoteInput, RawProviderOutput

logger = structlog.get_logger(__name__)


class FlashcardGenerationGateway:
    """
    Builds the generation prompt and makes a single provider call.

    No retries happen here; a failed call is reported once and the caller
    decides whether to try again.
    """

    def __init__(
        self,
        completion_provider: TextCompletionProviderProtocol,
        min_flashcards: int = 3,
        max_flashcards: int = 7,
    ) -> None:
        self.completion_provider = completion_provider
        self.min_flashcards = min_flashcards
        self.max_flashcards = max_flashcards

    def build_prompt(self, notes: NoteInput) -> str:
        return build_user_prompt(
            notes.value,
            min_flashcards=self.min_flashcards,
            max_flashcards=self.max_flashcards,
        )

    async def generate(self, notes: NoteInput) -> RawProviderOutput:
        """
        Request flashcards for the given notes.

        Args:
            notes: Validated study notes

        Returns:
            The provider's unmodified text

        Raises:
            GenerationError: Provider failure, rate limiting or quota exhaustion
        """
        prompt = self.build_prompt(notes)
        logger.info(
            "flashcard_generation_requested",
            notes_length=len(notes),
            notes_excerpt=notes.excerpt(),
            prompt_length=len(prompt),
            model_name=self.completion_provider.model_name,
        )

        started = time.perf_counter()
        try:
            text = await self.completion_provider.complete(SYSTEM_PROMPT, prompt)
        except GenerationError as e:
            logger.warning(
                "flashcard_generation_provider_failed",
                error_kind=e.kind.value,
                error=e.message,
                notes_excerpt=notes.excerpt(),
                duration_ms=round((time.perf_counter() - started) * 1000),
            )
            raise

        logger.info(
            "flashcard_generation_provider_succeeded",
            response_length=len(text),
            response_excerpt=text[:200],
            duration_ms=round((time.perf_counter() - started) * 1000),
        )
        return RawProviderOutput(text=text, model_name=self.completion_provider.model_name)
