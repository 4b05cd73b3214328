"""Tests for the generation gateway and GenerateFlashcardsUseCase."""

import pytest

from notecards.application.learning.prompts import SYSTEM_PROMPT, build_user_prompt
from notecards.application.learning.services.generation_gateway import (
    FlashcardGenerationGateway,
)
from notecards.application.learning.use_cases.generate_flashcards_use_case import (
    GenerateFlashcardsUseCase,
)
from notecards.domain.learning.errors import (
    EmptyResultError,
    GenerationErrorKind,
    InvalidInputError,
    ProviderError,
    QuotaExceededError,
    RateLimitedError,
)
from notecards.domain.learning.generation import NoteInput
from notecards.domain.learning.services.flashcard_normalizer import FlashcardNormalizer
from tests.conftest import FakeCompletionProvider

NOTES = "The mitochondria is the powerhouse of the cell. It generates ATP."


def _use_case(provider: FakeCompletionProvider) -> GenerateFlashcardsUseCase:
    return GenerateFlashcardsUseCase(
        gateway=FlashcardGenerationGateway(provider, min_flashcards=3, max_flashcards=7),
        normalizer=FlashcardNormalizer(max_flashcards=7),
    )


class TestBuildUserPrompt:
    def test_embeds_notes_verbatim(self) -> None:
        notes = "Line one {with braces}\n  Line two"
        assert notes in build_user_prompt(notes)

    def test_states_count_and_shape(self) -> None:
        prompt = build_user_prompt("notes", min_flashcards=3, max_flashcards=7)
        assert "Generate 3-7 educational flashcards" in prompt
        assert '"flashcards": [' in prompt
        assert '"question"' in prompt
        assert '"answer"' in prompt

    def test_single_count(self) -> None:
        assert "Generate 5 educational" in build_user_prompt("n", 5, 5)

    def test_is_deterministic(self) -> None:
        assert build_user_prompt(NOTES) == build_user_prompt(NOTES)


class TestFlashcardGenerationGateway:
    @pytest.mark.asyncio
    async def test_makes_exactly_one_call(self) -> None:
        provider = FakeCompletionProvider(response='{"flashcards": []}')
        gateway = FlashcardGenerationGateway(provider)

        raw = await gateway.generate(NoteInput.parse(NOTES))

        assert raw.text == '{"flashcards": []}'
        assert raw.model_name == "fake-model"
        assert len(provider.calls) == 1
        system_prompt, user_prompt = provider.calls[0]
        assert system_prompt == SYSTEM_PROMPT
        assert NOTES in user_prompt

    @pytest.mark.asyncio
    async def test_provider_error_is_not_retried(self) -> None:
        provider = FakeCompletionProvider(error=ProviderError("Internal error", 500))
        gateway = FlashcardGenerationGateway(provider)

        with pytest.raises(ProviderError) as exc_info:
            await gateway.generate(NoteInput.parse(NOTES))

        assert len(provider.calls) == 1
        assert exc_info.value.provider_status == 500
        assert "Internal error" in exc_info.value.message


class TestGenerateFlashcardsUseCase:
    @pytest.mark.asyncio
    async def test_generates_flashcards(self) -> None:
        provider = FakeCompletionProvider(
            response='```json\n{"flashcards": [{"question": "Q1", "answer": "A1"}]}\n```'
        )

        result = await _use_case(provider).generate(NOTES)

        assert result.to_primitive() == [{"question": "Q1", "answer": "A1"}]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("notes", [None, "", "    ", "\n", "x" * 5001, 123])
    async def test_invalid_notes_make_no_provider_call(self, notes: object) -> None:
        provider = FakeCompletionProvider(response='{"flashcards": []}')

        with pytest.raises(InvalidInputError):
            await _use_case(provider).generate(notes)

        assert provider.calls == []

    @pytest.mark.asyncio
    async def test_rate_limit_and_quota_have_distinct_kinds(self) -> None:
        rate_limited = FakeCompletionProvider(error=RateLimitedError("Too many requests", 429))
        out_of_quota = FakeCompletionProvider(error=QuotaExceededError("Payment required", 402))

        with pytest.raises(RateLimitedError) as rate_info:
            await _use_case(rate_limited).generate(NOTES)
        with pytest.raises(QuotaExceededError) as quota_info:
            await _use_case(out_of_quota).generate(NOTES)

        assert rate_info.value.kind is GenerationErrorKind.RATE_LIMITED
        assert quota_info.value.kind is GenerationErrorKind.QUOTA_EXCEEDED
        assert rate_info.value.kind != quota_info.value.kind
        assert rate_info.value.status_code == 429
        assert quota_info.value.status_code == 402

    @pytest.mark.asyncio
    async def test_empty_result_is_failure(self) -> None:
        provider = FakeCompletionProvider(
            response='{"flashcards": [{"question": "Q", "answer": ""}]}'
        )

        with pytest.raises(EmptyResultError):
            await _use_case(provider).generate(NOTES)

    @pytest.mark.asyncio
    async def test_repeated_calls_are_independent(self) -> None:
        provider = FakeCompletionProvider(
            response='{"flashcards": [{"question": "Q", "answer": "A"}, {"question": "", "answer": "x"}]}'
        )
        use_case = _use_case(provider)

        first = await use_case.generate(NOTES)
        second = await use_case.generate(NOTES)

        assert first == second
        assert len(provider.calls) == 2
