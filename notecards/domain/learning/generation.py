"""
Value objects for the note-to-flashcard generation pipeline.

NoteInput and GenerationResult are request scoped; nothing here is persisted.
"""

from collections.abc import Iterator
from dataclasses import dataclass

from notecards.domain.common.exceptions import InvariantViolationError
from notecards.domain.common.value_object import ValueObject
from notecards.domain.learning.errors import EmptyResultError, InvalidInputError

MAX_NOTES_LENGTH = 5000
NOTES_EXCERPT_LENGTH = 100


@dataclass(frozen=True)
class NoteInput(ValueObject):
    """
    Study notes submitted for generation.

    Business Rules:
    - Must be a string
    - Cannot be empty after trimming
    - At most 5000 characters
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidInputError("Notes are required and must be a non-empty string")
        if not self.value.strip():
            raise InvalidInputError("Notes are required and must be a non-empty string")
        if len(self.value) > MAX_NOTES_LENGTH:
            raise InvalidInputError(
                f"Notes must be at most {MAX_NOTES_LENGTH} characters",
                f"Received {len(self.value)} characters, the limit is {MAX_NOTES_LENGTH}",
            )

    @classmethod
    def parse(cls, raw: object) -> "NoteInput":
        """
        Build NoteInput from an untrusted request value.

        Raises:
            InvalidInputError: If the value is missing, not a string, blank or too long
        """
        if raw is None:
            raise InvalidInputError("Notes are required and must be a non-empty string")
        return cls(raw)  # type: ignore[arg-type]

    def excerpt(self, limit: int = NOTES_EXCERPT_LENGTH) -> str:
        """Prefix of the notes that is safe to put in logs."""
        if len(self.value) <= limit:
            return self.value
        return self.value[:limit] + "..."

    def __len__(self) -> int:
        return len(self.value)


@dataclass(frozen=True)
class FlashcardDraft(ValueObject):
    """A generated question/answer pair before persistence."""

    question: str
    answer: str

    def __post_init__(self) -> None:
        if not self.question or not self.question.strip():
            raise InvariantViolationError("FlashcardDraft", "question cannot be empty")
        if not self.answer or not self.answer.strip():
            raise InvariantViolationError("FlashcardDraft", "answer cannot be empty")

    @classmethod
    def create(cls, question: str, answer: str) -> "FlashcardDraft":
        """Create a draft with surrounding whitespace removed."""
        return cls(question=question.strip(), answer=answer.strip())

    def to_primitive(self) -> dict[str, str]:
        return {"question": self.question, "answer": self.answer}


@dataclass(frozen=True)
class GenerationResult(ValueObject):
    """
    Ordered, non-empty sequence of drafts from one generation.

    Order is the provider's own order.
    """

    flashcards: tuple[FlashcardDraft, ...]

    def __post_init__(self) -> None:
        if not self.flashcards:
            raise EmptyResultError()

    def __iter__(self) -> Iterator[FlashcardDraft]:
        return iter(self.flashcards)

    def __len__(self) -> int:
        return len(self.flashcards)

    def to_primitive(self) -> list[dict[str, str]]:
        return [draft.to_primitive() for draft in self.flashcards]


@dataclass(frozen=True)
class RawProviderOutput(ValueObject):
    """Unmodified text returned by the completion provider."""

    text: str
    model_name: str | None = None
