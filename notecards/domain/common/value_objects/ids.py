from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class FlashcardId(EntityId):
    """Strongly-typed flashcard identifier."""

    value: int
