"""
Domain service that turns free-text provider output into flashcard drafts.

This is a pure domain service with no infrastructure dependencies. Each stage
either hands its result to the next one or fails with its own error kind;
stages never loop back, so a wrong JSON span is not retried with another one.

Accepted shapes for the pair list, in order:
    {"flashcards": [...]}
    {"cards": [...]}
    [...]
"""

import json
import math
import re

from notecards.domain.learning.errors import (
    EmptyResultError,
    MalformedOutputError,
    NoStructuredOutputError,
    UnexpectedShapeError,
)
from notecards.domain.learning.generation import (
    FlashcardDraft,
    GenerationResult,
    RawProviderOutput,
)

PAIR_LIST_KEYS = ("flashcards", "cards")

_OPENING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\s*```$")


def strip_code_fence(text: str) -> str:
    """
    Remove a surrounding markdown code fence.

    Handles both ```json and bare ``` openers. Text that does not start with
    a fence is only trimmed.
    """
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
        cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def extract_json_candidate(text: str) -> str | None:
    """
    Find the span most likely to hold the JSON document.

    The object span runs from the leftmost "{" to the rightmost "}". The
    array span ("[" ... "]") is used only when the text itself starts with
    "[", so brackets in surrounding prose never hide the object.

    Returns:
        The candidate span, or None if the text holds no such span
    """
    text = text.strip()
    if text.startswith("[") and text.rfind("]") > 0:
        return text[: text.rfind("]") + 1]

    object_start = text.find("{")
    object_end = text.rfind("}")
    if object_start != -1 and object_end > object_start:
        return text[object_start : object_end + 1]
    return None


def locate_pair_list(document: object) -> list[object] | None:
    """
    Find the list of question/answer items in a parsed document.

    A recognized key holding anything other than a list is a shape mismatch;
    the next key is not consulted.
    """
    if isinstance(document, list):
        return document
    if isinstance(document, dict):
        for key in PAIR_LIST_KEYS:
            if key in document:
                value = document[key]
                return value if isinstance(value, list) else None
    return None


def _reject_constant(name: str) -> object:
    raise ValueError(f"Non-standard JSON constant {name} is not allowed")


def _coerce_text(value: object) -> str | None:
    # bool is an int subclass; true/false are not card text
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        text = value.strip()
    elif isinstance(value, int):
        text = str(value)
    elif isinstance(value, float) and math.isfinite(value):
        text = str(value)
    else:
        return None
    return text or None


def coerce_draft(item: object) -> FlashcardDraft | None:
    """Build a draft from one list item, or None if the item is unusable."""
    if not isinstance(item, dict):
        return None
    question = _coerce_text(item.get("question"))
    answer = _coerce_text(item.get("answer"))
    if question is None or answer is None:
        return None
    return FlashcardDraft(question=question, answer=answer)


class FlashcardNormalizer:
    """
    Validates and cleans provider output into a GenerationResult.

    Malformed items are dropped one by one; only a list with no usable items
    fails the whole batch.
    """

    def __init__(self, max_flashcards: int = 7) -> None:
        if max_flashcards < 1:
            raise ValueError("max_flashcards must be at least 1")
        self.max_flashcards = max_flashcards

    def normalize(self, raw: RawProviderOutput) -> GenerationResult:
        """
        Run every normalization stage over the raw provider text.

        Args:
            raw: Unmodified provider output

        Returns:
            Drafts in provider order, at most ``max_flashcards`` of them

        Raises:
            NoStructuredOutputError: If no JSON span is present
            MalformedOutputError: If the span is not valid JSON
            UnexpectedShapeError: If no pair list is found in the document
            EmptyResultError: If no item has a usable question and answer
        """
        unwrapped = strip_code_fence(raw.text)

        candidate = extract_json_candidate(unwrapped)
        if candidate is None:
            raise NoStructuredOutputError()

        try:
            document = json.loads(candidate, parse_constant=_reject_constant)
        except ValueError as e:
            raise MalformedOutputError(str(e)) from e

        items = locate_pair_list(document)
        if items is None:
            raise UnexpectedShapeError()

        drafts = [draft for draft in (coerce_draft(item) for item in items) if draft]
        if not drafts:
            raise EmptyResultError(
                f"Expected at least one flashcard with a non-empty question and answer, "
                f"{len(items)} item(s) were rejected"
            )

        return GenerationResult(flashcards=tuple(drafts[: self.max_flashcards]))
