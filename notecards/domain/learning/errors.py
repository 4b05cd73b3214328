"""
Errors raised while turning notes into flashcards.

Every failure of the generation pipeline is a ``GenerationError`` with a
stable ``kind`` so callers can branch on it without matching message text.
All kinds are terminal for the request; nothing here is retried.
"""

from enum import StrEnum

from notecards.domain.common.exceptions import DomainError


class GenerationErrorKind(StrEnum):
    """Stable identifiers for generation failures."""

    INVALID_INPUT = "invalid_input"
    PROVIDER_UNAVAILABLE = "provider_unavailable"
    PROVIDER_ERROR = "provider_error"
    RATE_LIMITED = "rate_limited"
    QUOTA_EXCEEDED = "quota_exceeded"
    NO_STRUCTURED_OUTPUT = "no_structured_output"
    MALFORMED_OUTPUT = "malformed_output"
    UNEXPECTED_SHAPE = "unexpected_shape"
    EMPTY_RESULT = "empty_result"


class GenerationError(DomainError):
    """
    Base exception for flashcard generation failures.

    Attributes:
        kind: Stable error kind
        message: Short human-readable message
        detail_message: Secondary string describing what was expected
        details: Structured context, holds the error kind
        status_code: HTTP status the error maps to
    """

    kind: GenerationErrorKind = GenerationErrorKind.PROVIDER_ERROR
    status_code: int = 500
    default_details: str = "Failed to generate flashcards from the provided notes"

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message, {"kind": self.kind.value})
        self.detail_message = details or self.default_details

    def to_response(self) -> dict[str, str]:
        """Body returned to the caller."""
        return {"error": self.message, "details": self.detail_message, "code": self.kind.value}


class InvalidInputError(GenerationError):
    """Notes failed validation; no provider call was made."""

    kind = GenerationErrorKind.INVALID_INPUT
    status_code = 400
    default_details = "Notes must be a non-empty string of at most 5000 characters"


class ProviderUnavailableError(GenerationError):
    """The provider could not be reached, timed out, or is not configured."""

    kind = GenerationErrorKind.PROVIDER_UNAVAILABLE
    default_details = "The AI provider could not be reached"


class ProviderError(GenerationError):
    """The provider answered with a non-success response."""

    kind = GenerationErrorKind.PROVIDER_ERROR
    default_details = "The AI provider returned an error response"

    def __init__(
        self,
        provider_message: str,
        provider_status: int | None = None,
        details: str | None = None,
    ) -> None:
        self.provider_status = provider_status
        self.provider_message = provider_message
        if provider_status is not None:
            message = f"AI provider error ({provider_status}): {provider_message}"
        else:
            message = f"AI provider error: {provider_message}"
        super().__init__(message, details)


class RateLimitedError(ProviderError):
    """The provider is rate limiting requests."""

    kind = GenerationErrorKind.RATE_LIMITED
    status_code = 429
    default_details = "Rate limit exceeded, please wait a moment and try again"


class QuotaExceededError(ProviderError):
    """The provider refused the request for billing or quota reasons."""

    kind = GenerationErrorKind.QUOTA_EXCEEDED
    status_code = 402
    default_details = "The AI provider account has run out of credits or quota"


class NoStructuredOutputError(GenerationError):
    """No JSON object or array could be found in the provider output."""

    kind = GenerationErrorKind.NO_STRUCTURED_OUTPUT
    default_details = "Expected a JSON object in the AI response"

    def __init__(self, details: str | None = None) -> None:
        super().__init__("No valid JSON found in AI response", details)


class MalformedOutputError(GenerationError):
    """The located JSON candidate failed to parse."""

    kind = GenerationErrorKind.MALFORMED_OUTPUT

    def __init__(self, parser_error: str) -> None:
        self.parser_error = parser_error
        super().__init__(
            "Failed to parse AI response as JSON",
            f"Expected valid JSON, parser reported: {parser_error}",
        )


class UnexpectedShapeError(GenerationError):
    """Parsed JSON did not hold a recognizable list of flashcards."""

    kind = GenerationErrorKind.UNEXPECTED_SHAPE
    default_details = (
        'Expected {"flashcards": [...]}, {"cards": [...]} or a top-level list of flashcards'
    )

    def __init__(self, details: str | None = None) -> None:
        super().__init__("Invalid response format: missing flashcards array", details)


class EmptyResultError(GenerationError):
    """No question/answer pair survived validation."""

    kind = GenerationErrorKind.EMPTY_RESULT
    default_details = "Expected at least one flashcard with a non-empty question and answer"

    def __init__(self, details: str | None = None) -> None:
        super().__init__("No valid flashcards generated from the notes", details)
