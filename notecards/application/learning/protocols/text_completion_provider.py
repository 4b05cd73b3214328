from typing import Protocol


class TextCompletionProviderProtocol(Protocol):
    """
    Any instruction-following text or chat completion backend.

    Implementations make exactly one request per call and translate their
    failures into generation errors:
    RateLimitedError, QuotaExceededError, ProviderError, ProviderUnavailableError.
    """

    @property
    def model_name(self) -> str | None: ...

    async def complete(self, system_prompt: str, user_prompt: str) -> str: ...
