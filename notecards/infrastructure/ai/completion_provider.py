"""Text completion adapter backed by pydantic-ai models."""

import anthropic
import httpx
import openai
import structlog
from pydantic_ai import Agent
from pydantic_ai.exceptions import AgentRunError, ModelHTTPError, UnexpectedModelBehavior
from pydantic_ai.models import Model
from pydantic_ai.settings import ModelSettings

from notecards.config import Settings
from notecards.domain.learning.errors import (
    ProviderError,
    ProviderUnavailableError,
    QuotaExceededError,
    RateLimitedError,
)
from notecards.infrastructure.ai.ai_model import get_ai_model

logger = structlog.get_logger(__name__)

HTTP_PAYMENT_REQUIRED = 402
HTTP_TOO_MANY_REQUESTS = 429

# OpenAI-compatible APIs report an exhausted balance as 429 with this code
QUOTA_ERROR_CODES = frozenset({"insufficient_quota", "billing_hard_limit_reached"})


def _error_payload(body: object) -> dict[str, object]:
    if not isinstance(body, dict):
        return {}
    nested = body.get("error")
    if isinstance(nested, dict):
        return nested
    return body


def provider_message(body: object) -> str:
    """Best-effort human readable message from a provider error body."""
    if isinstance(body, str) and body.strip():
        return body.strip()
    payload = _error_payload(body)
    message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return str(body["error"])
    return "Unknown error"


def is_quota_error(body: object) -> bool:
    payload = _error_payload(body)
    return any(payload.get(key) in QUOTA_ERROR_CODES for key in ("code", "type"))


def translate_http_error(error: ModelHTTPError) -> ProviderError:
    """Map a provider HTTP failure to a generation error with a stable kind."""
    message = provider_message(error.body)
    if error.status_code == HTTP_PAYMENT_REQUIRED or is_quota_error(error.body):
        return QuotaExceededError(message, error.status_code)
    if error.status_code == HTTP_TOO_MANY_REQUESTS:
        return RateLimitedError(message, error.status_code)
    return ProviderError(message, error.status_code)


class PydanticAICompletionProvider:
    """
    Completion provider running a plain-text pydantic-ai agent.

    The agent is built per call with ``retries=0`` and no output schema, so a
    call is exactly one model request and the text comes back unvalidated.
    """

    def __init__(self, settings: Settings, model: Model | None = None) -> None:
        self.settings = settings
        self._model = model
        self.model_settings = ModelSettings(
            max_tokens=settings.AI_MAX_TOKENS,
            temperature=settings.AI_TEMPERATURE,
            timeout=settings.AI_REQUEST_TIMEOUT_SECONDS,
        )

    @property
    def model_name(self) -> str | None:
        if self._model is not None:
            return self._model.model_name
        return self.settings.AI_MODEL_NAME

    def _resolve_model(self) -> Model:
        if self._model is not None:
            return self._model
        if not self.settings.ai_enabled:
            raise ProviderUnavailableError(
                "AI provider is not configured",
                "Set AI_PROVIDER and AI_MODEL_NAME to enable flashcard generation",
            )
        return get_ai_model()

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        """
        Send one completion request and return the raw response text.

        Raises:
            RateLimitedError: Provider answered 429
            QuotaExceededError: Provider answered 402 or reported exhausted quota
            ProviderError: Any other non-success response
            ProviderUnavailableError: Provider not configured, unreachable or timed out
        """
        agent: Agent[None, str] = Agent(
            self._resolve_model(),
            output_type=str,
            instructions=system_prompt,
            retries=0,
            model_settings=self.model_settings,
        )

        try:
            result = await agent.run(user_prompt)
        except ModelHTTPError as e:
            raise translate_http_error(e) from e
        except UnexpectedModelBehavior as e:
            raise ProviderError(e.message) from e
        except (AgentRunError, openai.APIError, anthropic.APIError, httpx.HTTPError, OSError) as e:
            logger.error(
                "completion_provider_unreachable",
                model_name=self.model_name,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise ProviderUnavailableError(
                "AI provider could not be reached",
                f"The request to the AI provider failed: {type(e).__name__}",
            ) from e

        return result.output
