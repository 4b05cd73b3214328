from functools import lru_cache

from anthropic import AsyncAnthropic
from openai import AsyncOpenAI
from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from notecards.config import Settings, get_settings

# SDK clients retry failed requests by default; a generation is one call only
SDK_MAX_RETRIES = 0


def build_model(settings: Settings) -> Model:
    """
    Get Pydantic AI model depending on environment settings.
    """

    if settings.AI_PROVIDER == "ollama":
        # These assertions are guaranteed by the settings validator
        assert settings.AI_MODEL_NAME is not None
        assert settings.OPENAI_BASE_URL is not None
        return OpenAIChatModel(
            model_name=settings.AI_MODEL_NAME,
            provider=OllamaProvider(
                openai_client=AsyncOpenAI(
                    base_url=settings.OPENAI_BASE_URL,
                    api_key="api-key-not-set",
                    max_retries=SDK_MAX_RETRIES,
                )
            ),
        )

    if settings.AI_PROVIDER == "openai":
        # These assertions are guaranteed by the settings validator
        assert settings.AI_MODEL_NAME is not None
        assert settings.OPENAI_API_KEY is not None
        return OpenAIChatModel(
            model_name=settings.AI_MODEL_NAME,
            provider=OpenAIProvider(
                openai_client=AsyncOpenAI(
                    api_key=settings.OPENAI_API_KEY,
                    max_retries=SDK_MAX_RETRIES,
                )
            ),
        )

    if settings.AI_PROVIDER == "anthropic":
        # These assertions are guaranteed by the settings validator
        assert settings.AI_MODEL_NAME is not None
        assert settings.ANTHROPIC_API_KEY is not None
        return AnthropicModel(
            model_name=settings.AI_MODEL_NAME,
            provider=AnthropicProvider(
                anthropic_client=AsyncAnthropic(
                    api_key=settings.ANTHROPIC_API_KEY,
                    max_retries=SDK_MAX_RETRIES,
                )
            ),
        )

    if settings.AI_PROVIDER == "google":
        # These assertions are guaranteed by the settings validator
        assert settings.AI_MODEL_NAME is not None
        assert settings.GEMINI_API_KEY is not None
        return GoogleModel(
            model_name=settings.AI_MODEL_NAME,
            provider=GoogleProvider(api_key=settings.GEMINI_API_KEY),
        )
    raise ValueError("No such AI model provider available")


@lru_cache
def get_ai_model() -> Model:
    """
    Get cached AI model. The model is only built on the first generation request,
    so the service starts without any provider configured.
    """
    return build_model(get_settings())
