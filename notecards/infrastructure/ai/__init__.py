"""AI provider adapters."""

from .completion_provider import PydanticAICompletionProvider

__all__ = ["PydanticAICompletionProvider"]
