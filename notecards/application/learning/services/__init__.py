"""Learning application services."""

from .generation_gateway import FlashcardGenerationGateway

__all__ = ["FlashcardGenerationGateway"]
