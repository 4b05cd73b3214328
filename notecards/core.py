from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from notecards.application.learning.services.generation_gateway import (
    FlashcardGenerationGateway,
)
from notecards.application.learning.use_cases.flashcard_use_case import FlashcardUseCase
from notecards.application.learning.use_cases.generate_flashcards_use_case import (
    GenerateFlashcardsUseCase,
)
from notecards.config import get_settings
from notecards.domain.learning.services.flashcard_normalizer import FlashcardNormalizer
from notecards.infrastructure.ai.completion_provider import PydanticAICompletionProvider
from notecards.infrastructure.learning.repositories.flashcard_repository import (
    FlashcardRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    # Repositories
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)

    # AI provider, shared across requests (holds no per-request state)
    completion_provider = providers.Singleton(PydanticAICompletionProvider, settings=settings)

    # Domain services (pure domain logic, no db)
    flashcard_normalizer = providers.Factory(
        FlashcardNormalizer,
        max_flashcards=settings.provided.MAX_FLASHCARDS,
    )

    flashcard_generation_gateway = providers.Factory(
        FlashcardGenerationGateway,
        completion_provider=completion_provider,
        min_flashcards=settings.provided.MIN_FLASHCARDS,
        max_flashcards=settings.provided.MAX_FLASHCARDS,
    )

    # Learning module use cases
    generate_flashcards_use_case = providers.Factory(
        GenerateFlashcardsUseCase,
        gateway=flashcard_generation_gateway,
        normalizer=flashcard_normalizer,
    )

    flashcard_use_case = providers.Factory(
        FlashcardUseCase,
        flashcard_repository=flashcard_repository,
    )


# Initialize container
container = Container()
