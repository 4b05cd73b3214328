"""Pytest configuration and fixtures."""

import os

os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ.pop("AI_PROVIDER", None)
for _var in ("AI_MODEL_NAME", "OPENAI_BASE_URL", "OPENAI_API_KEY", "ANTHROPIC_API_KEY", "GEMINI_API_KEY"):
    os.environ.pop(_var, None)

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from pydantic_ai import models as pydantic_ai_models  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from notecards import models  # noqa: E402
from notecards.core import container  # noqa: E402
from notecards.database import Base, get_db  # noqa: E402
from notecards.main import app  # noqa: E402

# Never let a test reach a real AI provider
pydantic_ai_models.ALLOW_MODEL_REQUESTS = False

TEST_DATABASE_URL = "sqlite:///:memory:"

test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


class FakeCompletionProvider:
    """Completion provider returning canned text and recording every call."""

    def __init__(self, response: str = "", error: Exception | None = None) -> None:
        self.response = response
        self.error = error
        self.calls: list[tuple[str, str]] = []

    @property
    def model_name(self) -> str | None:
        return "fake-model"

    async def complete(self, system_prompt: str, user_prompt: str) -> str:
        self.calls.append((system_prompt, user_prompt))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_provider() -> FakeCompletionProvider:
    return FakeCompletionProvider(
        response='{"flashcards": [{"question": "Q1", "answer": "A1"}]}'
    )


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(
    db_session: Session, fake_provider: FakeCompletionProvider
) -> Generator[TestClient, Any, None]:
    """Create a test client with database session and fake AI provider."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    container.completion_provider.override(providers.Object(fake_provider))

    with TestClient(app) as test_client:
        yield test_client

    container.completion_provider.reset_override()
    app.dependency_overrides.clear()


def create_test_flashcard(
    db_session: Session,
    question: str = "What is ATP?",
    answer: str = "The energy currency of the cell",
    notes: str | None = "Mitochondria produce ATP.",
) -> models.Flashcard:
    """Helper function to create a saved flashcard."""
    flashcard = models.Flashcard(question=question, answer=answer, notes=notes)
    db_session.add(flashcard)
    db_session.commit()
    db_session.refresh(flashcard)
    return flashcard
