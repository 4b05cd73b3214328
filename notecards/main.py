"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from notecards.config import configure_logging, get_settings
from notecards.database import dispose_engine, initialize_database
from notecards.domain.learning.errors import GenerationError, InvalidInputError
from notecards.exceptions import NotecardsError
from notecards.infrastructure.learning.routers import flashcards, generate_flashcards

settings = get_settings()
configure_logging(settings.ENVIRONMENT)
logger = structlog.get_logger(__name__)

CORS_ALLOW_METHODS = ["GET", "POST", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type", "Authorization", "X-Client-Info", "apikey"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    initialize_database(settings)
    logger.info(
        "application_started",
        environment=settings.ENVIRONMENT,
        ai_provider=settings.AI_PROVIDER,
        ai_model=settings.AI_MODEL_NAME,
    )
    try:
        yield
    finally:
        dispose_engine()


async def generation_error_handler(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, GenerationError)
    return JSONResponse(status_code=exc.status_code, content=exc.to_response())


async def notecards_error_handler(request: Request, exc: Exception) -> Response:
    assert isinstance(exc, NotecardsError)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def validation_error_handler(request: Request, exc: Exception) -> Response:
    """Generation requests report unreadable bodies as invalid input (400)."""
    assert isinstance(exc, RequestValidationError)
    if request.url.path.endswith(generate_flashcards.GENERATION_PATH):
        error = InvalidInputError("Notes are required and must be a non-empty string")
        logger.warning("flashcard_generation_invalid_body", errors=str(exc.errors())[:200])
        return JSONResponse(status_code=error.status_code, content=error.to_response())
    return await request_validation_exception_handler(request, exc)


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    app.add_exception_handler(GenerationError, generation_error_handler)
    app.add_exception_handler(NotecardsError, notecards_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(generate_flashcards.router, prefix=settings.API_V1_PREFIX)
    app.include_router(flashcards.router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}", "version": settings.VERSION}

    @app.get("/health", status_code=status.HTTP_200_OK)
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "notecards.main:app",
        host="0.0.0.0",  # noqa: S104
        port=8000,
        reload=settings.ENVIRONMENT == "development",
    )
