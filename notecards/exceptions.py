"""Custom exception hierarchy for the notecards application."""


class NotecardsError(Exception):
    """Base exception for all application-level notecards errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(NotecardsError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class FlashcardNotFoundError(NotFoundError):
    """Flashcard not found error."""

    def __init__(self, flashcard_id: int | None = None, *, message: str | None = None) -> None:
        """Initialize with flashcard ID or custom message."""
        self.flashcard_id = flashcard_id
        if message:
            super().__init__(message)
        elif flashcard_id is not None:
            super().__init__(f"Flashcard with id {flashcard_id} not found")
        else:
            super().__init__("Flashcard not found")
