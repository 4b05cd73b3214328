"""
Learning bounded context - Domain layer.

Handles flashcard generation and management:
- Validating submitted notes
- Normalizing AI output into question/answer drafts
- Saved flashcards

Aggregates:
- Flashcard: a saved study card
"""
