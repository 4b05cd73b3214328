"""Prompts for generating flashcards from study notes."""

SYSTEM_PROMPT = (
    "You are an educational assistant that creates flashcards from study notes. "
    "Always respond with valid JSON only."
)

_USER_PROMPT_TEMPLATE = """Generate {count} educational flashcards from the following study notes. Each flashcard should have a clear question and a comprehensive answer that helps with learning and retention.

Study Notes:
{notes}

Create flashcards that:
1. Test key concepts and important facts
2. Use clear, specific questions
3. Provide detailed, helpful answers
4. Focus on the most important information

Return your response as a valid JSON object in this exact format:
{{
  "flashcards": [
    {{
      "question": "What is...",
      "answer": "The answer is..."
    }}
  ]
}}

Only return the JSON object, no additional text."""


def build_user_prompt(notes: str, min_flashcards: int = 3, max_flashcards: int = 7) -> str:
    """Embed the notes verbatim in the generation instruction."""
    if min_flashcards == max_flashcards:
        count = str(max_flashcards)
    else:
        count = f"{min_flashcards}-{max_flashcards}"
    return _USER_PROMPT_TEMPLATE.format(notes=notes, count=count)
