"""Difficulty resolution from a requested level and question position."""

from models.question import AUTO_DIFFICULTY


def resolve_difficulty(base_difficulty: str | None, question_index: int) -> str:
    """
    Decide the difficulty of a question.

    An explicit base difficulty always wins and is returned unchanged.
    With "auto" (or nothing), difficulty ramps with position:
    questions 0-1 are easy, 2-3 medium, 4 onwards hard.
    """
    if base_difficulty and base_difficulty != AUTO_DIFFICULTY:
        return base_difficulty

    if question_index <= 1:
        return "easy"
    if question_index <= 3:
        return "medium"
    return "hard"
