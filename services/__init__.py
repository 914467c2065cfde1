"""
Services for the interview question API.
"""

from .question_generation import QuestionService, build_fallback_question

__all__ = [
    "QuestionService",
    "build_fallback_question",
]
