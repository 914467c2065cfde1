"""
Models for the interview question service.
"""

from .question import (
    AUTO_DIFFICULTY,
    QUESTION_TYPES,
    ROUNDS,
    GenerationRequest,
    HealthResponse,
    Question,
    QuestionType,
    question_type_for_round,
)

__all__ = [
    "AUTO_DIFFICULTY",
    "QUESTION_TYPES",
    "ROUNDS",
    "GenerationRequest",
    "HealthResponse",
    "Question",
    "QuestionType",
    "question_type_for_round",
]
