"""
Pydantic models for interview question generation.

These are the request/response shapes of the public API and the single
Question structure shared by the AI and fallback paths.
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


# =============================================================================
# Vocabulary
# =============================================================================

QuestionType = Literal["mcq", "open"]

ROUNDS: tuple[str, ...] = ("aptitude", "technical", "hr", "gd", "me")
QUESTION_TYPES: tuple[str, ...] = ("mcq", "open")

AUTO_DIFFICULTY = "auto"
MCQ_OPTION_COUNT = 4


def question_type_for_round(round: str) -> str:
    """Aptitude rounds are multiple choice, everything else is free response."""
    return "mcq" if round == "aptitude" else "open"


# =============================================================================
# Question
# =============================================================================

class Question(BaseModel):
    """A single interview question, whether generated or synthesized locally."""
    round: str
    difficulty: str
    question_type: QuestionType
    question: str = Field(min_length=1)
    options: list[str] = Field(default_factory=list)
    correct_option_index: Optional[int] = None
    explanation: Optional[str] = None
    followup_tip: Optional[str] = None


# =============================================================================
# Request Models
# =============================================================================

_REQUEST_DEFAULTS: dict[str, str] = {
    "domain": "generic",
    "round": "technical",
    "base_difficulty": AUTO_DIFFICULTY,
}


class GenerationRequest(BaseModel):
    """
    Request for the next interview question.

    Every field is optional and the request is read leniently: missing,
    null, empty or wrong-typed values fall back to the defaults, and a
    body that is not a JSON object counts as ``{}``.
    """
    model_config = ConfigDict(populate_by_name=True)

    domain: str = "generic"
    round: str = "technical"
    base_difficulty: str = Field(default=AUTO_DIFFICULTY, alias="baseDifficulty")
    question_index: int = Field(default=0, ge=0, alias="questionIndex")
    # Accepted and passed through; answers are opaque to this service.
    previous_answers: list[Any] = Field(default_factory=list, alias="previousAnswers")

    @model_validator(mode="before")
    @classmethod
    def _object_body(cls, data: Any) -> Any:
        return data if isinstance(data, dict) else {}

    @field_validator("domain", "round", "base_difficulty", mode="before")
    @classmethod
    def _text_or_default(cls, value: Any, info: ValidationInfo) -> str:
        if isinstance(value, bool):
            return _REQUEST_DEFAULTS[info.field_name]
        if isinstance(value, (int, float)):
            value = str(value)
        if isinstance(value, str) and value.strip():
            return value
        return _REQUEST_DEFAULTS[info.field_name]

    @field_validator("question_index", mode="before")
    @classmethod
    def _index_or_zero(cls, value: Any) -> int:
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return 0
        if isinstance(value, float) and not value.is_integer():
            return 0
        return int(value) if value >= 0 else 0

    @field_validator("previous_answers", mode="before")
    @classmethod
    def _answers_as_list(cls, value: Any) -> list[Any]:
        if value is None or value == "":
            return []
        return value if isinstance(value, list) else [value]


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
    upstream_configured: bool
