"""
Response Normalizer

Coerces whatever the upstream returned into a Question. Missing or
wrong-typed fields fall back to safe defaults; nothing here raises.
"""

import json
from typing import Any

from models.question import MCQ_OPTION_COUNT, QUESTION_TYPES, Question, question_type_for_round

from .difficulty import resolve_difficulty

MISSING_QUESTION_TEXT = "AI did not return a question. Please try again."


def _non_empty_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _as_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _optional_text(raw: dict, key: str) -> str | None:
    value = raw.get(key)
    if value is None:
        return None
    return _as_text(value)


def _coerce_options(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [_as_text(item) for item in value]


def _coerce_index(value: Any, round: str, question_type: str) -> int | None:
    default = 0 if round == "aptitude" else None
    # bool is an int subclass but never a valid index
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if isinstance(value, float) and not value.is_integer():
        return default
    index = int(value)
    if question_type == "mcq" and not 0 <= index < MCQ_OPTION_COUNT:
        return 0
    return index


def normalize_question(
    raw: Any,
    round: str,
    base_difficulty: str | None,
    question_index: int,
) -> Question:
    """
    Build a schema-conformant Question from a raw upstream structure.

    Args:
        raw: Parsed upstream JSON; anything other than an object counts as {}
        round: Requested round
        base_difficulty: Requested difficulty or "auto"
        question_index: Zero-based question position

    Returns:
        Question with every field populated or defaulted
    """
    if not isinstance(raw, dict):
        raw = {}

    raw_type = raw.get("question_type")
    question_type = raw_type if raw_type in QUESTION_TYPES else question_type_for_round(round)

    return Question(
        round=_non_empty_str(raw.get("round")) or round,
        difficulty=_non_empty_str(raw.get("difficulty"))
        or resolve_difficulty(base_difficulty, question_index),
        question_type=question_type,
        question=_non_empty_str(raw.get("question")) or MISSING_QUESTION_TEXT,
        options=_coerce_options(raw.get("options")),
        correct_option_index=_coerce_index(raw.get("correct_option_index"), round, question_type),
        explanation=_optional_text(raw, "explanation"),
        followup_tip=_optional_text(raw, "followup_tip"),
    )
