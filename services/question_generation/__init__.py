"""
Question Generation Services

This module provides interview question generation using:
- Position-based difficulty resolution
- Gemini generateContent for AI questions
- Response normalization into the Question schema
- Deterministic fallback questions when the upstream fails
"""

from .difficulty import resolve_difficulty
from .errors import (
    ConfigError,
    EmptyResponseError,
    ParseError,
    TransportError,
    UpstreamError,
)
from .fallback import build_fallback_question
from .gemini_client import GeminiClient, extract_candidate_text
from .normalizer import normalize_question
from .parsing import parse_generated_json, strip_code_fences
from .prompts import build_question_prompt
from .service import QuestionService

__all__ = [
    "resolve_difficulty",
    "build_fallback_question",
    "build_question_prompt",
    "normalize_question",
    "parse_generated_json",
    "strip_code_fences",
    "extract_candidate_text",
    "GeminiClient",
    "QuestionService",
    # Errors
    "UpstreamError",
    "ConfigError",
    "TransportError",
    "EmptyResponseError",
    "ParseError",
]
