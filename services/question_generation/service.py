"""
Question Service

Orchestrates one question request: generate through the upstream, then
normalize on success or build the fallback question on failure.

Exactly one upstream attempt is made. Any failure on the generating or
normalizing path is logged and replaced by the local fallback question,
so callers always receive a valid Question.
"""

import logging
from typing import Any, Optional

from config import Settings
from models.question import GenerationRequest, Question

from .difficulty import resolve_difficulty
from .fallback import build_fallback_question
from .gemini_client import GeminiClient
from .normalizer import normalize_question
from .parsing import parse_generated_json
from .prompts import build_question_prompt

logger = logging.getLogger(__name__)


class QuestionService:
    """Generates interview questions through Gemini with a local fallback."""

    def __init__(self, settings: Settings, client: Optional[GeminiClient] = None):
        self._settings = settings
        self._client = client or GeminiClient(settings)

    @property
    def upstream_configured(self) -> bool:
        return self._client.is_configured

    async def generate_ai_question(
        self,
        domain: str,
        round: str,
        base_difficulty: str | None,
        question_index: int,
        previous_answers: Optional[list[Any]] = None,
    ) -> Any:
        """
        Ask the upstream model for one question.

        previous_answers is accepted for interface stability but does not
        influence the prompt.

        Returns:
            The parsed JSON structure, not yet normalized

        Raises:
            UpstreamError: On missing config, transport failure, empty
                response or unparseable output
        """
        difficulty = resolve_difficulty(base_difficulty, question_index)
        prompt = build_question_prompt(domain, round, difficulty)

        text = await self._client.generate_text(prompt)
        return parse_generated_json(text)

    async def next_question(self, request: GenerationRequest) -> Question:
        """Produce the next question for a request, never raising."""
        try:
            raw = await self.generate_ai_question(
                domain=request.domain,
                round=request.round,
                base_difficulty=request.base_difficulty,
                question_index=request.question_index,
                previous_answers=request.previous_answers,
            )
            return normalize_question(
                raw,
                round=request.round,
                base_difficulty=request.base_difficulty,
                question_index=request.question_index,
            )
        except Exception as e:
            logger.warning(
                f"[QuestionService] Error generating AI question ({type(e).__name__}): {e}. "
                f"Using fallback for round={request.round!r}"
            )
            return build_fallback_question(
                domain=request.domain,
                round=request.round,
                base_difficulty=request.base_difficulty,
                question_index=request.question_index,
            )
