"""
Fallback Question Generator

Synthesizes a templated question locally when upstream generation fails.
Needs no network, no credentials and no configuration, and always returns
a structurally valid Question.
"""

from typing import Callable

from models.question import Question

from .difficulty import resolve_difficulty

# =============================================================================
# Round Builders
# =============================================================================

STAR_TIP = "Use STAR: Situation → Task → Action → Result."


def _aptitude_question(domain: str, round: str, difficulty: str, number: int) -> Question:
    return Question(
        round="aptitude",
        difficulty=difficulty,
        question_type="mcq",
        question=f"Sample {difficulty} aptitude question #{number} (domain: {domain}).",
        options=[
            "Option A (dummy)",
            "Option B (dummy - correct)",
            "Option C (dummy)",
            "Option D (dummy)",
        ],
        correct_option_index=1,
        explanation="This is a placeholder explanation. Later the AI will generate a real one.",
        followup_tip="Focus on understanding the logic first, then speed.",
    )


def _gd_question(domain: str, round: str, difficulty: str, number: int) -> Question:
    return Question(
        round="gd",
        difficulty=difficulty,
        question_type="open",
        question=f'Dummy GD topic ({difficulty}): "Impact of technology on {domain} jobs in India."',
        followup_tip="Organise your thoughts into 2–3 clear points and give examples.",
    )


def _me_question(domain: str, round: str, difficulty: str, number: int) -> Question:
    return Question(
        round="me",
        difficulty=difficulty,
        question_type="open",
        question=(
            f"Self-reflection ({difficulty}): Describe one experience that changed "
            f"how you think about your career in {domain}."
        ),
        followup_tip="Be honest and specific. Mention situation, your feelings, and what you learnt.",
    )


def _hr_question(domain: str, round: str, difficulty: str, number: int) -> Question:
    return Question(
        round=round,
        difficulty=difficulty,
        question_type="open",
        question=f"({difficulty} HR) Tell me about a time you handled a difficult situation related to {domain}.",
        followup_tip=STAR_TIP,
    )


def _technical_question(domain: str, round: str, difficulty: str, number: int) -> Question:
    # Also the default bucket, so the requested round is echoed back.
    return Question(
        round=round,
        difficulty=difficulty,
        question_type="open",
        question=f"({difficulty} Technical) Explain a project or concept in {domain} that you are proud of.",
        followup_tip=STAR_TIP,
    )


FALLBACK_BUILDERS: dict[str, Callable[[str, str, str, int], Question]] = {
    "aptitude": _aptitude_question,
    "gd": _gd_question,
    "me": _me_question,
    "hr": _hr_question,
    "technical": _technical_question,
}


# =============================================================================
# Public API
# =============================================================================

def build_fallback_question(
    domain: str,
    round: str,
    base_difficulty: str | None,
    question_index: int,
) -> Question:
    """
    Build a deterministic placeholder question.

    Args:
        domain: Candidate domain interpolated into the template
        round: Interview round; unknown rounds use the technical template
        base_difficulty: Requested difficulty or "auto"
        question_index: Zero-based position of the question in the session

    Returns:
        Question matching the round's shape invariants
    """
    difficulty = resolve_difficulty(base_difficulty, question_index)
    builder = FALLBACK_BUILDERS.get(round, _technical_question)
    return builder(domain, round, difficulty, question_index + 1)
