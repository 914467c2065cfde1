"""
Prompt Builder for Question Generation

Builds the single-shot instruction sent to the generation endpoint. The
prompt pins the exact JSON shape the normalizer expects back.
"""

ROUND_INSTRUCTIONS = {
    "aptitude": "For aptitude, generate quantitative/logical reasoning MCQs with 4 options and a correct answer.",
    "technical": "For technical, mix conceptual and scenario-based questions.",
    "hr": "For HR, ask behavioural/situational questions.",
    "gd": "For GD, generate a discussion topic only (no answer).",
    "me": 'For "me" round, generate self-reflection questions.',
}

OUTPUT_FORMAT = """{
  "round": "aptitude" | "technical" | "hr" | "gd" | "me",
  "difficulty": "easy" | "medium" | "hard",
  "question_type": "mcq" | "open",
  "question": "string",
  "options": ["A...", "B...", "C...", "D..."] or [],
  "correct_option_index": number or null,
  "explanation": "string or null",
  "followup_tip": "string or null"
}"""


def build_question_prompt(domain: str, round: str, difficulty: str) -> str:
    """
    Build prompt for generating one interview question.

    Args:
        domain: Candidate domain (e.g., 'finance', 'IT')
        round: Interview round type
        difficulty: Already-resolved difficulty

    Returns:
        Formatted prompt string
    """
    round_rules = "\n".join(f"- {rule}" for rule in ROUND_INSTRUCTIONS.values())

    return f"""You are an AI interview question generator.

User domain: {domain}
Round type: {round}
Difficulty: {difficulty}

Your job:
- Generate ONE interview question only.
{round_rules}

You MUST respond with ONLY a JSON object (no extra text) in this exact format:

{OUTPUT_FORMAT}

Rules:
- For aptitude: question_type = "mcq", options length = 4, correct_option_index 0–3, explanation not null.
- For all other rounds: question_type = "open", options = [], correct_option_index = null.
- Difficulty must match "{difficulty}".
"""
