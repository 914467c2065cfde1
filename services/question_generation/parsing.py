"""Cleanup and parsing of generated text."""

import json
import logging
import re
from typing import Any

from .errors import ParseError

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```[a-zA-Z]*\s*")
_TRAILING_FENCE = re.compile(r"```$")


def strip_code_fences(text: str) -> str:
    """Remove a leading ``` / ```json line and a trailing ``` if present."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _LEADING_FENCE.sub("", cleaned)
        cleaned = _TRAILING_FENCE.sub("", cleaned)
        cleaned = cleaned.strip()
    return cleaned


def parse_generated_json(text: str) -> Any:
    """
    Parse generated text as JSON after stripping code fences.

    Raises:
        ParseError: If the cleaned text is not valid JSON
    """
    cleaned = strip_code_fences(text)
    try:
        return json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"[Gemini] Failed to parse JSON from response: {text}")
        raise ParseError("Failed to parse JSON from Gemini", detail=str(e)) from e
