"""
Pytest configuration and fixtures for the interview question service tests.
"""

import json
import os
import sys
from typing import Callable

import httpx
import pytest

# Add the parent directory to the path so we can import the service packages
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Settings  # noqa: E402
from services.question_generation import GeminiClient, QuestionService  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Settings with a fake API key, isolated from any local .env file."""
    return Settings(
        _env_file=None,
        gemini_api_key="test-api-key",
        gemini_model="gemini-test",
        gemini_api_base="https://gemini.test/v1beta",
        upstream_timeout_seconds=2.0,
    )


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without an API key."""
    return Settings(_env_file=None, gemini_api_key=None)


def gemini_payload(text: str, field: str = "text") -> dict:
    """Build a generateContent response body carrying one text part."""
    return {
        "candidates": [
            {
                "content": {
                    "parts": [{field: text}],
                    "role": "model",
                }
            }
        ]
    }


@pytest.fixture
def make_service(settings) -> Callable[[Callable[[httpx.Request], httpx.Response]], QuestionService]:
    """Factory building a QuestionService whose upstream is a mock handler."""

    def _make(handler):
        transport = httpx.MockTransport(handler)
        return QuestionService(settings, GeminiClient(settings, transport=transport))

    return _make


@pytest.fixture
def mock_aptitude_question() -> dict:
    """A well-formed aptitude question as the model would return it."""
    return {
        "round": "aptitude",
        "difficulty": "medium",
        "question_type": "mcq",
        "question": "A train covers 120 km in 2 hours. What is its average speed?",
        "options": ["40 km/h", "60 km/h", "80 km/h", "120 km/h"],
        "correct_option_index": 1,
        "explanation": "Speed = distance / time = 120 / 2 = 60 km/h.",
        "followup_tip": "Write down the formula before plugging in numbers.",
    }


@pytest.fixture
def mock_aptitude_text(mock_aptitude_question) -> str:
    return json.dumps(mock_aptitude_question)
