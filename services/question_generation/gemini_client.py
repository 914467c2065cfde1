"""
Gemini generateContent client.

Thin async wrapper over one POST to the generation endpoint. Transport
problems, non-success statuses and empty candidates are all raised as
UpstreamError subtypes; nothing is retried.
"""

import logging
from typing import Any, Optional

import httpx

from config import Settings

from .errors import ConfigError, EmptyResponseError, TransportError

logger = logging.getLogger(__name__)

# Part fields that may carry the generated payload, in order of preference
CANDIDATE_TEXT_FIELDS = ("text", "data")

_ERROR_BODY_LIMIT = 500


def extract_candidate_text(data: Any) -> Optional[str]:
    """Return the first candidate's first part text, or None."""
    try:
        part = data["candidates"][0]["content"]["parts"][0]
    except (KeyError, IndexError, TypeError):
        return None

    if not isinstance(part, dict):
        return None

    for field in CANDIDATE_TEXT_FIELDS:
        value = part.get(field)
        if value:
            return value if isinstance(value, str) else str(value)
    return None


class GeminiClient:
    """Client for a single Gemini model endpoint."""

    def __init__(
        self,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            settings: Application settings (key, model, temperature, timeout)
            transport: Optional httpx transport, used by tests to stub the network
        """
        self._settings = settings
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self._settings.gemini_api_key)

    def build_request_body(self, prompt: str) -> dict:
        return {
            "contents": [
                {
                    "parts": [{"text": prompt}],
                }
            ],
            "generationConfig": {
                "temperature": self._settings.generation_temperature,
            },
        }

    async def generate_text(self, prompt: str) -> str:
        """
        Send a prompt and return the generated text.

        Raises:
            ConfigError: No API key configured
            TransportError: Request failed, timed out, or returned non-2xx
            EmptyResponseError: Response carried no candidate text
        """
        api_key = self._settings.gemini_api_key
        if not api_key:
            raise ConfigError("GEMINI_API_KEY not set")

        url = self._settings.generation_url
        try:
            async with httpx.AsyncClient(
                timeout=self._settings.upstream_timeout_seconds,
                transport=self._transport,
            ) as client:
                response = await client.post(
                    url,
                    json=self.build_request_body(prompt),
                    headers={
                        "Content-Type": "application/json",
                        "x-goog-api-key": api_key,
                    },
                )
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Gemini request timed out after {self._settings.upstream_timeout_seconds}s"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError("Gemini request failed", detail=str(e)) from e

        if not response.is_success:
            raise TransportError(
                f"Gemini API error (HTTP {response.status_code})",
                detail=response.text[:_ERROR_BODY_LIMIT],
            )

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                "Gemini API returned a non-JSON body",
                detail=response.text[:_ERROR_BODY_LIMIT],
            ) from e

        text = extract_candidate_text(data)
        if not text:
            raise EmptyResponseError("No content from Gemini")

        logger.debug(f"[Gemini] Received {len(text)} characters from {self._settings.gemini_model}")
        return text
