"""
Upstream failure taxonomy.

Every error raised while talking to the generation endpoint derives from
UpstreamError so the orchestrator can absorb them uniformly.
"""

from typing import Optional


class UpstreamError(Exception):
    """Generation through the upstream API failed."""

    def __init__(self, message: str, detail: Optional[str] = None):
        super().__init__(message)
        self.detail = detail

    def __str__(self) -> str:
        message = super().__str__()
        if self.detail:
            return f"{message}: {self.detail}"
        return message


class ConfigError(UpstreamError):
    """Required upstream configuration (the API key) is missing."""


class TransportError(UpstreamError):
    """The outbound call did not complete or returned a non-success status."""


class EmptyResponseError(UpstreamError):
    """The upstream response carried no generated text."""


class ParseError(UpstreamError):
    """Generated text is not valid JSON after cleanup."""
