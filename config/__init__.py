"""Configuration package for the interview question service."""

from .settings import Settings, settings

__all__ = [
    "settings",
    "Settings",
]
