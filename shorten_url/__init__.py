"""Omit parts of a URL for friendlier display."""

from shorten_url.config import Settings, get_settings
from shorten_url.core.shortener import shorten, shorten_detailed
from shorten_url.models.result import ShortenOutcome, ShortenResult

__all__ = [
    "Settings",
    "ShortenOutcome",
    "ShortenResult",
    "get_settings",
    "shorten",
    "shorten_detailed",
]
