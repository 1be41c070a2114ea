from enum import StrEnum

from pydantic import BaseModel


class ShortenOutcome(StrEnum):
    """How a URL was handled by the shortener."""

    UNCHANGED = "unchanged"  # already within budget, input returned as-is
    SHORTENED = "shortened"  # path segments and/or query parameters elided
    TRUNCATED = "truncated"  # hard cut at a character boundary


class ShortenResult(BaseModel):
    """Shortened text together with what was done to produce it."""

    text: str
    outcome: ShortenOutcome
    original_length: int
    length: int

    @property
    def borrowed(self) -> bool:
        """Whether text is the caller's input object, returned without copying."""
        return self.outcome == ShortenOutcome.UNCHANGED
