from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ELLIPSIS = "…"


class Settings(BaseSettings):
    DEFAULT_MAX_LEN: int = Field(default=50, ge=0)
    ELLIPSIS: str = DEFAULT_ELLIPSIS

    model_config = SettingsConfigDict(env_prefix="SHORTEN_URL_", env_file=".env")

    @field_validator("ELLIPSIS")
    @classmethod
    def validate_ellipsis(cls, value: str) -> str:
        """Require a single-character marker."""
        if len(value) != 1:
            raise ValueError("ELLIPSIS must be exactly one character")
        return value

    @property
    def ellipsis_bytes(self) -> bytes:
        """Encoded form of the marker as it is spliced into shortened URLs."""
        return self.ELLIPSIS.encode("utf-8", "surrogatepass")


@lru_cache
def get_settings() -> Settings:
    return Settings()
