from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UNRAVEL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Unravel"
    app_env: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Dispatch settings
    max_ciphertext_length: int = 100_000
    # None means one worker per available CPU
    max_parallel_decoders: int | None = Field(default=None, ge=1)

    # Checker settings
    english_word_ratio: float = Field(default=0.5, gt=0.0, le=1.0)
    pattern_min_rarity: float = Field(default=0.1, ge=0.0, le=1.0)

    # Layered search settings
    max_search_depth: int = Field(default=3, ge=1)
    max_search_nodes: int = Field(default=500, ge=1)

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
