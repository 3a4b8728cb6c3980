"""
Converter configuration.

Centralized configuration management with environment variables.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional


class Settings(BaseSettings):
    """Converter settings"""

    model_config = SettingsConfigDict(
        env_prefix="TEXSHORT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"  # json or text
    LOG_FILE: Optional[str] = None

    # Pattern table override (YAML file, same keys as the bundled table)
    PATTERNS_FILE: Optional[str] = None

    # Rewrite bounds; None derives the bound from the input
    MAX_FRACTION_ITERATIONS: Optional[int] = None
    MAX_ROOT_STEPS: Optional[int] = None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
