"""Configuration settings for shoplist."""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Project root: src/shoplist/config/settings.py -> repository root
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent

# Default log directory
DEFAULT_LOG_DIR = PROJECT_ROOT / "logs"
DEFAULT_LOG_FILE = DEFAULT_LOG_DIR / "shoplist.log"

# Ordered fallback sequence, first model that returns usable items wins
DEFAULT_MODELS = [
    "gemini-2.0-flash",
    "gemini-2.0-flash-lite",
    "gemini-1.5-flash",
    "gemini-1.5-pro",
]


class LLMSettings(BaseSettings):
    """Settings for the remote completion service."""
    API_KEY: str = ""  # Empty disables the remote stage
    BASE_URL: Optional[str] = None  # Any OpenAI-compatible endpoint
    MODELS: List[str] = DEFAULT_MODELS
    TEMPERATURE: float = 0.0
    TIMEOUT: int = 15
    MAX_TOKENS: int = 1024
    MAX_ATTEMPTS_PER_MODEL: int = 1

    model_config = SettingsConfigDict(
        env_prefix="LLM_",
        case_sensitive=False,
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @field_validator("TEMPERATURE")
    @classmethod
    def validate_temperature(cls, v: float) -> float:
        if not 0 <= v <= 1:
            raise ValueError("Temperature must be between 0 and 1")
        return v

    @field_validator("MODELS")
    @classmethod
    def validate_models(cls, v: List[str]) -> List[str]:
        models = [m.strip() for m in v if m and m.strip()]
        if not models:
            raise ValueError("At least one model must be configured")
        return models

    @field_validator("MAX_ATTEMPTS_PER_MODEL")
    @classmethod
    def validate_attempts(cls, v: int) -> int:
        if not 1 <= v <= 5:
            raise ValueError("Attempts per model must be between 1 and 5")
        return v


class ShopListSettings(BaseSettings):
    """Application settings with environment variable support."""

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = DEFAULT_LOG_FILE
    LOG_FORMAT: str = "detailed"  # simple, detailed
    LOG_RETENTION_DAYS: int = 7
    LOG_ROTATION_SIZE_MB: int = 1

    # Parsing
    USE_REMOTE: bool = True

    model_config = SettingsConfigDict(
        env_prefix="SHOPLIST_",
        case_sensitive=False,
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Ensure log file path is absolute and parent directory exists
        if self.LOG_FILE:
            if not self.LOG_FILE.is_absolute():
                self.LOG_FILE = PROJECT_ROOT / self.LOG_FILE
            self.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = ["simple", "detailed"]
        v = v.lower()
        if v not in valid_formats:
            raise ValueError(f"Log format must be one of: {', '.join(valid_formats)}")
        return v


@lru_cache()
def get_settings() -> ShopListSettings:
    """Get cached settings instance."""
    return ShopListSettings()


@lru_cache()
def get_llm_settings() -> LLMSettings:
    """Get cached LLM settings instance."""
    return LLMSettings()


def clear_settings_cache() -> None:
    """Clear all settings caches to force reload from environment."""
    get_settings.cache_clear()
    get_llm_settings.cache_clear()
