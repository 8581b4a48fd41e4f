"""Models for the remote completion service."""
from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator

from shoplist.config.settings import LLMSettings, DEFAULT_MODELS, get_llm_settings


class LLMConfig(BaseModel):
    """Configuration for completion calls."""
    models: Tuple[str, ...] = tuple(DEFAULT_MODELS)
    temperature: float = Field(default=0.0, ge=0.0, le=1.0)
    timeout: int = Field(default=15, ge=1, le=120)
    max_tokens: int = Field(default=1024, ge=1)
    max_attempts: int = Field(default=1, ge=1, le=5)

    model_config = ConfigDict(frozen=True)

    @field_validator('models')
    @classmethod
    def validate_models(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        models = tuple(m.strip() for m in v if m and m.strip())
        if not models:
            raise ValueError("At least one model must be configured")
        return models

    @classmethod
    def from_settings(cls, settings: Optional[LLMSettings] = None) -> 'LLMConfig':
        """Build the runtime config from environment settings."""
        settings = settings or get_llm_settings()
        return cls(
            models=tuple(settings.MODELS),
            temperature=settings.TEMPERATURE,
            timeout=settings.TIMEOUT,
            max_tokens=settings.MAX_TOKENS,
            max_attempts=settings.MAX_ATTEMPTS_PER_MODEL
        )
