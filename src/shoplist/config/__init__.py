"""Configuration package for shoplist."""
from .settings import (
    LLMSettings,
    ShopListSettings,
    get_settings,
    get_llm_settings,
    clear_settings_cache,
)

__all__ = [
    'LLMSettings',
    'ShopListSettings',
    'get_settings',
    'get_llm_settings',
    'clear_settings_cache',
]
