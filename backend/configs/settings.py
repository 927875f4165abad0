"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from backend.configs.ai_provider import AIProviderSettings
from backend.configs.base import BaseSettings
from backend.configs.github import GitHubSettings
from backend.configs.highlight import HighlightSettings
from backend.configs.observability import ObservabilitySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    github: GitHubSettings = Field(default_factory=GitHubSettings)
    ai: AIProviderSettings = Field(default_factory=AIProviderSettings)
    highlight: HighlightSettings = Field(default_factory=HighlightSettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
