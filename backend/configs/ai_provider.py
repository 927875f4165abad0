"""
AI provider configuration.

Model names and sampling parameters for the OpenAI and Gemini chat models.
API keys are NOT configured here: every analysis request carries the
caller's own key.

Dependencies: pydantic_settings
System role: LLM provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AIProviderSettings(BaseSettings):
    """Settings for LLM-backed code analysis."""

    model_config = SettingsConfigDict(
        env_prefix="AI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    openai_model: str = Field(
        default="gpt-4o",
        description="OpenAI chat model identifier",
    )
    gemini_model: str = Field(
        default="gemini-1.5-flash-latest",
        description="Google Gemini model identifier",
    )
    temperature: float = Field(
        default=0.1,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for the first attempt",
    )
    retry_temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for the single re-attempt",
    )
    max_tokens: int = Field(
        default=4000,
        gt=0,
        description="Maximum tokens in a model response",
    )
    request_timeout: float = Field(
        default=120.0,
        description="Provider request timeout in seconds",
    )
    default_language: str = Field(
        default="English",
        description="Natural language used for explanations when none is given",
    )
