"""
Observability configuration settings.

Settings for the Langfuse prompt registry.

Dependencies: pydantic_settings
System role: Observability configuration for prompt versioning
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class ObservabilitySettings(BaseSettings):
    """Observability configuration for Langfuse."""

    model_config = SettingsConfigDict(
        env_prefix="LANGFUSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    public_key: str | None = Field(
        default=None,
        description="Langfuse public key",
    )
    secret_key: str | None = Field(
        default=None,
        description="Langfuse secret key",
    )
    host: str = Field(
        default="http://localhost:3000",
        description="Langfuse server host URL",
    )
    enable_tracing: bool = Field(
        default=False,
        description="Enable Langfuse prompt registry",
    )
    prompt_label: str | None = Field(
        default=None,
        description="Label used when fetching prompts from the registry",
    )
