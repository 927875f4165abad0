"""
GitHub REST API configuration.

Settings for the read-only contents proxy (token, base URL, timeouts).

Dependencies: pydantic_settings
System role: GitHub boundary configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubSettings(BaseSettings):
    """Settings for GitHub API access."""

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    token: str | None = Field(
        default=None,
        description="Optional personal access token (GITHUB_TOKEN)",
    )
    api_url: str = Field(
        default="https://api.github.com",
        description="GitHub REST API base URL",
    )
    timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds",
    )
    user_agent: str = Field(
        default="monkeycode",
        description="User-Agent header sent to GitHub",
    )
