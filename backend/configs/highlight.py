"""
Syntax highlighting configuration.

Dependencies: pydantic_settings
System role: Pygments formatter defaults
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HighlightSettings(BaseSettings):
    """Settings for HTML syntax highlighting."""

    model_config = SettingsConfigDict(
        env_prefix="HIGHLIGHT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    style: str = Field(
        default="github-dark",
        description="Pygments style name used for inline colors",
    )
    default_lang: str = Field(
        default="javascript",
        description="Lexer alias used when the request names no language",
    )
