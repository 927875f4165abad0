"""
Syntax highlighting request/response schemas.

Dependencies: pydantic
System role: Highlight API contracts
"""

from pydantic import Field

from backend.models.common import CamelModel


class HighlightRequest(CamelModel):
    """Request schema for POST /api/highlight."""

    code: str | None = Field(default=None, description="Source text to highlight")
    lang: str | None = Field(default=None, description="Lexer alias, e.g. 'python'")
    file_name: str | None = Field(
        default=None,
        description="File name used to guess the lexer when lang is unknown",
    )


class HighlightResponse(CamelModel):
    """Response schema for POST /api/highlight."""

    highlighted_code: str = Field(description="Self-contained HTML fragment")
