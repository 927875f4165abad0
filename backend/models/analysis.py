"""
Code analysis domain models and schemas.

Request/response schemas for the AI analysis endpoints, and the
non-diagram result payloads.

Dependencies: pydantic
System role: Analysis API contracts
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from backend.models.common import CamelModel
from backend.models.diagram import DiagramResult


class AnalysisType(str, Enum):
    """Kinds of analysis a caller can request."""

    DIAGRAM = "diagram"
    NATURAL = "natural"
    PSEUDOCODE = "pseudocode"
    CHAT = "chat"


class ApiKeyType(str, Enum):
    """Supported LLM vendors, selected by the caller's key."""

    OPENAI = "OpenAI"
    GEMINI = "Gemini"


class ChatMessage(BaseModel):
    """Single chat message."""

    role: Literal["user", "assistant", "system"] = Field(
        description="Message role: 'user', 'assistant' or 'system'"
    )
    content: str = Field(description="Message content")


class AnalyzeRequest(CamelModel):
    """Request schema for POST /api/analyze."""

    code: str = Field(default="", description="Source text of the selected file")
    api_key: str | None = Field(default=None, description="Caller's provider API key")
    api_key_type: str | None = Field(
        default=None,
        description="'OpenAI' or 'Gemini'; detected from the key when omitted",
    )
    analysis_type: str = Field(description="diagram, natural, pseudocode or chat")
    language: str | None = Field(default=None, description="Output natural language")
    file_name: str | None = Field(default=None, description="Path of the analysed file")
    messages: list[ChatMessage] = Field(
        default_factory=list,
        description="Chat history, last message is the user's question",
    )


class ExplanationSection(BaseModel):
    """One section of a natural-language explanation."""

    emoji: str = Field(description="An emoji that represents the section.")
    title: str = Field(description="A short title for the section.")
    text: str = Field(description="A detailed explanation of the code section.")


class ExplanationResult(BaseModel):
    """Natural-language explanation."""

    explanation: list[ExplanationSection] = Field(
        description="An array of explanations for different parts of the code."
    )


class PseudocodeResult(BaseModel):
    """Pseudocode rewrite."""

    pseudocode: str = Field(
        description="The pseudocode representation of the code, written in a human-readable format."
    )


class ChatAnswer(BaseModel):
    """Assistant reply in a chat about a file."""

    answer: str


AnalysisResult = DiagramResult | ExplanationResult | PseudocodeResult | ChatAnswer


class AnalyzeResponse(BaseModel):
    """Response schema for POST /api/analyze."""

    result: AnalysisResult


class ApiKeyCheckRequest(CamelModel):
    """Request schema for POST /api/keys/check."""

    api_key: str = Field(description="Key to classify")


class ApiKeyCheckResponse(CamelModel):
    """Response schema for POST /api/keys/check."""

    api_key_type: str = Field(description="'OpenAI', 'Gemini' or 'Unknown'")
    valid: bool = Field(description="Whether the key looks well formed for its vendor")
