"""
Pydantic models for prompt registry configuration.

Model parameters tracked alongside each analysis prompt version.

Dependencies: pydantic
System role: Configuration validation for prompt-model pairs
"""

from typing import Any

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """
    LLM configuration stored with a prompt version.

    Attributes:
        provider: Vendor tag ("OpenAI" or "Gemini")
        model: Model identifier (e.g. "gpt-4o")
        temperature: Sampling temperature of the first attempt
        max_tokens: Maximum tokens in response
        schema_name: Structured output schema the prompt is paired with
    """

    provider: str = Field(description="Vendor tag")
    model: str = Field(description="LLM model identifier")
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    max_tokens: int | None = Field(default=None, gt=0)
    schema_name: str | None = Field(default=None)

    def to_langfuse_config(self) -> dict[str, Any]:
        """Convert to the config dict stored with a Langfuse prompt."""
        return self.model_dump(exclude_none=True)
