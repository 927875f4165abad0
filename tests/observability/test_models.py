"""Tests for prompt registry models."""

import pytest
from pydantic import ValidationError

from backend.observability.prompt_registry.models import ModelConfig


class TestModelConfig:
    """Tests for ModelConfig Pydantic schema."""

    def test_provider_and_model_required(self) -> None:
        """Provider and model fields are required."""
        with pytest.raises(ValidationError):
            ModelConfig(model="gpt-4o")  # type: ignore[call-arg]

    def test_minimal_config(self) -> None:
        """Create config with only required fields."""
        config = ModelConfig(provider="Gemini", model="gemini-1.5-flash-latest")
        assert config.temperature is None
        assert config.max_tokens is None
        assert config.schema_name is None

    @pytest.mark.parametrize("temperature", [-0.1, 2.1])
    def test_temperature_bounds(self, temperature: float) -> None:
        with pytest.raises(ValidationError):
            ModelConfig(provider="OpenAI", model="gpt-4o", temperature=temperature)

    def test_max_tokens_positive(self) -> None:
        with pytest.raises(ValidationError):
            ModelConfig(provider="OpenAI", model="gpt-4o", max_tokens=0)

    def test_to_langfuse_config_drops_unset(self) -> None:
        """Only populated fields are stored with the prompt."""
        config = ModelConfig(
            provider="OpenAI",
            model="gpt-4o",
            temperature=0.0,
            max_tokens=4000,
            schema_name="diagram",
        )
        assert config.to_langfuse_config() == {
            "provider": "OpenAI",
            "model": "gpt-4o",
            "temperature": 0.0,
            "max_tokens": 4000,
            "schema_name": "diagram",
        }
        assert ModelConfig(provider="OpenAI", model="gpt-4o").to_langfuse_config() == {
            "provider": "OpenAI",
            "model": "gpt-4o",
        }
