"""Tests for PromptRegistry."""

from unittest.mock import MagicMock, patch

import pytest
from langchain_core.prompts import ChatPromptTemplate

from backend.observability.prompt_registry.models import ModelConfig
from backend.observability.prompt_registry.registry import PromptRegistry

SETTINGS_PATH = "backend.observability.prompt_registry.registry.get_settings"
LANGFUSE_PATH = "backend.observability.prompt_registry.registry.Langfuse"


@pytest.fixture
def mock_settings() -> MagicMock:
    """Mock settings with Langfuse enabled."""
    settings = MagicMock()
    settings.observability.enable_tracing = True
    settings.observability.public_key = "pk-test"
    settings.observability.secret_key = "sk-test"
    settings.observability.host = "http://localhost:3000"
    return settings


@pytest.fixture
def mock_langfuse() -> MagicMock:
    """Mock Langfuse client."""
    return MagicMock()


@pytest.fixture(autouse=True)
def reset_singleton() -> None:
    """Reset singleton before each test."""
    PromptRegistry._instance = None
    PromptRegistry._client = None
    PromptRegistry._enabled = False


@pytest.fixture
def registry(mock_settings: MagicMock, mock_langfuse: MagicMock) -> PromptRegistry:
    """Enabled registry backed by the mock Langfuse client."""
    with patch(SETTINGS_PATH, return_value=mock_settings):
        with patch(LANGFUSE_PATH, return_value=mock_langfuse):
            return PromptRegistry()


class TestPromptRegistrySingleton:
    """Tests for singleton pattern."""

    def test_singleton_returns_same_instance(self, mock_settings: MagicMock) -> None:
        """Multiple instantiations return same instance."""
        with patch(SETTINGS_PATH, return_value=mock_settings):
            with patch(LANGFUSE_PATH):
                registry1 = PromptRegistry()
                registry2 = PromptRegistry()
                assert registry1 is registry2

    def test_client_built_from_settings(self, mock_settings: MagicMock) -> None:
        """Langfuse client receives the configured keys and host."""
        with patch(SETTINGS_PATH, return_value=mock_settings):
            with patch(LANGFUSE_PATH) as langfuse_cls:
                registry = PromptRegistry()

        assert registry.is_enabled
        langfuse_cls.assert_called_once_with(
            public_key="pk-test",
            secret_key="sk-test",
            host="http://localhost:3000",
        )

    def test_disabled_when_tracing_off(self, mock_settings: MagicMock) -> None:
        """Registry disabled when tracing disabled."""
        mock_settings.observability.enable_tracing = False
        with patch(SETTINGS_PATH, return_value=mock_settings):
            registry = PromptRegistry()
            assert not registry.is_enabled

    def test_disabled_when_keys_missing(self, mock_settings: MagicMock) -> None:
        """Registry disabled when Langfuse keys missing."""
        mock_settings.observability.public_key = None
        with patch(SETTINGS_PATH, return_value=mock_settings):
            registry = PromptRegistry()
            assert not registry.is_enabled


class TestRegisterPrompt:
    """Tests for register_prompt method."""

    def test_register_chat_prompt(self, registry: PromptRegistry, mock_langfuse: MagicMock) -> None:
        """Register ChatPromptTemplate creates chat type prompt."""
        mock_prompt = MagicMock()
        mock_prompt.version = 1
        mock_langfuse.create_prompt.return_value = mock_prompt

        template = ChatPromptTemplate.from_messages([
            ("system", "You explain code in {language}"),
            ("human", "{code}"),
        ])
        config = ModelConfig(provider="OpenAI", model="gpt-4o", temperature=0.1)

        result = registry.register_prompt(
            name="code-analysis-natural",
            template=template,
            config=config,
            labels=["production"],
        )

        assert result == mock_prompt
        mock_langfuse.create_prompt.assert_called_once()
        call_kwargs = mock_langfuse.create_prompt.call_args[1]
        assert call_kwargs["name"] == "code-analysis-natural"
        assert call_kwargs["type"] == "chat"
        assert call_kwargs["labels"] == ["production"]
        assert call_kwargs["prompt"][1] == {"role": "user", "content": "{{code}}"}
        assert call_kwargs["config"] == {"provider": "OpenAI", "model": "gpt-4o", "temperature": 0.1}

    def test_register_when_disabled(self, mock_settings: MagicMock) -> None:
        """Register returns None when disabled."""
        mock_settings.observability.enable_tracing = False
        with patch(SETTINGS_PATH, return_value=mock_settings):
            registry = PromptRegistry()

            template = ChatPromptTemplate.from_messages([("system", "test")])
            config = ModelConfig(provider="OpenAI", model="test")

            result = registry.register_prompt("test", template, config)
            assert result is None


class TestGetLangchainPrompt:
    """Tests for get_langchain_prompt method."""

    def test_get_langchain_prompt(self, registry: PromptRegistry, mock_langfuse: MagicMock) -> None:
        """Fetch and convert to LangChain format."""
        mock_prompt = MagicMock()
        mock_prompt.get_langchain_prompt.return_value = [
            ("system", "You explain code"),
            ("human", "{code}"),
        ]
        mock_langfuse.get_prompt.return_value = mock_prompt

        result = registry.get_langchain_prompt("code-analysis-natural")

        assert isinstance(result, ChatPromptTemplate)
        assert result.input_variables == ["code"]
        assert result.metadata["langfuse_prompt"] == mock_prompt
        mock_langfuse.get_prompt.assert_called_once_with(name="code-analysis-natural")

    def test_get_langchain_prompt_by_label(self, registry: PromptRegistry, mock_langfuse: MagicMock) -> None:
        """Label is forwarded to Langfuse."""
        mock_langfuse.get_prompt.return_value.get_langchain_prompt.return_value = [("human", "{code}")]

        registry.get_langchain_prompt("code-analysis-diagram", label="production")

        mock_langfuse.get_prompt.assert_called_once_with(
            name="code-analysis-diagram", label="production"
        )

    def test_get_langchain_prompt_fetch_failure(self, registry: PromptRegistry, mock_langfuse: MagicMock) -> None:
        """Unknown prompt names fall back to None."""
        mock_langfuse.get_prompt.side_effect = Exception("Prompt not found")

        assert registry.get_langchain_prompt("missing") is None

    def test_get_langchain_prompt_when_disabled(self, mock_settings: MagicMock) -> None:
        """Returns None when disabled."""
        mock_settings.observability.enable_tracing = False
        with patch(SETTINGS_PATH, return_value=mock_settings):
            registry = PromptRegistry()
            result = registry.get_langchain_prompt("test")
            assert result is None
