"""
Chat model factory.

Maps the caller's API key type onto a LangChain chat model so every
analysis runs through the same Runnable interface regardless of vendor.

Dependencies: langchain_openai, langchain_google_genai, backend.configs
System role: LLM vendor selection
"""

import logging

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from backend.configs.ai_provider import AIProviderSettings
from backend.core.exceptions import UnsupportedProviderError
from backend.models.analysis import ApiKeyType

logger = logging.getLogger(__name__)


def model_name_for(api_key_type: str, settings: AIProviderSettings) -> str:
    """
    Resolve the configured model identifier for a key type.

    Raises:
        UnsupportedProviderError: If the key type is not OpenAI or Gemini
    """
    if api_key_type == ApiKeyType.OPENAI.value:
        return settings.openai_model
    if api_key_type == ApiKeyType.GEMINI.value:
        return settings.gemini_model
    raise UnsupportedProviderError(api_key_type)


def create_chat_model(
    api_key: str,
    api_key_type: str,
    settings: AIProviderSettings,
    temperature: float,
) -> BaseChatModel:
    """
    Create a chat model bound to the caller's key.

    Args:
        api_key: Caller's provider key
        api_key_type: "OpenAI" or "Gemini"
        settings: Model names, token limit and timeout
        temperature: Sampling temperature

    Returns:
        BaseChatModel: ChatOpenAI or ChatGoogleGenerativeAI

    Raises:
        UnsupportedProviderError: If the key type is not OpenAI or Gemini
    """
    model = model_name_for(api_key_type, settings)
    logger.debug(f"{__name__}:create_chat_model - provider={api_key_type} model={model} temperature={temperature}")

    if api_key_type == ApiKeyType.OPENAI.value:
        return ChatOpenAI(
            model=model,
            api_key=api_key,
            temperature=temperature,
            max_tokens=settings.max_tokens,
            timeout=settings.request_timeout,
        )
    return ChatGoogleGenerativeAI(
        model=model,
        google_api_key=api_key,
        temperature=temperature,
        max_output_tokens=settings.max_tokens,
        timeout=settings.request_timeout,
    )
