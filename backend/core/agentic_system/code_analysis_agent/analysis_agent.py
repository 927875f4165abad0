"""
Code analysis agent implementation.

Runs the analysis prompts against the caller's chat model with
structured output. A failed structured generation is re-attempted once
at the lower retry temperature; quota and rate-limit failures are not
retried.
Supports streaming via astream_chat() for the SSE chat endpoint.

Dependencies: langchain_core, tenacity, backend.core.agentic_system.code_analysis_agent
System role: Code analysis orchestration against an LLM vendor
"""

import logging
import re
from collections.abc import AsyncGenerator, Callable, Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.prompts import ChatPromptTemplate
from pydantic import BaseModel
from tenacity import AsyncRetrying, retry_if_not_exception_type, stop_after_attempt

from backend.configs.ai_provider import AIProviderSettings
from backend.core.agentic_system.code_analysis_agent.analysis_prompt import get_analysis_prompt
from backend.core.agentic_system.code_analysis_agent.analysis_schema import STRUCTURED_SCHEMAS
from backend.core.agentic_system.code_analysis_agent.chat_model_factory import create_chat_model
from backend.core.exceptions import (
    AnalysisError,
    QuotaExceededError,
    UnsupportedProviderError,
)
from backend.models.analysis import AnalysisType, ChatMessage

logger = logging.getLogger(__name__)

_QUOTA_PATTERN = re.compile(r"(quota|rate limit|exceeded)", re.IGNORECASE)

ModelFactory = Callable[[float], BaseChatModel]


def is_quota_error(error: BaseException) -> bool:
    """Check whether a provider error reports an exhausted quota or rate limit."""
    return bool(_QUOTA_PATTERN.search(str(error)))


def _message_text(message: BaseMessage | str) -> str:
    """Flatten message content; Gemini may return a list of content parts."""
    if isinstance(message, str):
        return message
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for part in content:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


def to_langchain_messages(messages: Sequence[ChatMessage]) -> list[BaseMessage]:
    """Convert API chat messages to LangChain messages."""
    converted: list[BaseMessage] = []
    for message in messages:
        if message.role == "assistant":
            converted.append(AIMessage(content=message.content))
        elif message.role == "system":
            converted.append(SystemMessage(content=message.content))
        else:
            converted.append(HumanMessage(content=message.content))
    return converted


class CodeAnalysisAgent:
    """
    Code analysis agent bound to one caller's provider key.

    Builds a fresh chat model per attempt so the retry can run at a
    different temperature.
    """

    def __init__(
        self,
        api_key: str,
        api_key_type: str,
        settings: AIProviderSettings,
        use_prompt_registry: bool = False,
        prompt_label: str | None = None,
        model_factory: ModelFactory | None = None,
    ) -> None:
        """
        Initialize code analysis agent.

        Args:
            api_key: Caller's provider key
            api_key_type: "OpenAI" or "Gemini"
            settings: Model names and sampling parameters
            use_prompt_registry: Whether to fetch prompts from Langfuse
            prompt_label: Optional label filter when using registry
            model_factory: Optional temperature -> chat model callable (tests)
        """
        self._api_key_type = api_key_type
        self._settings = settings
        self._use_prompt_registry = use_prompt_registry
        self._prompt_label = prompt_label
        self._model_factory = model_factory or (
            lambda temperature: create_chat_model(api_key, api_key_type, settings, temperature)
        )

    @property
    def api_key_type(self) -> str:
        """Vendor tag this agent talks to."""
        return self._api_key_type

    async def _generate_once(
        self,
        prompt: ChatPromptTemplate,
        schema: type[BaseModel],
        variables: dict,
        temperature: float,
        details: dict,
    ) -> BaseModel:
        """Run one structured generation; any non-quota failure becomes AnalysisError."""
        try:
            chain = prompt | self._model_factory(temperature).with_structured_output(schema)
            result = await chain.ainvoke(variables)
        except (UnsupportedProviderError, AnalysisError):
            raise
        except Exception as e:
            if is_quota_error(e):
                logger.warning(f"{__name__}:generate - quota exceeded: {type(e).__name__}")
                raise QuotaExceededError(str(e)) from e
            raise AnalysisError(str(e), details) from e

        if isinstance(result, schema):
            return result
        if isinstance(result, dict):
            return schema.model_validate(result)
        raise AnalysisError("AI returned an empty response", details)

    async def generate(
        self,
        analysis_type: AnalysisType,
        code: str,
        language: str,
    ) -> BaseModel:
        """
        Produce a structured analysis of source code.

        Args:
            analysis_type: diagram, natural or pseudocode
            code: Source text
            language: Natural language of the output

        Returns:
            GeneratedDiagram, ExplanationResult or PseudocodeResult

        Raises:
            QuotaExceededError: Provider reported quota/rate limit exhaustion
            AnalysisError: Both attempts failed
        """
        schema = STRUCTURED_SCHEMAS[analysis_type]
        prompt = get_analysis_prompt(
            analysis_type,
            use_registry=self._use_prompt_registry,
            label=self._prompt_label,
        )
        variables = {"code": code, "language": language}
        temperatures = (self._settings.temperature, self._settings.retry_temperature)
        details = {"analysis_type": analysis_type.value, "attempts": len(temperatures)}

        retrying = AsyncRetrying(
            stop=stop_after_attempt(len(temperatures)),
            retry=retry_if_not_exception_type((QuotaExceededError, UnsupportedProviderError)),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:generate - attempt {retry_state.attempt_number} failed: "
                f"{retry_state.outcome.exception()}"
            ),
            reraise=True,
        )
        async for attempt in retrying:
            with attempt:
                temperature = temperatures[attempt.retry_state.attempt_number - 1]
                logger.info(
                    f"{__name__}:generate - analysis_type={analysis_type.value} provider={self._api_key_type} "
                    f"attempt={attempt.retry_state.attempt_number} temperature={temperature} code_len={len(code)}"
                )
                result = await self._generate_once(prompt, schema, variables, temperature, details)
        return result

    def _chat_variables(
        self,
        code: str,
        file_name: str | None,
        messages: Sequence[ChatMessage],
        language: str,
    ) -> dict:
        return {
            "code": code,
            "file_name": file_name or "untitled",
            "language": language,
            "history": to_langchain_messages(messages),
        }

    async def chat(
        self,
        code: str,
        file_name: str | None,
        messages: Sequence[ChatMessage],
        language: str,
    ) -> str:
        """
        Answer the latest user message about a file.

        Args:
            code: Source text of the file
            file_name: Path of the file
            messages: Conversation so far, last one is the question
            language: Natural language of the answer

        Returns:
            str: Assistant reply

        Raises:
            QuotaExceededError: Provider reported quota/rate limit exhaustion
            AnalysisError: Provider call failed
        """
        chain = get_analysis_prompt(AnalysisType.CHAT) | self._model_factory(self._settings.temperature)
        logger.info(f"{__name__}:chat - provider={self._api_key_type} history_len={len(messages)}")
        try:
            reply = await chain.ainvoke(self._chat_variables(code, file_name, messages, language))
        except Exception as e:
            if is_quota_error(e):
                raise QuotaExceededError(str(e)) from e
            logger.error(f"{__name__}:chat - {type(e).__name__}: {e}")
            raise AnalysisError(str(e)) from e
        return _message_text(reply)

    async def astream_chat(
        self,
        code: str,
        file_name: str | None,
        messages: Sequence[ChatMessage],
        language: str,
    ) -> AsyncGenerator[str, None]:
        """
        Stream the reply to the latest user message token by token.

        Yields:
            str: Non-empty text chunks in order

        Raises:
            QuotaExceededError: Provider reported quota/rate limit exhaustion
            AnalysisError: Provider call failed
        """
        chain = get_analysis_prompt(AnalysisType.CHAT) | self._model_factory(self._settings.temperature)
        logger.info(f"{__name__}:astream_chat - START provider={self._api_key_type}")
        try:
            async for chunk in chain.astream(self._chat_variables(code, file_name, messages, language)):
                text = _message_text(chunk)
                if text:
                    yield text
        except Exception as e:
            if is_quota_error(e):
                raise QuotaExceededError(str(e)) from e
            logger.error(f"{__name__}:astream_chat - {type(e).__name__}: {e}")
            raise AnalysisError(str(e)) from e
