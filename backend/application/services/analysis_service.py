"""
Code analysis service.

Orchestrates an analysis request: validates credentials, selects the
vendor, runs the analysis agent and post-processes the result (diagram
layout, chat answer wrapping).
Supports streaming via stream_chat() for the SSE chat endpoint.

Dependencies: backend.core.agentic_system.code_analysis_agent, backend.core.diagram_layout
System role: Analysis service orchestration layer
"""

import logging
from collections.abc import AsyncGenerator, Callable

from backend.configs import Settings
from backend.core.agentic_system.code_analysis_agent import CodeAnalysisAgent
from backend.core.api_key import detect_api_key_type
from backend.core.diagram_layout import layout_diagram
from backend.core.exceptions import (
    EmptyDiagramError,
    MonkeyCodeException,
    QuotaExceededError,
    UnsupportedProviderError,
    ValidationError,
)
from backend.models.analysis import (
    AnalysisType,
    AnalyzeRequest,
    AnalyzeResponse,
    ApiKeyType,
    ChatAnswer,
)
from backend.models.streaming import StreamEvent, StreamEventType
from backend.observability.log_utils import log_with_context, mask_secret

logger = logging.getLogger(__name__)

AgentFactory = Callable[[str, str], CodeAnalysisAgent]

SUPPORTED_KEY_TYPES = {member.value for member in ApiKeyType}


class AnalysisService:
    """
    Analysis service for a single request.

    Holds no per-user state: the provider key travels with every request.
    """

    def __init__(
        self,
        settings: Settings,
        agent_factory: AgentFactory | None = None,
    ) -> None:
        """
        Initialize analysis service.

        Args:
            settings: Application settings
            agent_factory: Optional (api_key, api_key_type) -> agent callable (tests)
        """
        self.settings = settings
        self._agent_factory = agent_factory or self._default_agent

    def _default_agent(self, api_key: str, api_key_type: str) -> CodeAnalysisAgent:
        obs = self.settings.observability
        return CodeAnalysisAgent(
            api_key=api_key,
            api_key_type=api_key_type,
            settings=self.settings.ai,
            use_prompt_registry=obs.enable_tracing,
            prompt_label=obs.prompt_label,
        )

    def _resolve_agent(self, request: AnalyzeRequest) -> CodeAnalysisAgent:
        """
        Validate credentials and build the agent for the request's vendor.

        Raises:
            ValidationError: API key missing
            UnsupportedProviderError: Key type is neither OpenAI nor Gemini
        """
        if not request.api_key:
            raise ValidationError("Missing API credentials", field="apiKey")

        api_key_type = request.api_key_type or detect_api_key_type(request.api_key)
        if api_key_type not in SUPPORTED_KEY_TYPES:
            raise UnsupportedProviderError(api_key_type)

        logger.info(
            f"{__name__}:_resolve_agent - provider={api_key_type} key={mask_secret(request.api_key)}"
        )
        return self._agent_factory(request.api_key, api_key_type)

    def _language(self, request: AnalyzeRequest) -> str:
        return request.language or self.settings.ai.default_language

    @staticmethod
    def _analysis_type(request: AnalyzeRequest) -> AnalysisType:
        try:
            return AnalysisType(request.analysis_type)
        except ValueError:
            raise ValidationError(
                "Invalid analysis type",
                field="analysisType",
                details={"analysis_type": request.analysis_type},
            ) from None

    async def analyze(self, request: AnalyzeRequest) -> AnalyzeResponse:
        """
        Run one analysis over the request's source text.

        Flow:
        1. Validate key and resolve vendor
        2. Dispatch on analysis type
        3. Lay out diagrams; wrap chat replies

        Args:
            request: AnalyzeRequest from the client

        Returns:
            AnalyzeResponse: {"result": ...}

        Raises:
            ValidationError: Missing key, unknown analysis type or empty chat
            UnsupportedProviderError: Unknown vendor
            EmptyDiagramError: Diagram without nodes
            QuotaExceededError: Provider quota exhausted
            AnalysisError: Provider failure
        """
        agent = self._resolve_agent(request)
        analysis_type = self._analysis_type(request)
        language = self._language(request)
        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:analyze - START",
            analysis_type=analysis_type.value,
            file_name=request.file_name,
            code_len=len(request.code),
            history_len=len(request.messages),
        )

        if analysis_type is AnalysisType.CHAT:
            if not request.messages:
                raise ValidationError("Chat messages are required", field="messages")
            answer = await agent.chat(request.code, request.file_name, request.messages, language)
            return AnalyzeResponse(result=ChatAnswer(answer=answer))

        generated = await agent.generate(analysis_type, request.code, language)

        if analysis_type is AnalysisType.DIAGRAM:
            if not generated.nodes:
                raise EmptyDiagramError()
            result = layout_diagram(generated.nodes, generated.edges)
            logger.info(
                f"{__name__}:analyze - diagram nodes={len(result.nodes)} edges={len(result.edges)}"
            )
            return AnalyzeResponse(result=result)

        return AnalyzeResponse(result=generated)

    def stream_chat(self, request: AnalyzeRequest) -> AsyncGenerator[StreamEvent, None]:
        """
        Validate a chat request and return its event stream.

        Validation happens before the first event so callers can answer
        with a plain error response.

        Args:
            request: AnalyzeRequest with messages

        Returns:
            AsyncGenerator[StreamEvent, None]: token events, then complete or error

        Raises:
            ValidationError: Missing key or empty chat
            UnsupportedProviderError: Unknown vendor
        """
        agent = self._resolve_agent(request)
        if not request.messages:
            raise ValidationError("Chat messages are required", field="messages")
        return self._chat_events(agent, request, self._language(request))

    async def _chat_events(
        self,
        agent: CodeAnalysisAgent,
        request: AnalyzeRequest,
        language: str,
    ) -> AsyncGenerator[StreamEvent, None]:
        tokens: list[str] = []
        try:
            async for token in agent.astream_chat(
                request.code, request.file_name, request.messages, language
            ):
                yield StreamEvent(
                    event=StreamEventType.TOKEN,
                    data={"token": token, "index": len(tokens)},
                )
                tokens.append(token)
        except QuotaExceededError as e:
            yield StreamEvent(
                event=StreamEventType.ERROR,
                data={"code": "QUOTA_EXCEEDED", "message": e.message},
            )
            return
        except MonkeyCodeException as e:
            yield StreamEvent(
                event=StreamEventType.ERROR,
                data={"code": "PROCESSING_ERROR", "message": e.message},
            )
            return

        logger.info(f"{__name__}:_chat_events - Stream completed tokens={len(tokens)}")
        yield StreamEvent(
            event=StreamEventType.COMPLETE,
            data={"full_answer": "".join(tokens)},
        )
