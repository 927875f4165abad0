"""Code analysis API endpoints.

Routes:
- POST /analyze - Diagram, explanation, pseudocode or chat answer for a file
- POST /analyze/chat/stream - Stream a chat answer using Server-Sent Events (SSE)

Dependencies: backend.application.services.analysis_service
System role: AI analysis HTTP API with streaming support
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from backend.api.deps import get_analysis_service
from backend.application.services.analysis_service import AnalysisService
from backend.models.analysis import AnalyzeRequest, AnalyzeResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/analyze", tags=["analyze"])


@router.post("", response_model=AnalyzeResponse)
async def analyze(
    request: AnalyzeRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> AnalyzeResponse:
    """Analyze a file's source text with the caller's AI provider.

    Args:
        request: AnalyzeRequest with code, key and analysis type
        analysis_service: Injected AnalysisService

    Returns:
        AnalyzeResponse: {"result": ...}

    Raises:
        ValidationError(400): Missing credentials or invalid analysis type
        UnsupportedProviderError(400): Key type not OpenAI/Gemini
        AnalysisError(500): Provider failure, quota exhaustion or empty diagram
    """
    return await analysis_service.analyze(request)


@router.post("/chat/stream")
async def chat_stream(
    request: AnalyzeRequest,
    analysis_service: AnalysisService = Depends(get_analysis_service),
) -> StreamingResponse:
    """Stream a chat answer about a file using Server-Sent Events (SSE).

    SSE Format:
        event: token
        data: {"token": "...", "index": 0}

        event: complete
        data: {"full_answer": "..."}

        event: error
        data: {"code": "...", "message": "..."}

    Args:
        request: AnalyzeRequest with code, key and messages
        analysis_service: Injected AnalysisService

    Returns:
        StreamingResponse: SSE stream of chat events
    """
    events = analysis_service.stream_chat(request)
    logger.info(f"{__name__}:chat_stream - START history_len={len(request.messages)}")

    async def event_generator() -> AsyncGenerator[str, None]:
        """Format chat events as SSE frames."""
        async for event in events:
            yield event.to_sse()

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",  # Disable nginx buffering
        },
    )
