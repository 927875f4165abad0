"""
Syntax highlighting endpoint.

Routes: POST /highlight

Dependencies: backend.application.services.highlight_service
System role: Code display HTTP API
"""

from fastapi import APIRouter, Depends

from backend.api.deps import get_highlight_service
from backend.application.services.highlight_service import HighlightService
from backend.models.highlight import HighlightRequest, HighlightResponse

router = APIRouter(prefix="/highlight", tags=["highlight"])


@router.post("", response_model=HighlightResponse)
async def highlight_code(
    request: HighlightRequest,
    highlight_service: HighlightService = Depends(get_highlight_service),
) -> HighlightResponse:
    """Render source text as highlighted HTML."""
    html = highlight_service.highlight(request.code, request.lang, request.file_name)
    return HighlightResponse(highlighted_code=html)
