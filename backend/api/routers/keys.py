"""
API key check endpoint.

Routes: POST /keys/check

Dependencies: backend.core.api_key
System role: Provider key classification HTTP API
"""

from fastapi import APIRouter

from backend.core.api_key import detect_api_key_type, is_plausible_api_key
from backend.models.analysis import ApiKeyCheckRequest, ApiKeyCheckResponse

router = APIRouter(prefix="/keys", tags=["keys"])


@router.post("/check", response_model=ApiKeyCheckResponse)
async def check_api_key(request: ApiKeyCheckRequest) -> ApiKeyCheckResponse:
    """Tell which vendor issued a key and whether it looks well formed."""
    return ApiKeyCheckResponse(
        api_key_type=detect_api_key_type(request.api_key),
        valid=is_plausible_api_key(request.api_key),
    )
