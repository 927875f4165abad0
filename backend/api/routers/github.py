"""
GitHub repository browsing endpoints.

Routes:
- GET /github?repo=&path= - Repository summary and one directory level
- GET /github/file?repo=&path= - Decoded file content

Dependencies: backend.application.services.repository_service
System role: Repository browsing HTTP API
"""

import logging

from fastapi import APIRouter, Depends, Query

from backend.api.deps import get_repository_service
from backend.application.services.repository_service import RepositoryService
from backend.core.exceptions import ValidationError
from backend.models.github import FileContentResponse, RepositoryContentsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/github", tags=["github"])


@router.get("", response_model=RepositoryContentsResponse)
async def list_repository(
    repo: str | None = Query(default=None, description="GitHub repository URL"),
    path: str = Query(default="", description="Directory inside the repository"),
    repository_service: RepositoryService = Depends(get_repository_service),
) -> RepositoryContentsResponse:
    """List a repository directory.

    Returns:
        RepositoryContentsResponse: Repository summary and sorted entries

    Raises:
        ValidationError(400): Missing or invalid repository URL
        GitHubAPIError(500): GitHub call failed
    """
    if not repo:
        raise ValidationError("Repository URL is required", field="repo")
    return await repository_service.list_repository(repo, path)


@router.get("/file", response_model=FileContentResponse)
async def get_file(
    repo: str | None = Query(default=None, description="GitHub repository URL"),
    path: str | None = Query(default=None, description="File path inside the repository"),
    repository_service: RepositoryService = Depends(get_repository_service),
) -> FileContentResponse:
    """Fetch one file's decoded content.

    Returns:
        FileContentResponse: Name, path, text and size

    Raises:
        ValidationError(400): Missing parameters, invalid URL or non-file path
        GitHubAPIError(500): GitHub call failed
    """
    if not repo or not path:
        raise ValidationError("Repository URL and file path are required")
    return await repository_service.get_file(repo, path)
