"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from backend.configs import Settings, get_settings
from backend.boundary.github import GitHubClient
from backend.application.services import (
    AnalysisService,
    HighlightService,
    RepositoryService,
)


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._github_client = None

    @property
    def github_client(self) -> GitHubClient:
        """Get cached GitHub client (one connection pool per process)."""
        if self._github_client is None:
            github = get_settings().github
            self._github_client = GitHubClient(
                api_url=github.api_url,
                token=github.token,
                timeout=github.timeout,
                user_agent=github.user_agent,
            )
        return self._github_client

    async def aclose(self) -> None:
        """Close and forget cached clients."""
        if self._github_client is not None:
            await self._github_client.aclose()
        self._github_client = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_repository_service() -> RepositoryService:
    """
    Get repository service instance.

    Returns:
        RepositoryService: Service backed by the cached GitHub client
    """
    return RepositoryService(github_client=get_service_cache().github_client)


def get_highlight_service(
    settings: Settings = Depends(get_settings_dependency),
) -> HighlightService:
    """
    Get highlight service instance.

    Args:
        settings: Application settings (injected via Depends)

    Returns:
        HighlightService: Pygments-backed highlighter
    """
    return HighlightService(settings=settings.highlight)


def get_analysis_service(
    settings: Settings = Depends(get_settings_dependency),
) -> AnalysisService:
    """
    Get analysis service instance.

    Args:
        settings: Application settings (injected via Depends)

    Returns:
        AnalysisService: Service building a provider agent per request
    """
    return AnalysisService(settings=settings)
