"""Service orchestrators."""

from .analysis_service import AnalysisService
from .highlight_service import HighlightService
from .repository_service import RepositoryService

__all__ = [
    "AnalysisService",
    "HighlightService",
    "RepositoryService",
]
