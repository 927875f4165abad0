"""
Core business logic module.

Contains the exception hierarchy, API key classification and diagram
layout. The analysis agent lives in core.agentic_system.
"""

from backend.core.exceptions import (
    MonkeyCodeException,
    ValidationError,
    InvalidRepositoryUrlError,
    NotAFileError,
    GitHubAPIError,
    UnsupportedProviderError,
    AnalysisError,
    QuotaExceededError,
    EmptyDiagramError,
    HighlightError,
)

from backend.core.api_key import detect_api_key_type, is_plausible_api_key
from backend.core.diagram_layout import layout_diagram

__all__ = [
    # Exceptions
    "MonkeyCodeException",
    "ValidationError",
    "InvalidRepositoryUrlError",
    "NotAFileError",
    "GitHubAPIError",
    "UnsupportedProviderError",
    "AnalysisError",
    "QuotaExceededError",
    "EmptyDiagramError",
    "HighlightError",
    # Business logic
    "detect_api_key_type",
    "is_plausible_api_key",
    "layout_diagram",
]
