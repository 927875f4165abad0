"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_analysis_service,
    get_highlight_service,
    get_repository_service,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_analysis_service",
    "get_highlight_service",
    "get_repository_service",
    "get_service_cache",
    "get_settings_dependency",
]
