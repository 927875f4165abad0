"""
Exception hierarchy for the MonkeyCode backend.

Provides layered exception structure for domain-specific errors.
Each exception carries the HTTP status the API layer answers with and
a caller-facing message; details are kept for logging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class MonkeyCodeException(Exception):
    """Base exception for all MonkeyCode application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(MonkeyCodeException):
    """Raised when request input is missing or malformed."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class InvalidRepositoryUrlError(ValidationError):
    """Raised when a URL does not point at github.com/<owner>/<repo>."""

    def __init__(self, repo_url: str) -> None:
        super().__init__("Invalid GitHub URL", field="repo", details={"repo_url": repo_url})


class NotAFileError(ValidationError):
    """Raised when a contents path resolves to something other than a file."""

    def __init__(self, path: str) -> None:
        super().__init__("Path is not a file", field="path", details={"path": path})


class GitHubAPIError(MonkeyCodeException):
    """Raised when GitHub answers with a non-success status or is unreachable."""

    def __init__(
        self,
        message: str,
        upstream_status: int | None = None,
        url: str | None = None,
    ) -> None:
        """
        Initialize GitHub API error.

        Args:
            message: Error message
            upstream_status: HTTP status returned by GitHub, None on transport failure
            url: Requested API URL
        """
        details: dict[str, Any] = {}
        if upstream_status is not None:
            details["upstream_status"] = upstream_status
        if url:
            details["url"] = url
        self.upstream_status = upstream_status
        super().__init__(message, details)


class UnsupportedProviderError(MonkeyCodeException):
    """Raised when the API key type names no supported LLM vendor."""

    status_code = 400

    def __init__(self, api_key_type: str | None) -> None:
        super().__init__(
            "Unsupported AI provider",
            {"api_key_type": api_key_type},
        )


class AnalysisError(MonkeyCodeException):
    """Raised when the LLM provider fails to produce an analysis."""


class QuotaExceededError(AnalysisError):
    """Raised when the provider reports an exhausted quota or rate limit."""

    def __init__(self, provider_message: str | None = None) -> None:
        details = {"provider_message": provider_message} if provider_message else None
        super().__init__("AI quota exceeded", details)


class EmptyDiagramError(AnalysisError):
    """Raised when the generated flowchart contains no nodes."""

    def __init__(self) -> None:
        super().__init__("AI failed to generate a graph.")


class HighlightError(MonkeyCodeException):
    """Raised when source text cannot be rendered as highlighted HTML."""

    def __init__(self, lang: str | None = None) -> None:
        super().__init__("Failed to highlight code", {"lang": lang} if lang else None)
