"""
Observability module.

Provides logging configuration, correlation ID tracking, request logging
middleware, and prompt version management.
"""

from backend.observability.prompt_registry import ModelConfig, PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig"]
