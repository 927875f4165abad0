"""
Code analysis agent module.

Turns a file's source text into a flowchart, an explanation, pseudocode
or a chat answer using the caller's OpenAI or Gemini key.

Dependencies: langchain_core, langchain_openai, langchain_google_genai
System role: Agent module exports
"""

from backend.core.agentic_system.code_analysis_agent.analysis_agent import (
    CodeAnalysisAgent,
    is_quota_error,
)
from backend.core.agentic_system.code_analysis_agent.analysis_prompt import (
    register_analysis_prompts,
)
from backend.core.agentic_system.code_analysis_agent.analysis_schema import GeneratedDiagram
from backend.core.agentic_system.code_analysis_agent.chat_model_factory import create_chat_model

__all__ = [
    "CodeAnalysisAgent",
    "GeneratedDiagram",
    "create_chat_model",
    "is_quota_error",
    "register_analysis_prompts",
]
