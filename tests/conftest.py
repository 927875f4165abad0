"""
Shared test fixtures and configuration for entire test suite.

Provides: Settings instances, sample diagrams, GitHub payloads, fake analysis agents
Dependencies: pytest, backend.configs, backend.models
System role: Test infrastructure and fixture management
"""

import base64
from unittest.mock import AsyncMock, MagicMock

import pytest

from backend.configs import Settings
from backend.configs.ai_provider import AIProviderSettings
from backend.configs.highlight import HighlightSettings
from backend.models.diagram import DiagramEdge, DiagramNode, NodeData

OPENAI_KEY = "sk-proj-" + "a" * 48
GEMINI_KEY = "AIza" + "b" * 35


@pytest.fixture
def settings() -> Settings:
    """Provide settings with defaults (tracing disabled)."""
    return Settings()


@pytest.fixture
def ai_settings() -> AIProviderSettings:
    """Provide AI provider settings with default temperatures."""
    return AIProviderSettings()


@pytest.fixture
def highlight_settings() -> HighlightSettings:
    """Provide highlight settings with default style."""
    return HighlightSettings()


@pytest.fixture
def openai_key() -> str:
    """Provide a well-formed OpenAI key."""
    return OPENAI_KEY


@pytest.fixture
def gemini_key() -> str:
    """Provide a well-formed Gemini key."""
    return GEMINI_KEY


def make_node(node_id: str, node_type: str = "process", label: str | None = None) -> DiagramNode:
    """Build a diagram node with a default label."""
    return DiagramNode(id=node_id, type=node_type, data=NodeData(label=label or node_id))


def make_edge(source: str, target: str, label: str | None = None) -> DiagramEdge:
    """Build a diagram edge with an id derived from its endpoints."""
    return DiagramEdge(id=f"e{source}-{target}", source=source, target=target, label=label)


@pytest.fixture
def branching_diagram() -> tuple[list[DiagramNode], list[DiagramEdge]]:
    """Provide an if/else flowchart: start -> check -> (yes | no) -> end."""
    nodes = [
        make_node("start", "start", "Start"),
        make_node("check", "condition", "x > 0?"),
        make_node("yes", "process", "Print positive"),
        make_node("no", "process", "Print negative"),
        make_node("end", "end", "End"),
    ]
    edges = [
        make_edge("start", "check"),
        make_edge("check", "yes", "Yes"),
        make_edge("check", "no", "No"),
        make_edge("yes", "end"),
        make_edge("no", "end"),
    ]
    return nodes, edges


@pytest.fixture
def repo_payload() -> dict:
    """Provide a GET /repos/{owner}/{repo} response body."""
    return {
        "name": "Hello-World",
        "full_name": "octocat/Hello-World",
        "description": "My first repository on GitHub!",
        "stargazers_count": 80,
        "default_branch": "master",
    }


@pytest.fixture
def contents_payload() -> list[dict]:
    """Provide a root directory listing with mixed entry types."""
    return [
        {"name": "README", "path": "README", "type": "file", "size": 13, "sha": "980a0d5"},
        {"name": "src", "path": "src", "type": "dir", "size": 0, "sha": "1a2b3c"},
        {"name": "app.py", "path": "app.py", "type": "file", "size": 120, "sha": "4d5e6f"},
        {"name": "Docs", "path": "Docs", "type": "dir", "size": 0, "sha": "7a8b9c"},
    ]


@pytest.fixture
def file_payload() -> dict:
    """Provide a GET /contents response body for a single file."""
    text = "def add(a, b):\n    return a + b\n"
    return {
        "name": "app.py",
        "path": "src/app.py",
        "type": "file",
        "size": len(text),
        "encoding": "base64",
        "content": base64.b64encode(text.encode("utf-8")).decode("ascii"),
    }


@pytest.fixture
def mock_github_client() -> MagicMock:
    """
    Create mock GitHubClient for testing.

    Returns:
        MagicMock: Mocked GitHubClient with async fetch methods
    """
    client = MagicMock()
    client.get_repository = AsyncMock()
    client.get_contents = AsyncMock()
    return client


@pytest.fixture
def mock_agent() -> MagicMock:
    """
    Create mock CodeAnalysisAgent for testing.

    Returns:
        MagicMock: Mocked agent with async generate/chat methods
    """
    agent = MagicMock()
    agent.generate = AsyncMock()
    agent.chat = AsyncMock()
    return agent
