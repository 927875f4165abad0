"""
Test suite for analysis API endpoints.

Tests POST /api/analyze and POST /api/analyze/chat/stream with FastAPI
TestClient. The real AnalysisService runs with a mocked agent injected
through its agent_factory, so routing, validation, layout and the error
envelope are exercised end to end.

System role: Verification of analysis HTTP API
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from backend.api.deps import get_analysis_service
from backend.api.main import create_app
from backend.application.services.analysis_service import AnalysisService
from backend.core.agentic_system.code_analysis_agent import GeneratedDiagram
from backend.core.exceptions import AnalysisError, QuotaExceededError
from backend.models.analysis import PseudocodeResult


@pytest.fixture
def app(settings, mock_agent: MagicMock) -> FastAPI:
    """Create application whose analysis service uses the mocked agent."""
    app = create_app()
    service = AnalysisService(settings=settings, agent_factory=lambda key, key_type: mock_agent)
    app.dependency_overrides[get_analysis_service] = lambda: service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def body(openai_key: str) -> dict:
    """Provide a camelCase analyze request body."""
    return {
        "code": "for (let i = 0; i < 3; i++) console.log(i);",
        "apiKey": openai_key,
        "apiKeyType": "OpenAI",
        "analysisType": "pseudocode",
        "language": "English",
        "fileName": "loop.js",
    }


def parse_sse(text: str) -> list[tuple[str, dict]]:
    """Split an SSE body into (event, data) pairs."""
    events = []
    for frame in text.strip().split("\n\n"):
        lines = dict(line.split(": ", 1) for line in frame.splitlines())
        events.append((lines["event"], json.loads(lines["data"])))
    return events


class TestAnalyzeEndpoint:
    """Test suite for POST /api/analyze."""

    def test_pseudocode_should_return_result(self, client, body, mock_agent):
        # Arrange
        mock_agent.generate.return_value = PseudocodeResult(pseudocode="FOR i FROM 0 TO 2")

        # Act
        response = client.post("/api/analyze", json=body)

        # Assert
        assert response.status_code == 200
        assert response.json() == {"result": {"pseudocode": "FOR i FROM 0 TO 2"}}

    def test_diagram_should_return_positioned_nodes(self, client, body, mock_agent, branching_diagram):
        # Arrange
        nodes, edges = branching_diagram
        mock_agent.generate.return_value = GeneratedDiagram(nodes=nodes, edges=edges)
        body["analysisType"] = "diagram"

        # Act
        response = client.post("/api/analyze", json=body)

        # Assert
        assert response.status_code == 200
        result = response.json()["result"]
        assert [n["id"] for n in result["nodes"]] == ["start", "check", "yes", "no", "end"]
        assert result["nodes"][0]["type"] == "start"
        assert result["nodes"][0]["data"] == {"label": "Start"}
        assert set(result["nodes"][0]["position"]) == {"x", "y"}
        assert result["edges"][1] == {"id": "echeck-yes", "source": "check", "target": "yes", "label": "Yes"}

    def test_chat_should_return_answer(self, client, body, mock_agent):
        # Arrange
        mock_agent.chat.return_value = "It logs 0, 1 and 2."
        body["analysisType"] = "chat"
        body["messages"] = [{"role": "user", "content": "What is logged?"}]

        # Act
        response = client.post("/api/analyze", json=body)

        # Assert
        assert response.status_code == 200
        assert response.json() == {"result": {"answer": "It logs 0, 1 and 2."}}

    def test_missing_key_should_return_400(self, client, body):
        del body["apiKey"]

        response = client.post("/api/analyze", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Missing API credentials"

    def test_unsupported_provider_should_return_400(self, client, body):
        body["apiKeyType"] = "Anthropic"

        response = client.post("/api/analyze", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Unsupported AI provider"

    def test_invalid_analysis_type_should_return_400(self, client, body):
        body["analysisType"] = "poem"

        response = client.post("/api/analyze", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid analysis type"

    def test_quota_should_return_500_with_message(self, client, body, mock_agent):
        mock_agent.generate.side_effect = QuotaExceededError("You exceeded your current quota")

        response = client.post("/api/analyze", json=body)

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "AI quota exceeded", "details": None}

    def test_empty_diagram_should_return_500(self, client, body, mock_agent):
        mock_agent.generate.return_value = GeneratedDiagram(nodes=[], edges=[])
        body["analysisType"] = "diagram"

        response = client.post("/api/analyze", json=body)

        assert response.status_code == 500
        assert response.json()["error"] == "AI failed to generate a graph."

    def test_provider_failure_should_hide_details(self, client, body, mock_agent):
        mock_agent.generate.side_effect = AnalysisError("Invalid JSON", {"attempts": 2})

        response = client.post("/api/analyze", json=body)

        assert response.status_code == 500
        assert response.json()["details"] is None


class TestChatStreamEndpoint:
    """Test suite for POST /api/analyze/chat/stream."""

    @pytest.fixture
    def chat_body(self, body: dict) -> dict:
        body["analysisType"] = "chat"
        body["messages"] = [{"role": "user", "content": "What is logged?"}]
        return body

    def test_stream_should_emit_sse_frames(self, client, chat_body, mock_agent):
        # Arrange
        async def tokens(*args):
            for token in ["0, ", "1 and ", "2"]:
                yield token

        mock_agent.astream_chat = tokens

        # Act
        response = client.post("/api/analyze/chat/stream", json=chat_body)

        # Assert
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        events = parse_sse(response.text)
        assert [name for name, _ in events] == ["token", "token", "token", "complete"]
        assert events[0][1] == {"token": "0, ", "index": 0}
        assert events[-1][1] == {"full_answer": "0, 1 and 2"}

    def test_stream_should_emit_error_event(self, client, chat_body, mock_agent):
        # Arrange
        async def tokens(*args):
            raise QuotaExceededError()
            yield

        mock_agent.astream_chat = tokens

        # Act
        response = client.post("/api/analyze/chat/stream", json=chat_body)

        # Assert
        assert response.status_code == 200
        assert parse_sse(response.text) == [
            ("error", {"code": "QUOTA_EXCEEDED", "message": "AI quota exceeded"})
        ]

    def test_stream_should_validate_before_streaming(self, client, chat_body):
        chat_body["messages"] = []

        response = client.post("/api/analyze/chat/stream", json=chat_body)

        assert response.status_code == 400
        assert response.json()["error"] == "Chat messages are required"


class TestKeyCheckEndpoint:
    """Test suite for POST /api/keys/check."""

    def test_openai_key(self, client, openai_key):
        response = client.post("/api/keys/check", json={"apiKey": openai_key})

        assert response.status_code == 200
        assert response.json() == {"apiKeyType": "OpenAI", "valid": True}

    def test_unknown_key(self, client):
        response = client.post("/api/keys/check", json={"apiKey": "hello"})

        assert response.json() == {"apiKeyType": "Unknown", "valid": False}


def test_analyze_without_override_uses_default_service():
    """Unsupported keys are rejected before any provider call."""
    client = TestClient(create_app())

    response = client.post(
        "/api/analyze",
        json={"code": "x", "apiKey": "hello", "analysisType": "natural"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "Unsupported AI provider"
