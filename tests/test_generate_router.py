#!/usr/bin/env python3
"""
Generate API tests

The Groq call is replaced so the tests exercise request composition,
segmentation and error mapping only.
"""

import time
import pytest
from fastapi.testclient import TestClient
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import app
from generate import llm
from generate.llm import GenerationError, call_groq_with_timeout, complete


COPILOT_TEXT = (
    "## Main Prompt\nBuild a task manager.\n\n"
    "## Custom Instructions (.github/copilot-instructions.md)\n```markdown\n# Copilot\n```\n\n"
    "## Workspace Instructions (.github/instructions/project.instructions.md)\n```markdown\n# Workspace\n```"
)


@pytest.fixture
def client():
    return TestClient(app)


def payload(**overrides):
    body = {
        "title": "Task Manager",
        "stack": ["react", "fastapi"],
        "requirements": "Users manage tasks.",
        "selectedAiTool": "github-copilot",
        "action": "generate",
    }
    body.update(overrides)
    return body


class TestGenerateEndpoint:
    """POST /api/generate"""

    def test_multi_document_tool_returns_files(self, client):
        with patch("generate.router.complete", new=AsyncMock(return_value=COPILOT_TEXT)):
            response = client.post("/api/generate", json=payload())
        assert response.status_code == 200
        data = response.json()
        assert data["result"] == COPILOT_TEXT
        assert data["files"] == {
            "mainPrompt": "Build a task manager.",
            "copilotInstructions": "# Copilot",
            "workspaceInstructions": "# Workspace",
        }

    def test_single_document_tool_returns_result_only(self, client):
        with patch("generate.router.complete", new=AsyncMock(return_value="A general prompt")):
            response = client.post("/api/generate", json=payload(selectedAiTool="general"))
        assert response.status_code == 200
        assert response.json() == {"result": "A general prompt"}

    def test_unknown_tool_degrades_to_generic(self, client):
        mock = AsyncMock(return_value="text")
        with patch("generate.router.complete", new=mock):
            response = client.post("/api/generate", json=payload(selectedAiTool="mystery-ide"))
        assert response.status_code == 200
        assert "files" not in response.json()
        assert "General AI Assistant" in mock.await_args.args[0]

    def test_unstructured_answer_still_returns_every_file(self, client):
        with patch("generate.router.complete", new=AsyncMock(return_value="no headings here")):
            response = client.post("/api/generate", json=payload(selectedAiTool="cursor"))
        files = response.json()["files"]
        assert files["mainPrompt"] == "no headings here"
        assert files["copilotInstructions"].startswith("---\ndescription:")
        assert files["workspaceInstructions"].strip()

    def test_enhance_sends_previous_output(self, client):
        mock = AsyncMock(return_value=COPILOT_TEXT)
        previous = "## Main Prompt\nold prompt"
        with patch("generate.router.complete", new=mock):
            response = client.post("/api/generate", json=payload(action="enhance", requirements=previous))
        assert response.status_code == 200
        prompt = mock.await_args.args[0]
        assert previous in prompt
        assert "Maintain the exact same structure" in prompt

    def test_upstream_failure_is_generic(self, client):
        failing = AsyncMock(side_effect=GenerationError("Groq API error: invalid key gsk_secret"))
        with patch("generate.router.complete", new=failing):
            response = client.post("/api/generate", json=payload())
        assert response.status_code == 500
        assert response.json() == {"detail": "Failed to generate prompt"}
        assert "gsk_secret" not in response.text

    def test_invalid_action_rejected(self, client):
        response = client.post("/api/generate", json=payload(action="summarize"))
        assert response.status_code == 422


class TestCatalogEndpoints:
    def test_tools(self, client):
        response = client.get("/api/tools")
        assert response.status_code == 200
        tools = {tool["id"]: tool for tool in response.json()}
        assert tools["cursor"]["name"] == "Cursor AI"
        keys = [doc["key"] for doc in tools["github-copilot"]["documents"]]
        assert keys == ["mainPrompt", "copilotInstructions", "workspaceInstructions"]

    def test_stack_suggest(self, client):
        response = client.get("/api/stack/suggest", params={"prefix": "tail"})
        assert response.json() == {"prefix": "tail", "suggestion": "tailwind"}

    def test_stack_suggest_skips_selected(self, client):
        response = client.get("/api/stack/suggest", params={"prefix": "re", "selected": ["react"]})
        assert response.json()["suggestion"] == "redis"

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}


def fake_completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeGroq:
    """Stands in for groq.Groq; returns whatever `reply` is set to"""

    reply = None

    def __init__(self, api_key):
        self.api_key = api_key
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))
        self.calls = []

    def _create(self, **kwargs):
        self.calls.append(kwargs)
        if isinstance(FakeGroq.reply, Exception):
            raise FakeGroq.reply
        return FakeGroq.reply


class TestCompletionClient:
    """generate.llm against a fake Groq client"""

    @pytest.mark.asyncio
    async def test_complete_returns_text(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "test-key")
        monkeypatch.setattr(llm, "Groq", FakeGroq)
        FakeGroq.reply = fake_completion("## Main Prompt\nhi")
        assert await complete("prompt") == "## Main Prompt\nhi"

    @pytest.mark.asyncio
    async def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("GROQ_API_KEY", raising=False)
        with pytest.raises(GenerationError):
            await complete("prompt")

    @pytest.mark.asyncio
    async def test_empty_completion(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "test-key")
        monkeypatch.setattr(llm, "Groq", FakeGroq)
        FakeGroq.reply = fake_completion("   ")
        with pytest.raises(GenerationError):
            await complete("prompt")

    @pytest.mark.asyncio
    async def test_api_error_wrapped(self, monkeypatch):
        monkeypatch.setenv("GROQ_API_KEY", "test-key")
        monkeypatch.setattr(llm, "Groq", FakeGroq)
        FakeGroq.reply = RuntimeError("connection reset")
        with pytest.raises(GenerationError):
            await complete("prompt")

    @pytest.mark.asyncio
    async def test_timeout(self):
        def slow_create(**kwargs):
            time.sleep(0.5)
            return fake_completion("late")

        client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=slow_create)))
        with pytest.raises(GenerationError):
            await call_groq_with_timeout(
                client=client,
                model="m",
                temperature=0.1,
                messages=[{"role": "user", "content": "x"}],
                timeout=0.05,
            )

    @pytest.mark.asyncio
    async def test_max_tokens_forwarded(self):
        seen = {}

        def create(**kwargs):
            seen.update(kwargs)
            return fake_completion("ok")

        client = SimpleNamespace(chat=SimpleNamespace(completions=SimpleNamespace(create=create)))
        await call_groq_with_timeout(client, "m", 0.2, [], max_tokens=64)
        assert seen["max_tokens"] == 64
        assert seen["model"] == "m"
