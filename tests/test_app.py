from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

import app as app_module
from conftest import StubChatClient
from tools import azure_ai_search_vector
from tools.config import SETTING_NAMES, MappingConfigSource


@pytest.fixture
def client(monkeypatch) -> TestClient:
    monkeypatch.setattr(app_module, "_tool_cache", {})
    return TestClient(app_module.app)


def test_healthz_and_listing(client) -> None:
    assert client.get("/healthz").json() == {"status": "ok"}
    tools = client.get("/api/tools").json()
    assert [t["name"] for t in tools] == ["azure-ai-search-vector", "ask-about-tariffs"]
    assert "query" in tools[0]["args"]


def test_call_tool_returns_result(client, full_fields) -> None:
    tool = azure_ai_search_vector.create_tool(
        full_fields,
        source=MappingConfigSource({}),
        client_factory=lambda c: StubChatClient(result={"choices": []}),
    )
    app_module._tool_cache[tool.name] = tool

    resp = client.post("/api/tools/azure-ai-search-vector", json={"query": "duty rate"})
    assert resp.status_code == 200
    assert resp.json() == {"tool": "azure-ai-search-vector", "result": '{"choices":[]}'}

    resp = client.post("/api/tools/azure-ai-search-vector", json={"query": ["x"]})
    assert resp.status_code == 422


def test_unknown_tool_is_404(client) -> None:
    assert client.post("/api/tools/nope", json={"query": "q"}).status_code == 404


def test_unconfigured_tool_is_400(client, monkeypatch) -> None:
    for suffix in SETTING_NAMES.values():
        monkeypatch.delenv(f"TARIFF_EXPERT_{suffix}", raising=False)

    resp = client.post("/api/tools/ask-about-tariffs", json={"query": "q"})
    assert resp.status_code == 400
    assert "TARIFF_EXPERT_AZURE_AI_SEARCH_INDEX_NAME" in resp.json()["detail"]
