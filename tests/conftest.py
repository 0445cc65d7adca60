from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


class StubChatClient:
    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.result = result
        self.error = error
        self.calls: list[tuple[str, list[dict[str, str]], dict[str, Any]]] = []

    async def get_chat_completions(
        self,
        deployment_id: str,
        messages: list[dict[str, str]],
        extension_options: dict[str, Any],
    ) -> Any:
        self.calls.append((deployment_id, messages, extension_options))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def full_fields() -> dict[str, Any]:
    return {
        "override": False,
        "chat_endpoint": "https://x",
        "api_key": "k",
        "embeddings_endpoint": "e",
        "search_endpoint": "s",
        "search_index_name": "idx",
        "search_api_key": "sk",
        "api_version": "2023-10-01-preview",
        "strictness": 3,
        "top": 10,
    }
