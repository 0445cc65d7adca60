from __future__ import annotations

from typing import Any, Mapping

from tools.azure_search_chat import AzureSearchChatTool
from tools.config import ConfigNamespace, ToolDefaults
from tools.types import ToolSpec


SPEC = ToolSpec(
    name="ask-about-tariffs",
    description="Use the 'ask-about-tariffs' tool to find answers to questions about language in tariffs",
    args={
        "query": "string, required (question about tariff language)",
    },
)

NAMESPACE = ConfigNamespace(prefix="TARIFF_EXPERT_")

DEFAULTS = ToolDefaults()


def create_tool(fields: Mapping[str, Any] | None = None, **kwargs: Any) -> AzureSearchChatTool:
    return AzureSearchChatTool(fields, spec=SPEC, namespace=NAMESPACE, defaults=DEFAULTS, **kwargs)
