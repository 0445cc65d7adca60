from __future__ import annotations

from typing import Any, Mapping

from tools.azure_search_chat import AzureSearchChatTool
from tools.config import ConfigNamespace, ToolDefaults
from tools.types import ToolSpec


SPEC = ToolSpec(
    name="azure-ai-search-vector",
    description="Use the 'azure-ai-search-vector' tool to retrieve search results relevant to your input",
    args={
        "query": "string, required (search word or phrase to Azure AI Search)",
    },
)

NAMESPACE = ConfigNamespace(
    prefix="",
    env_names={"completions_deployment_id": "DEFAULT_AZURE_OPENAI_API_COMPLETIONS_DEPLOYMENT_NAME"},
)

DEFAULTS = ToolDefaults()


def create_tool(fields: Mapping[str, Any] | None = None, **kwargs: Any) -> AzureSearchChatTool:
    return AzureSearchChatTool(fields, spec=SPEC, namespace=NAMESPACE, defaults=DEFAULTS, **kwargs)
