from __future__ import annotations

from typing import Any, Callable

from pydantic import ValidationError

from tools import azure_ai_search_vector, tariff_expert
from tools.azure_search_chat import AzureSearchChatTool
from tools.types import QueryInput, ToolSpec


ToolFactory = Callable[..., AzureSearchChatTool]


def get_tool_specs() -> list[ToolSpec]:
    return [azure_ai_search_vector.SPEC, tariff_expert.SPEC]


def get_tool_factory(name: str) -> ToolFactory | None:
    if name == azure_ai_search_vector.SPEC.name:
        return azure_ai_search_vector.create_tool
    if name == tariff_expert.SPEC.name:
        return tariff_expert.create_tool
    return None


async def run_tool(tool: AzureSearchChatTool, args: dict[str, Any]) -> dict[str, Any]:
    try:
        data = QueryInput.model_validate(args)
    except ValidationError as e:
        return {"error": f"Invalid arguments for {tool.name}: {e.errors()[0]['msg']}"}
    return {"result": await tool.answer(data.query)}
