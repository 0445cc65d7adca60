from __future__ import annotations

from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from fastapi import Body, FastAPI, HTTPException
from pydantic import BaseModel

from tools.azure_search_chat import AzureSearchChatTool
from tools.errors import ConfigurationError
from tools.registry import get_tool_factory, get_tool_specs, run_tool
from tracing.logger import get_logger

_dotenv_path = Path(__file__).parent / ".env"
if _dotenv_path.exists():
    load_dotenv(dotenv_path=_dotenv_path, override=True)
else:
    # Fallback to CWD-based discovery (e.g., when running from repo root)
    load_dotenv(override=True)

logger = get_logger("ai_search_tools.app")


class ToolInfo(BaseModel):
    name: str
    description: str
    args: dict[str, str]


class ToolResponse(BaseModel):
    tool: str
    result: str


app = FastAPI(title="ai_search_tools", version="0.1.0")

_tool_cache: dict[str, AzureSearchChatTool] = {}


def _get_tool(name: str) -> AzureSearchChatTool:
    cached = _tool_cache.get(name)
    if cached is not None:
        return cached
    factory = get_tool_factory(name)
    if factory is None:
        raise HTTPException(status_code=404, detail=f"Unknown tool: {name}")
    try:
        tool = factory()
    except ConfigurationError as e:
        logger.warning("Tool %s is not configured: %s", name, e)
        raise HTTPException(status_code=400, detail=str(e))
    _tool_cache[name] = tool
    return tool


@app.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/tools", response_model=list[ToolInfo])
def list_tools() -> list[ToolInfo]:
    return [ToolInfo(name=s.name, description=s.description, args=s.args) for s in get_tool_specs()]


@app.post("/api/tools/{name}", response_model=ToolResponse)
async def call_tool(name: str, args: dict[str, Any] = Body(...)) -> ToolResponse:
    tool = _get_tool(name)
    out = await run_tool(tool, args)
    if "error" in out:
        raise HTTPException(status_code=422, detail=out["error"])
    return ToolResponse(tool=name, result=out["result"])
