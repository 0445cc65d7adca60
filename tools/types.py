from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    args: dict[str, str]


class QueryInput(BaseModel):
    query: str = Field(description="Search word or phrase to Azure AI Search")
