from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
from openai import AsyncAzureOpenAI


def extensions_base_url(endpoint: str, deployment_id: str) -> str:
    return f"{endpoint.rstrip('/')}/openai/deployments/{deployment_id}/extensions"


@dataclass(frozen=True)
class AzureSearchChatClient:
    endpoint: str
    api_key: str = field(repr=False)
    api_version: str
    http_client: httpx.AsyncClient | None = field(default=None, repr=False)
    _sdks: dict[str, AsyncAzureOpenAI] = field(default_factory=dict, init=False, repr=False)

    def sdk_for(self, deployment_id: str) -> AsyncAzureOpenAI:
        # one SDK client per deployment; the deployment is part of the base URL
        sdk = self._sdks.get(deployment_id)
        if sdk is None:
            sdk = AsyncAzureOpenAI(
                base_url=extensions_base_url(self.endpoint, deployment_id),
                api_key=self.api_key,
                api_version=self.api_version,
                max_retries=0,
                http_client=self.http_client,
            )
            self._sdks[deployment_id] = sdk
        return sdk

    async def get_chat_completions(
        self,
        deployment_id: str,
        messages: list[dict[str, str]],
        extension_options: dict[str, Any],
    ) -> dict[str, Any]:
        raw = await self.sdk_for(deployment_id).chat.completions.with_raw_response.create(
            model=deployment_id,
            messages=messages,
            extra_body=extension_options,
        )
        data = raw.http_response.json()
        if not isinstance(data, dict):
            raise ValueError(f"Unexpected Azure OpenAI response: {data!r}")
        return data
