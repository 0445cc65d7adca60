"""Chat completion grounded on an Azure AI Search index, exposed as an agent tool."""
from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping, Protocol

from llm.azure_openai_client import AzureSearchChatClient
from tools.config import ConfigNamespace, ConfigSource, ToolConfig, ToolDefaults, resolve_config
from tools.errors import ToolNotInitializedError, classify_error
from tools.extension_payload import SearchExtensionPayload
from tools.types import ToolSpec
from tracing.logger import get_logger

ERROR_MESSAGE = "There was an error with Azure AI Search."
NOT_INITIALIZED_MESSAGE = "Azure AI Search tool is not initialized."


class ChatClient(Protocol):
    async def get_chat_completions(
        self,
        deployment_id: str,
        messages: list[dict[str, str]],
        extension_options: dict[str, Any],
    ) -> Any: ...


ClientFactory = Callable[[ToolConfig], ChatClient]


def default_client_factory(config: ToolConfig) -> AzureSearchChatClient:
    client = AzureSearchChatClient(
        endpoint=config.chat_endpoint,
        api_key=config.api_key,
        api_version=config.api_version,
    )
    client.sdk_for(config.completions_deployment_id)
    return client


def parse_flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def serialize_response(result: Any) -> str:
    if result is None:
        raise ValueError("Empty Azure OpenAI response")
    if hasattr(result, "model_dump"):
        result = result.model_dump(mode="json", exclude_unset=True)
    return json.dumps(result, ensure_ascii=False, separators=(",", ":"))


class AzureSearchChatTool:
    """
    Forwards a query to an Azure OpenAI deployment grounded on an Azure AI
    Search index and returns the raw response as a JSON string.

    With ``override=True`` in ``fields`` construction skips validation and
    client setup; ``answer`` then reports NOT_INITIALIZED_MESSAGE.
    """

    def __init__(
        self,
        fields: Mapping[str, Any] | None = None,
        *,
        spec: ToolSpec,
        namespace: ConfigNamespace,
        defaults: ToolDefaults | None = None,
        source: ConfigSource | None = None,
        client_factory: ClientFactory | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        fields = dict(fields or {})
        self.spec = spec
        self.namespace = namespace
        self.logger = logger or get_logger(f"ai_search_tools.{spec.name}")
        self.override = parse_flag(fields.pop("override", False))
        self.config: ToolConfig | None = None
        self.client: ChatClient | None = None
        self.extension_payload: SearchExtensionPayload | None = None
        if self.override:
            return

        self.config = resolve_config(fields, namespace=namespace, defaults=defaults, source=source)
        factory = client_factory or default_client_factory
        self.client = factory(self.config)
        self.extension_payload = SearchExtensionPayload.from_config(self.config)

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def description(self) -> str:
        return self.spec.description

    @property
    def ready(self) -> bool:
        return self.client is not None and self.extension_payload is not None

    async def answer(self, query: str) -> str:
        config, client, payload = self.config, self.client, self.extension_payload
        if config is None or client is None or payload is None:
            err = ToolNotInitializedError(f"{self.name} was constructed with override=True")
            self.logger.error("Azure AI Search request failed [kind=%s]", classify_error(err), exc_info=err)
            return NOT_INITIALIZED_MESSAGE

        messages = [{"role": "user", "content": query}]
        self.logger.info("Message: %s", "\n".join(m["content"] for m in messages))
        try:
            result = await client.get_chat_completions(
                config.completions_deployment_id,
                messages,
                payload.to_request(),
            )
            return serialize_response(result)
        except Exception as e:
            self.logger.error("Azure AI Search request failed [kind=%s]", classify_error(e), exc_info=e)
            return ERROR_MESSAGE
