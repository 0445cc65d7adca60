"""
Azure Cognitive Search extension payload builder.

Converts a resolved ToolConfig into the ``dataSources`` fragment that the
Azure OpenAI chat-completions extensions API expects.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tools.config import ToolConfig

EXTENSION_TYPE = "AzureCognitiveSearch"


@dataclass(frozen=True)
class SearchExtensionPayload:
    endpoint: str
    key: str
    index_name: str
    embedding_endpoint: str
    embedding_key: str
    query_type: str
    in_scope: bool
    strictness: int
    top_n_documents: int
    role_information: str
    type: str = EXTENSION_TYPE

    @classmethod
    def from_config(cls, config: ToolConfig) -> "SearchExtensionPayload":
        """
        Build the payload from a resolved config.

        The embedding key is the Azure OpenAI API key; strictness and the
        document count come straight from the config.
        """
        return cls(
            endpoint=config.search_endpoint,
            key=config.search_api_key,
            index_name=config.search_index_name,
            embedding_endpoint=config.embeddings_endpoint,
            embedding_key=config.api_key,
            query_type=config.query_type,
            in_scope=config.in_scope,
            strictness=config.strictness,
            top_n_documents=config.top,
            role_information=config.role_information,
        )

    def to_request(self) -> dict[str, Any]:
        """
        Render the request body fragment.

        Returns:
            {"dataSources": [{"type": "AzureCognitiveSearch", "parameters": {...}}]}
        """
        return {
            "dataSources": [
                {
                    "type": self.type,
                    "parameters": {
                        "endpoint": self.endpoint,
                        "key": self.key,
                        "indexName": self.index_name,
                        "embeddingEndpoint": self.embedding_endpoint,
                        "embeddingKey": self.embedding_key,
                        "queryType": self.query_type,
                        "inScope": self.in_scope,
                        "strictness": self.strictness,
                        "topNDocuments": self.top_n_documents,
                        "roleInformation": self.role_information,
                    },
                }
            ]
        }
