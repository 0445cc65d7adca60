"""Configuration resolution for the Azure AI Search chat tools.

Each setting is resolved in order: explicit field value, then the config
source (environment variables by default), then the built-in default. Fields
may be keyed by the full variable name (``TARIFF_EXPERT_AZURE_AI_SEARCH_INDEX_NAME``)
or by the attribute name (``search_index_name``).
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

from tools.errors import ConfigurationError


class ConfigSource(Protocol):
    def get(self, key: str) -> str | None: ...


class MappingConfigSource:
    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values = dict(values or {})

    def get(self, key: str) -> Any:
        return self._values.get(key)


class EnvConfigSource:
    """Reads settings from ``os.environ`` (or a given mapping) at lookup time."""

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def get(self, key: str) -> str | None:
        environ = os.environ if self._environ is None else self._environ
        return environ.get(key)


@dataclass(frozen=True)
class ToolDefaults:
    completions_deployment_id: str = "gpt-35-turbo-16k"
    embeddings_endpoint: str = "text-embedding-ada-002"
    api_version: str = "2023-10-01-preview"
    query_type: str = "vectorSimpleHybrid"
    strictness: int = 3
    top: int = 10
    in_scope: bool = True
    role_information: str = "You are an AI assistant that helps people find information"


# attribute name -> variable name without namespace prefix
SETTING_NAMES: dict[str, str] = {
    "chat_endpoint": "AZURE_OPENAI_API_ENDPOINT",
    "api_key": "AZURE_OPENAI_API_KEY",
    "embeddings_endpoint": "AZURE_OPENAI_API_EMBEDDINGS_API_ENDPOINT",
    "completions_deployment_id": "AZURE_OPENAI_API_COMPLETIONS_DEPLOYMENT_NAME",
    "search_endpoint": "AZURE_AI_SEARCH_SERVICE_ENDPOINT",
    "search_index_name": "AZURE_AI_SEARCH_INDEX_NAME",
    "search_api_key": "AZURE_AI_SEARCH_API_KEY",
    "api_version": "AZURE_AI_SEARCH_API_VERSION",
    "strictness": "AZURE_AI_SEARCH_STRICTNESS",
    "top": "AZURE_AI_SEARCH_SEARCH_OPTION_TOP",
}

INT_SETTINGS = ("strictness", "top")
STRICTNESS_RANGE = (1, 5)


@dataclass(frozen=True)
class ConfigNamespace:
    """Variable-name prefix plus per-setting name overrides for one tool variant."""

    prefix: str = ""
    env_names: Mapping[str, str] = field(default_factory=dict)

    def env_name(self, attr: str) -> str:
        if attr in self.env_names:
            return self.env_names[attr]
        return f"{self.prefix}{SETTING_NAMES[attr]}"


@dataclass(frozen=True)
class ToolConfig:
    chat_endpoint: str
    api_key: str = field(repr=False)
    embeddings_endpoint: str
    search_endpoint: str
    search_api_key: str = field(repr=False)
    search_index_name: str
    api_version: str
    query_type: str
    strictness: int
    top: int
    completions_deployment_id: str
    in_scope: bool = True
    role_information: str = ToolDefaults.role_information


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def _lookup(
    attr: str,
    fields: Mapping[str, Any],
    namespace: ConfigNamespace,
    source: ConfigSource,
) -> Any:
    env_name = namespace.env_name(attr)
    for candidate in (fields.get(env_name), fields.get(attr), source.get(env_name)):
        if _present(candidate):
            return candidate.strip() if isinstance(candidate, str) else candidate
    return None


def resolve_config(
    fields: Mapping[str, Any] | None = None,
    *,
    namespace: ConfigNamespace | None = None,
    defaults: ToolDefaults | None = None,
    source: ConfigSource | None = None,
) -> ToolConfig:
    """Resolve and validate every setting, raising ConfigurationError on gaps."""
    fields = fields or {}
    namespace = namespace or ConfigNamespace()
    defaults = defaults or ToolDefaults()
    source = source or EnvConfigSource()

    values: dict[str, Any] = {}
    for attr in SETTING_NAMES:
        value = _lookup(attr, fields, namespace, source)
        if value is None:
            value = getattr(defaults, attr, None)
        values[attr] = value
    # query type is not read from the environment
    values["query_type"] = defaults.query_type

    missing = [namespace.env_name(a) if a in SETTING_NAMES else a for a, v in values.items() if not _present(v)]
    invalid: list[str] = []
    for attr in INT_SETTINGS:
        if not _present(values[attr]):
            continue
        number = _to_int(values[attr])
        if number is None:
            invalid.append(f"{namespace.env_name(attr)}={values[attr]!r} (expected an integer)")
            continue
        values[attr] = number

    if isinstance(values["strictness"], int):
        low, high = STRICTNESS_RANGE
        if not low <= values["strictness"] <= high:
            invalid.append(f"{namespace.env_name('strictness')}={values['strictness']} (expected {low}..{high})")
    if isinstance(values["top"], int) and values["top"] < 1:
        invalid.append(f"{namespace.env_name('top')}={values['top']} (expected >= 1)")

    if missing or invalid:
        raise ConfigurationError(missing=missing, invalid=invalid)

    return ToolConfig(
        **values,
        in_scope=defaults.in_scope,
        role_information=defaults.role_information,
    )
