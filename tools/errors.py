from __future__ import annotations

import json
from typing import Iterable

import openai


class ConfigurationError(ValueError):
    """Raised when a tool is constructed without the settings it needs."""

    def __init__(self, missing: Iterable[str] = (), invalid: Iterable[str] = ()) -> None:
        self.missing = list(missing)
        self.invalid = list(invalid)
        parts = []
        if self.missing:
            parts.append(f"Missing a required config value: {', '.join(self.missing)}")
        if self.invalid:
            parts.append(f"Invalid config value: {', '.join(self.invalid)}")
        super().__init__("; ".join(parts) or "Missing a required config value.")


class ToolNotInitializedError(RuntimeError):
    """Raised internally when a tool built with override=True is asked to answer."""


def classify_error(exc: BaseException) -> str:
    # APITimeoutError subclasses APIConnectionError, TimeoutError subclasses OSError.
    if isinstance(exc, (openai.APITimeoutError, TimeoutError)):
        return "timeout"
    if isinstance(exc, openai.APIConnectionError):
        return "connection"
    if isinstance(exc, (openai.AuthenticationError, openai.PermissionDeniedError)):
        return "auth"
    if isinstance(exc, openai.RateLimitError):
        return "rate_limit"
    if isinstance(exc, openai.APIStatusError):
        return "server" if exc.status_code >= 500 else "bad_request"
    if isinstance(exc, openai.APIResponseValidationError):
        return "malformed_response"
    if isinstance(exc, ToolNotInitializedError):
        return "not_initialized"
    if isinstance(exc, (json.JSONDecodeError, TypeError, ValueError, KeyError)):
        return "malformed_response"
    if isinstance(exc, OSError):
        return "connection"
    return "unknown"
