from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "AI_SEARCH_TOOLS_LOG_LEVEL"


def _resolve_level(value: str | None) -> int:
    if value:
        candidate = logging.getLevelName(value.strip().upper())
        if isinstance(candidate, int):
            return candidate
    return logging.INFO


def get_logger(name: str = "ai_search_tools") -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(_resolve_level(os.getenv(LOG_LEVEL_ENV)))
    return logger
