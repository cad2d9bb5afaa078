"""Runtime settings, read once from the environment by the entry points."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from exec_assistant.processing.analyzer import DEFAULT_MAX_TOKENS, DEFAULT_MODEL

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Explicit configuration handed to EmailAnalyzer and the web server."""

    api_key: str = ""
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    host: str = "127.0.0.1"
    port: int = 8000

    @classmethod
    def from_env(cls) -> Settings:
        """Build Settings from environment variables.

        A missing ANTHROPIC_API_KEY becomes an empty string; the request then
        fails at the API rather than here.
        """
        api_key = os.environ.get("ANTHROPIC_API_KEY", "")
        if not api_key:
            logger.warning("ANTHROPIC_API_KEY is not set; analysis requests will fail")
        return cls(
            api_key=api_key,
            model=os.environ.get("ASSISTANT_MODEL", DEFAULT_MODEL),
            max_tokens=_int_env("ASSISTANT_MAX_TOKENS", DEFAULT_MAX_TOKENS),
            host=os.environ.get("ASSISTANT_HOST", "127.0.0.1"),
            port=_int_env("ASSISTANT_PORT", 8000),
        )


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s %r; defaulting to %d", name, raw, default)
        return default
