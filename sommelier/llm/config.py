from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

logger = logging.getLogger(__name__)


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return cast(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


@dataclass(frozen=True)
class LLMConfig:
    api_key: str = ""
    model: str = "llama-3.3-70b-versatile"
    timeout: float = 25.0
    max_tokens: int = 600
    temperature: float = 0.8
    top_p: float = 1.0
    max_retries: int = 2
    backoff_base: float = 1.0
    base_url: str | None = None

    @classmethod
    def from_env(cls) -> "LLMConfig":
        """Read the Groq settings from the environment at call time."""
        return cls(
            api_key=os.getenv("GROQ_API_KEY", "").strip(),
            model=os.getenv("GROQ_MODEL") or cls.model,
            timeout=_env_number("GROQ_TIMEOUT", cls.timeout, float),
            max_retries=max(0, _env_number("GROQ_MAX_RETRIES", cls.max_retries, int)),
            base_url=os.getenv("GROQ_BASE_URL") or None,
        )


DEFAULT_LLM_CONFIG = LLMConfig()
