from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# .env sits next to pyproject.toml
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

SESSION_SECRET = os.environ.get("SESSION_SECRET", "bitebot-secret-change-in-production")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ChatConfig:
    """Where user messages are relayed. An empty URL means no webhook."""

    webhook_url: str = os.getenv("BITEBOT_WEBHOOK_URL", "")
    timeout: float = 10.0


@dataclass(frozen=True)
class LLMConfig:
    api_key: str = os.getenv("GROQ_API_KEY", "")
    model: str = os.getenv("BITEBOT_LLM_MODEL", "llama-3.3-70b-versatile")
    timeout: float = 15.0
    max_tokens: int = 1024
    temperature: float = 0.4
    enabled: bool = _env_flag("BITEBOT_LLM_ENABLED", True)


DEFAULT_CHAT_CONFIG = ChatConfig()
DEFAULT_LLM_CONFIG = LLMConfig()
