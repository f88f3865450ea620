from __future__ import annotations

import logging

from groq import Groq

from ..config import DEFAULT_LLM_CONFIG, LLMConfig
from ..exceptions import ChatServiceError
from ..extraction.extractor import SENTINEL

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are Bitebot, a friendly restaurant recommendation assistant. "
    "Answer small talk and questions in one or two short sentences.\n\n"
    "When the user asks for restaurants, reply in exactly this format "
    "and nothing else:\n"
    f"{SENTINEL}\n"
    "\n"
    "**[<restaurant name>](<website or maps link>)**\n"
    "📍 Address: <street address>\n"
    "⭐ Rating: <rating from 1.0 to 5.0>\n"
    "💰 Price: <$ to $$$$>\n"
    "\n"
    "Repeat the block for up to five restaurants. "
    "Only recommend places you believe exist."
)


def generate_reply(query: str, config: LLMConfig = DEFAULT_LLM_CONFIG) -> list[str]:
    """
    Answer a chat message with the Groq LLM instead of the bot webhook.

    Returns the reply as a single fulfillment message. Raises
    ``ChatServiceError`` when the LLM is disabled, unconfigured, fails,
    or returns an empty reply.
    """
    if not config.enabled or not config.api_key:
        raise ChatServiceError("No chat backend configured")

    try:
        client = Groq(api_key=config.api_key, timeout=config.timeout)
        response = client.chat.completions.create(
            model=config.model,
            messages=[
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": query},
            ],
            max_tokens=config.max_tokens,
            temperature=config.temperature,
        )
        content = (response.choices[0].message.content or "").strip()
    except Exception as exc:
        logger.warning("Groq LLM call failed", exc_info=True)
        raise ChatServiceError("The assistant is unavailable right now") from exc

    if not content:
        raise ChatServiceError("The assistant returned an empty reply")
    return [content]
