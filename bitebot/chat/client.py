from __future__ import annotations

import logging

import httpx

from ..config import DEFAULT_CHAT_CONFIG, ChatConfig
from ..exceptions import ChatServiceError
from .fulfillment import parse_fulfillment_messages

logger = logging.getLogger(__name__)


def send_chat_query(
    query: str,
    session_id: str,
    config: ChatConfig = DEFAULT_CHAT_CONFIG,
) -> list[str]:
    """
    Send a user message to the bot webhook and return its text replies.

    Raises ``ChatServiceError`` when the webhook is not configured,
    unreachable, answers with an error status, or replies with JSON
    that carries no fulfillment messages.
    """
    if not config.webhook_url:
        raise ChatServiceError("Invalid URL")

    payload = {"text": query, "session": session_id}

    try:
        resp = httpx.post(config.webhook_url, json=payload, timeout=config.timeout)
    except httpx.HTTPError as exc:
        logger.warning("Bot webhook request failed", exc_info=True)
        raise ChatServiceError(str(exc) or "No data") from exc

    if resp.status_code >= 400:
        raise ChatServiceError(resp.text or "Bot webhook error", status_code=resp.status_code)

    try:
        body = resp.json()
    except ValueError as exc:
        logger.warning("Bot webhook returned non-JSON body", exc_info=True)
        raise ChatServiceError("Invalid JSON structure", status_code=resp.status_code) from exc

    messages = parse_fulfillment_messages(body)
    if messages is None:
        raise ChatServiceError("Invalid JSON structure", status_code=resp.status_code)
    return messages
