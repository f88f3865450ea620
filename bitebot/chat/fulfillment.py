from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def _texts_from_messages(messages: list[Any]) -> list[str]:
    """Take the first ``text.text`` entry of each fulfillment message."""
    texts: list[str] = []
    for message in messages:
        if not isinstance(message, dict):
            continue
        text_dict = message.get("text")
        if not isinstance(text_dict, dict):
            continue
        entries = text_dict.get("text")
        if isinstance(entries, list) and entries and isinstance(entries[0], str):
            texts.append(entries[0])
    return texts


def parse_fulfillment_messages(payload: Any) -> list[str] | None:
    """
    Pull the bot's text replies out of a decoded JSON payload.

    Known shapes, tried in order:
    - ``queryResult.fulfillmentMessages`` (standard agent reply)
    - top-level ``fulfillmentMessages`` (custom webhook reply)
    - top-level ``fulfillmentText`` string

    Returns ``None`` when no shape matches or no text could be read.
    """
    if not isinstance(payload, dict):
        logger.warning("Unexpected bot reply, not a JSON object: %r", payload)
        return None

    query_result = payload.get("queryResult")
    if isinstance(query_result, dict) and isinstance(query_result.get("fulfillmentMessages"), list):
        messages = _texts_from_messages(query_result["fulfillmentMessages"])
    elif isinstance(payload.get("fulfillmentMessages"), list):
        messages = _texts_from_messages(payload["fulfillmentMessages"])
    elif isinstance(payload.get("fulfillmentText"), str):
        messages = [payload["fulfillmentText"]]
    else:
        logger.warning("Unexpected bot reply structure: %s", payload)
        return None

    if not messages:
        logger.warning("Bot reply has no fulfillment messages: %s", payload)
        return None

    return messages
