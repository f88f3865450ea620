from __future__ import annotations

from bitebot.chat.fulfillment import parse_fulfillment_messages


def _message(text: str) -> dict:
    return {"text": {"text": [text]}}


def test_query_result_shape():
    payload = {"queryResult": {"fulfillmentMessages": [_message("Hi there"), _message("Second")]}}
    assert parse_fulfillment_messages(payload) == ["Hi there", "Second"]


def test_top_level_messages_shape():
    payload = {"fulfillmentMessages": [_message("From webhook")]}
    assert parse_fulfillment_messages(payload) == ["From webhook"]


def test_fulfillment_text_fallback():
    assert parse_fulfillment_messages({"fulfillmentText": "Plain reply"}) == ["Plain reply"]


def test_query_result_takes_precedence():
    payload = {
        "queryResult": {"fulfillmentMessages": [_message("nested")]},
        "fulfillmentMessages": [_message("top")],
        "fulfillmentText": "flat",
    }
    assert parse_fulfillment_messages(payload) == ["nested"]


def test_non_text_messages_are_skipped():
    payload = {"fulfillmentMessages": [
        {"card": {"title": "Menu"}},
        {"text": {"text": []}},
        _message("kept"),
    ]}
    assert parse_fulfillment_messages(payload) == ["kept"]


def test_only_first_text_entry_is_used():
    payload = {"fulfillmentMessages": [{"text": {"text": ["first", "second"]}}]}
    assert parse_fulfillment_messages(payload) == ["first"]


def test_unknown_shape_returns_none():
    assert parse_fulfillment_messages({"reply": "hello"}) is None


def test_empty_message_list_returns_none():
    assert parse_fulfillment_messages({"fulfillmentMessages": [{"payload": {}}]}) is None


def test_non_object_payload_returns_none():
    assert parse_fulfillment_messages(["not", "a", "dict"]) is None
