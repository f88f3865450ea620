from __future__ import annotations

import uuid

from fastapi import Depends, FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

from .chat.client import send_chat_query
from .chat.models import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    ExtractRequest,
    ExtractResponse,
)
from .config import DEFAULT_CHAT_CONFIG, SESSION_SECRET
from .exceptions import ChatServiceError
from .extraction.extractor import extract_restaurants
from .extraction.models import ExtractedEntity
from .history.favorites import get_favorites, remove_favorite, toggle_favorite
from .history.searches import add_search, clear_search_history, get_search_history
from .llm.groq_client import generate_reply

app = FastAPI(title="Bitebot Chat API", version="1.0.0")
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)


def get_session_id(request: Request) -> str:
    """Return the chat session id, creating one on first use."""
    session_id = request.session.get("session_id")
    if not session_id:
        session_id = uuid.uuid4().hex
        request.session["session_id"] = session_id
    return session_id


def _ask_bot(message: str, session_id: str) -> list[str]:
    # The webhook wins when configured; otherwise Groq answers directly.
    if DEFAULT_CHAT_CONFIG.webhook_url:
        return send_chat_query(message, session_id, DEFAULT_CHAT_CONFIG)
    return generate_reply(message)


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/extract", response_model=ExtractResponse)
def extract(body: ExtractRequest) -> ExtractResponse:
    return ExtractResponse(restaurants=extract_restaurants(body.text))


# ── Chat endpoint ────────────────────────────────────────────────────────


@app.post("/chat", response_model=ChatResponse)
def chat(
    body: ChatRequest,
    session_id: str = Depends(get_session_id),
) -> ChatResponse:
    add_search(session_id, body.message)

    try:
        replies = _ask_bot(body.message, session_id)
    except ChatServiceError as exc:
        return ChatResponse(messages=[
            ChatMessage(
                content=f"Sorry, I encountered an error: {exc.message}",
                is_error=True,
            ),
        ])

    # One bubble per fulfillment message; restaurant cards ride along when found
    return ChatResponse(messages=[
        ChatMessage(content=reply, restaurants=extract_restaurants(reply))
        for reply in replies
    ])


# ── Search history ───────────────────────────────────────────────────────


@app.get("/history")
def history(session_id: str = Depends(get_session_id)) -> dict:
    return {"searches": get_search_history(session_id)}


@app.delete("/history")
def delete_history(session_id: str = Depends(get_session_id)) -> dict:
    clear_search_history(session_id)
    return {"status": "cleared"}


# ── Favorites ────────────────────────────────────────────────────────────


@app.get("/favorites")
def favorites(session_id: str = Depends(get_session_id)) -> dict:
    return {"favorites": get_favorites(session_id)}


@app.post("/favorites")
def toggle_favorite_endpoint(
    body: ExtractedEntity,
    session_id: str = Depends(get_session_id),
) -> dict:
    state = toggle_favorite(session_id, body)
    return {"is_favorite": state, "favorites": get_favorites(session_id)}


@app.delete("/favorites/{name:path}")
def delete_favorite(name: str, session_id: str = Depends(get_session_id)) -> dict:
    remove_favorite(session_id, name)
    return {"favorites": get_favorites(session_id)}
