from __future__ import annotations

MAX_SESSIONS = 1000  # oldest session is evicted beyond this

_searches: dict[str, list[str]] = {}


def _history_for(session_id: str) -> list[str]:
    if session_id not in _searches and len(_searches) >= MAX_SESSIONS:
        del _searches[next(iter(_searches))]
    return _searches.setdefault(session_id, [])


def add_search(session_id: str, query: str) -> None:
    trimmed = query.strip()
    if not trimmed:
        return
    history = _history_for(session_id)
    if trimmed not in history:
        history.insert(0, trimmed)  # Newest at the top


def get_search_history(session_id: str) -> list[str]:
    return list(_searches.get(session_id, []))


def clear_search_history(session_id: str) -> None:
    _searches.pop(session_id, None)


def clear_all_searches() -> None:
    _searches.clear()
