from __future__ import annotations

from ..extraction.models import ExtractedEntity

# Restaurants from chat replies carry no id; the name identifies them.
_favorites: dict[str, list[ExtractedEntity]] = {}

MAX_SESSIONS = 1000  # oldest session is evicted beyond this


def _favorites_for(session_id: str) -> list[ExtractedEntity]:
    if session_id not in _favorites and len(_favorites) >= MAX_SESSIONS:
        del _favorites[next(iter(_favorites))]
    return _favorites.setdefault(session_id, [])


def is_favorite(session_id: str, name: str) -> bool:
    return any(f.name == name for f in _favorites.get(session_id, []))


def add_favorite(session_id: str, restaurant: ExtractedEntity) -> None:
    if not is_favorite(session_id, restaurant.name):
        _favorites_for(session_id).append(restaurant)


def remove_favorite(session_id: str, name: str) -> None:
    if session_id in _favorites:
        _favorites[session_id] = [f for f in _favorites[session_id] if f.name != name]


def toggle_favorite(session_id: str, restaurant: ExtractedEntity) -> bool:
    """Flip the favorite state of ``restaurant`` and return the new state."""
    if is_favorite(session_id, restaurant.name):
        remove_favorite(session_id, restaurant.name)
        return False
    add_favorite(session_id, restaurant)
    return True


def get_favorites(session_id: str) -> list[ExtractedEntity]:
    return list(_favorites.get(session_id, []))


def clear_all_favorites() -> None:
    _favorites.clear()
