from __future__ import annotations

from unittest.mock import patch

from bitebot.extraction.models import ExtractedEntity
from bitebot.history.favorites import (
    add_favorite,
    clear_all_favorites,
    get_favorites,
    is_favorite,
    remove_favorite,
    toggle_favorite,
)
from bitebot.history.searches import (
    add_search,
    clear_all_searches,
    clear_search_history,
    get_search_history,
)

SPICE = ExtractedEntity(name="Spice House", rating=4.2)
CURRY = ExtractedEntity(name="Curry Leaf", rating=3.9)


class TestSearchHistory:
    def setup_method(self):
        clear_all_searches()

    def test_newest_first(self):
        add_search("s1", "pizza")
        add_search("s1", "sushi")
        assert get_search_history("s1") == ["sushi", "pizza"]

    def test_trims_and_ignores_blank(self):
        add_search("s1", "  tacos  ")
        add_search("s1", "   ")
        assert get_search_history("s1") == ["tacos"]

    def test_duplicates_ignored(self):
        add_search("s1", "pizza")
        add_search("s1", "sushi")
        add_search("s1", "pizza")
        assert get_search_history("s1") == ["sushi", "pizza"]

    def test_sessions_are_isolated(self):
        add_search("s1", "pizza")
        assert get_search_history("s2") == []

    @patch("bitebot.history.searches.MAX_SESSIONS", 2)
    def test_oldest_session_evicted(self):
        add_search("s1", "pizza")
        add_search("s2", "sushi")
        add_search("s3", "tacos")
        assert get_search_history("s1") == []
        assert get_search_history("s3") == ["tacos"]

    def test_clear(self):
        add_search("s1", "pizza")
        clear_search_history("s1")
        assert get_search_history("s1") == []


class TestFavorites:
    def setup_method(self):
        clear_all_favorites()

    def test_add_is_idempotent(self):
        add_favorite("s1", SPICE)
        add_favorite("s1", SPICE)
        assert get_favorites("s1") == [SPICE]

    def test_toggle(self):
        assert toggle_favorite("s1", SPICE) is True
        assert is_favorite("s1", "Spice House")
        assert toggle_favorite("s1", SPICE) is False
        assert not is_favorite("s1", "Spice House")

    def test_remove_keeps_others(self):
        add_favorite("s1", SPICE)
        add_favorite("s1", CURRY)
        remove_favorite("s1", "Spice House")
        assert get_favorites("s1") == [CURRY]

    @patch("bitebot.history.favorites.MAX_SESSIONS", 2)
    def test_oldest_session_evicted(self):
        add_favorite("s1", SPICE)
        add_favorite("s2", SPICE)
        add_favorite("s3", CURRY)
        assert get_favorites("s1") == []
        assert get_favorites("s2") == [SPICE]
        assert get_favorites("s3") == [CURRY]

    def test_remove_unknown_session(self):
        remove_favorite("nobody", "Spice House")
        assert get_favorites("nobody") == []
