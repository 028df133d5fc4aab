"""Tests for the show catalog and domain models."""

from tv_show_emoji.domain.catalog import (
    DEFAULT_CATALOG,
    TV_SHOWS,
    VALID_SUBJECTS,
    Catalog,
)
from tv_show_emoji.domain.models import EmojiResult, PromptRequest, SuggestionResult


class TestCatalog:
    def test_shows_sorted_case_insensitively(self):
        assert list(TV_SHOWS) == sorted(TV_SHOWS, key=str.lower)

    def test_shows_unique(self):
        assert len({show.lower() for show in TV_SHOWS}) == len(TV_SHOWS)

    def test_subjects(self):
        assert len(VALID_SUBJECTS) == 14
        assert "overall" in VALID_SUBJECTS
        assert all(subject == subject.lower() for subject in VALID_SUBJECTS)

    def test_find_show(self):
        assert DEFAULT_CATALOG.find_show(" game of thrones ") == "Game of Thrones"
        assert DEFAULT_CATALOG.find_show("Game of") is None

    def test_custom_catalog(self):
        catalog = Catalog(shows=("Alpha", "Beta"), subjects=("plot",))
        assert catalog.find_show("BETA") == "Beta"
        assert catalog.find_show("Friends") is None


class TestModels:
    def test_emoji_result(self):
        result = EmojiResult(emoji="🔥", explanation="Hot.")
        assert result.to_line() == "🔥 - Hot."

    def test_suggestion_result_count(self):
        request = PromptRequest(show="Lost", subject="plot", count=2)
        result = SuggestionResult(
            request=request,
            model="llama3.2:latest",
            results=[EmojiResult("🏝️", "Island."), EmojiResult("✈️", "Crash.")],
        )
        assert result.count == 2
        assert result.attempts == 1
