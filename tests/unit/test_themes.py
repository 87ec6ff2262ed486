"""Tests for the theme catalog."""

from dataclasses import replace

import pytest

from storyweaver.core.errors import EmptyTemplateListError
from storyweaver.core.themes import (
    DEFAULT_THEME_ID,
    THEMES,
    ThemeId,
    get_all_themes,
    get_bank,
    get_default_theme,
    get_theme,
    is_known_theme,
    validate_catalog,
)
from storyweaver.core.types import Slot


class TestCatalog:
    """Tests for catalog contents."""

    def test_catalog_order(self):
        ids = [theme.id for theme in get_all_themes()]
        assert ids == [
            "forest", "space", "underwater", "medieval",
            "cyberpunk", "fairy-tale", "steampunk", "superhero",
        ]

    def test_default_is_first_theme(self):
        assert DEFAULT_THEME_ID is ThemeId.FOREST
        assert get_default_theme().id == get_all_themes()[0].id

    @pytest.mark.parametrize("theme", list(THEMES.values()), ids=lambda t: t.id)
    def test_every_slot_has_candidates(self, theme):
        for slot in Slot:
            assert len(theme.bank.slot(slot)) > 0
            assert all(candidate.strip() for candidate in theme.bank.slot(slot))

    @pytest.mark.parametrize("theme", list(THEMES.values()), ids=lambda t: t.id)
    def test_display_metadata(self, theme):
        assert theme.name
        assert theme.description
        assert theme.color.startswith("#")
        assert theme.card_background
        assert "{child_name}" in theme.character_portrait

    def test_label_capitalizes_id(self):
        assert get_theme("space").label == "Space"
        assert get_theme("fairy-tale").label == "Fairy-tale"


class TestLookup:
    """Tests for theme lookup and fallback."""

    def test_known_theme(self):
        assert get_theme("underwater").id == "underwater"

    def test_lookup_is_case_insensitive(self):
        assert get_theme("  SPACE ").id == "space"
        assert get_theme("fairy_tale").id == "fairy-tale"

    def test_unknown_theme_falls_back(self, caplog):
        with caplog.at_level("WARNING"):
            theme = get_theme("nonexistent-theme-id")
        assert theme.id == "forest"
        assert "falling back" in caplog.text

    def test_none_falls_back(self):
        assert get_theme(None).id == "forest"

    def test_is_known_theme(self):
        assert is_known_theme("medieval")
        assert not is_known_theme("jungle")
        assert not is_known_theme("")

    def test_get_bank(self):
        assert get_bank("space") is THEMES[ThemeId.SPACE].bank
        assert get_bank("unknown") is THEMES[ThemeId.FOREST].bank


class TestValidateCatalog:
    """Tests for catalog validation."""

    def test_shipped_catalog_is_valid(self):
        validate_catalog()

    def test_empty_slot_is_reported(self):
        forest = THEMES[ThemeId.FOREST]
        broken = replace(forest, bank=replace(forest.bank, lessons=(), objects=()))

        with pytest.raises(EmptyTemplateListError) as exc_info:
            validate_catalog([broken])

        message = str(exc_info.value)
        assert "forest" in message
        assert "objects" in message
        assert "lessons" in message
