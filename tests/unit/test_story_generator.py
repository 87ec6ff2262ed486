"""Tests for story assembly."""

from datetime import datetime, timezone

import pytest

from storyweaver.core.errors import ValidationError
from storyweaver.core.modules.page_synthesizer import CLOSING_TEMPLATE, CONTINUATION_CLAUSE, OPENING_CLAUSE
from storyweaver.core.programs.story_generator import StoryGenerator, generate_story, validate_child_name
from storyweaver.core.themes import get_all_themes
from storyweaver.core.types import (
    DisplayTheme,
    GenerationMode,
    PageCountPolicy,
    ReadingLength,
)

FIXED_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


class TestValidateChildName:
    """Tests for name validation."""

    def test_trims_whitespace(self):
        assert validate_child_name("  Mia ") == "Mia"

    @pytest.mark.parametrize("name", ["", "   ", "\t\n", None])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError) as exc_info:
            validate_child_name(name)

        assert exc_info.value.field == "childName"
        assert exc_info.value.message == "Please enter your child's name to continue."


class TestTemplatedStory:
    """Tests for templated generation."""

    def test_short_space_story(self, generator):
        story = generator.generate_story("Mia", "space", "short")

        assert story.id == "story-123"
        assert story.title == "Mia's Space Adventure"
        assert story.child_name == "Mia"
        assert story.page_count == 5
        assert story.settings.reading_length is ReadingLength.SHORT
        assert story.settings.theme_id == "space"
        assert story.settings.display_theme is DisplayTheme.LIGHT
        assert story.created_at == FIXED_TIME
        assert story.is_completed is False

        assert story.pages[0].text.startswith(OPENING_CLAUSE)
        assert story.pages[0].title == "Secrets of the Star Navigator"
        assert story.pages[-1].text.endswith(CLOSING_TEMPLATE.format(child_name="Mia"))
        for page in story.pages[1:-1]:
            assert page.text.startswith(CONTINUATION_CLAUSE)

    @pytest.mark.parametrize("length,count", [("short", 5), ("medium", 7), ("long", 15)])
    def test_page_counts(self, generator, length, count):
        assert generator.generate_story("Ben", "forest", length).page_count == count

    def test_pages_are_contiguous(self, generator):
        story = generator.generate_story("Ben", "underwater", ReadingLength.LONG)

        assert [page.page_number for page in story.pages] == list(range(1, 16))
        assert [page.id for page in story.pages] == [str(n) for n in range(1, 16)]
        assert all(page.theme_id == "underwater" for page in story.pages)

    @pytest.mark.parametrize("theme", get_all_themes(), ids=lambda t: t.id)
    def test_every_page_names_child(self, generator, theme):
        story = generator.generate_story("Priya", theme.id, "medium")
        for page in story.pages:
            assert page.title
            assert "Priya" in page.text

    def test_name_is_trimmed(self, generator):
        story = generator.generate_story("  Mia  ", "space", "short")
        assert story.child_name == "Mia"
        assert story.title == "Mia's Space Adventure"

    def test_same_inputs_same_pages(self, generator):
        first = generator.generate_story("Mia", "cyberpunk", "medium")
        second = generator.generate_story("Mia", "cyberpunk", "medium")
        assert first.pages == second.pages

    def test_variation_seed_changes_story(self, generator):
        base = generator.generate_story("Mia", "forest", "short")
        varied = generator.generate_story("Mia", "forest", "short", variation_seed=1)
        assert [p.text for p in base.pages] != [p.text for p in varied.pages]

    def test_unknown_theme_uses_default(self, generator):
        fallback = generator.generate_story("Mia", "nonexistent-theme-id", "medium")
        forest = generator.generate_story("Mia", "forest", "medium")

        assert fallback.settings.theme_id == "forest"
        assert fallback.title == "Mia's Forest Adventure"
        assert fallback.page_count == 7
        assert [p.text for p in fallback.pages] == [p.text for p in forest.pages]

    def test_unknown_reading_length_uses_medium(self, generator):
        story = generator.generate_story("Mia", "space", "epic")
        assert story.settings.reading_length is ReadingLength.MEDIUM
        assert story.page_count == 7

    def test_display_theme_recorded(self, generator):
        story = generator.generate_story("Mia", "space", "short", display_theme="dark")
        assert story.settings.display_theme is DisplayTheme.DARK

    def test_blank_name_raises(self, generator):
        with pytest.raises(ValidationError):
            generator.generate_story("   ", "space", "short")


class TestPageImagery:
    """Tests for per-page imagery."""

    def test_pages_carry_imagery(self, generator):
        story = generator.generate_story("Mia", "space", "short")
        page = story.pages[0]

        assert page.image_url.startswith("https://images.unsplash.com/")
        assert page.character_image.startswith("Mia as a space explorer")
        assert "The scene includes elements from the story:" in page.card_background

    def test_failing_resolver_leaves_no_url(self, caplog):
        def broken_resolver(theme_id, page_number):
            raise RuntimeError("image service unavailable")

        generator = StoryGenerator(
            mode=GenerationMode.TEMPLATED,
            page_count_policy=PageCountPolicy.FIXED,
            image_resolver=broken_resolver,
        )
        with caplog.at_level("WARNING"):
            story = generator.generate_story("Mia", "space", "short")

        assert story.page_count == 5
        assert all(page.image_url is None for page in story.pages)
        assert "Image resolution failed" in caplog.text

    def test_no_resolver(self):
        generator = StoryGenerator(mode="templated", page_count_policy="fixed", image_resolver=None)
        story = generator.generate_story("Mia", "space", "short")
        assert all(page.image_url is None for page in story.pages)

    def test_custom_resolver(self):
        generator = StoryGenerator(
            mode="templated",
            page_count_policy="fixed",
            image_resolver=lambda theme_id, page_number: f"https://img.test/{theme_id}/{page_number}.png",
        )
        story = generator.generate_story("Mia", "steampunk", "short")
        assert story.pages[2].image_url == "https://img.test/steampunk/3.png"


class TestRangedPolicy:
    """Tests for the ranged page count policy."""

    def test_counts_within_range(self):
        generator = StoryGenerator(mode="templated", page_count_policy=PageCountPolicy.RANGED)
        for seed in range(20):
            story = generator.generate_story("Mia", "space", "long", variation_seed=seed)
            assert 8 <= story.page_count <= 12

    def test_reproducible_for_same_seed(self):
        generator = StoryGenerator(mode="templated", page_count_policy=PageCountPolicy.RANGED)
        first = generator.generate_story("Noah", "medieval", "medium", variation_seed=3)
        second = generator.generate_story("Noah", "medieval", "medium", variation_seed=3)
        assert first.page_count == second.page_count
        assert first.pages == second.pages


class TestBeatsMode:
    """Tests for beats-mode generation."""

    def test_superhero_story(self, beats_generator):
        story = beats_generator.generate_story("Leo", "superhero", "short")

        assert story.id == "story-456"
        assert story.title == "Leo's Superhero Adventure"
        assert story.page_count == 5
        assert story.pages[0].title == "The Hero of the Village"
        assert story.pages[-1].title == "The Greatest Hero"
        assert story.settings.theme_id == "superhero"

    def test_long_story_capped_at_arc_length(self, beats_generator):
        story = beats_generator.generate_story("Leo", "adventure", "long")
        assert story.page_count == 10
        assert [page.page_number for page in story.pages] == list(range(1, 11))

    def test_unknown_genre_uses_default(self, beats_generator):
        story = beats_generator.generate_story("Leo", "medieval", "medium")
        assert story.settings.theme_id == "superhero"
        assert story.page_count == 7

    def test_genre_without_theme_uses_default_presentation(self, beats_generator):
        story = beats_generator.generate_story("Leo", "fantasy", "short")

        assert story.settings.theme_id == "fantasy"
        assert story.pages[0].character_image.startswith("Leo as a forest guardian")
        assert story.pages[0].image_url == "https://images.unsplash.com/photo-1441974231531-c6227db76b6e?w=400&h=300&fit=crop"

    def test_genre_with_matching_theme(self, beats_generator):
        story = beats_generator.generate_story("Leo", "space", "short")
        assert story.pages[0].character_image.startswith("Leo as a space explorer")


class TestModuleLevelGenerateStory:
    """Tests for the module-level generate_story helper."""

    def test_uses_configured_generator(self, monkeypatch):
        monkeypatch.delenv("STORYWEAVER_GENERATION_MODE", raising=False)
        monkeypatch.delenv("STORYWEAVER_PAGE_COUNT_POLICY", raising=False)

        story = generate_story("Mia", "space", "short")

        assert story.title == "Mia's Space Adventure"
        assert story.page_count == 5
        assert story.id
