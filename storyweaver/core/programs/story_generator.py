"""
Story assembly: turns a (child name, theme, reading length) request into a
complete Story.

Workflow:
1. Validate the child's name (the only failure mode)
2. Resolve the theme (unknown ids fall back, never fail)
3. Resolve the page count from the reading length
4. Synthesize each page in order
5. Attach per-page imagery and wrap everything in a Story record

All state is local to a call, so one generator can serve concurrent
requests. Output is fully determined by the inputs and the variation seed,
apart from the story id and creation timestamp.
"""

import logging
import random
import uuid
from datetime import datetime, timezone
from typing import Callable, Optional, Union

from storyweaver.config import get_generation_mode, get_page_count_policy
from ..errors import ValidationError
from ..modules.beat_generator import generate_beats, get_genre
from ..modules.image_resolver import (
    ImageResolver,
    card_background,
    character_image,
    resolve_image,
)
from ..modules.page_synthesizer import synthesize
from ..page_count import coerce_reading_length, resolve_count
from ..selector import name_seed
from ..themes import get_default_theme, get_theme, is_known_theme
from ..types import (
    DisplayTheme,
    GenerationMode,
    PageContent,
    PageCountPolicy,
    ReadingLength,
    Story,
    StoryPage,
    StorySettings,
    Theme,
)

logger = logging.getLogger(__name__)


def validate_child_name(child_name: Optional[str]) -> str:
    """
    Return the trimmed child name.

    Raises:
        ValidationError: If the name is missing or only whitespace
    """
    name = (child_name or "").strip()
    if not name:
        raise ValidationError("Please enter your child's name to continue.", field="childName")
    return name


def _coerce_display_theme(value: Union[DisplayTheme, str, None]) -> DisplayTheme:
    if isinstance(value, DisplayTheme):
        return value
    try:
        return DisplayTheme(str(value or "").strip().lower())
    except ValueError:
        return DisplayTheme.LIGHT


class StoryGenerator:
    """
    Assembles stories from the theme catalog.

    Args:
        mode: TEMPLATED or BEATS. Defaults to the configured mode.
        page_count_policy: FIXED or RANGED. Defaults to the configured policy.
        image_resolver: Callable (theme_id, page_number) -> URL. Pass None to
            skip image URLs entirely.
        id_factory: Produces story ids (uuid4 strings by default)
        clock: Produces the creation timestamp (UTC now by default)
    """

    def __init__(
        self,
        mode: Union[GenerationMode, str, None] = None,
        page_count_policy: Union[PageCountPolicy, str, None] = None,
        image_resolver: Optional[ImageResolver] = resolve_image,
        id_factory: Optional[Callable[[], str]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.mode = GenerationMode(mode or get_generation_mode())
        self.page_count_policy = PageCountPolicy(page_count_policy or get_page_count_policy())
        self.image_resolver = image_resolver
        self._id_factory = id_factory or (lambda: str(uuid.uuid4()))
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def generate_story(
        self,
        child_name: str,
        theme_id: str,
        reading_length: Union[ReadingLength, str],
        *,
        variation_seed: int = 0,
        display_theme: Union[DisplayTheme, str, None] = DisplayTheme.LIGHT,
    ) -> Story:
        """
        Generate a complete story.

        Args:
            child_name: The child's name (trimmed; must not be empty)
            theme_id: Catalog id; unknown ids use the default theme
            reading_length: short, medium or long; unknown values use medium
            variation_seed: Extra entropy for a different story from the
                same inputs. 0 gives the reproducible story.
            display_theme: light or dark, recorded in the settings snapshot

        Returns:
            Story with contiguous 1-based pages and is_completed=False

        Raises:
            ValidationError: If child_name is empty or whitespace
        """
        name = validate_child_name(child_name)
        length = coerce_reading_length(reading_length)
        rng = random.Random(name_seed(name) + variation_seed)
        page_count = resolve_count(length, rng=rng, policy=self.page_count_policy)

        if self.mode is GenerationMode.BEATS:
            genre = get_genre(theme_id)
            story_theme_id, label = genre.id, genre.label
            presentation = get_theme(genre.id) if is_known_theme(genre.id) else get_default_theme()
            contents = generate_beats(
                name, genre.id, min(page_count, genre.max_pages), entropy=variation_seed
            )
        else:
            theme = get_theme(theme_id)
            story_theme_id, label = theme.id, theme.label
            presentation = theme
            contents = [
                synthesize(theme.bank, name, index, page_count, theme.id, entropy=variation_seed)
                for index in range(page_count)
            ]

        story = Story(
            id=self._id_factory(),
            title=f"{name}'s {label} Adventure",
            child_name=name,
            settings=StorySettings(
                reading_length=length,
                theme_id=story_theme_id,
                display_theme=_coerce_display_theme(display_theme),
            ),
            pages=self._build_pages(contents, name, story_theme_id, presentation),
            created_at=self._clock(),
            is_completed=False,
        )

        logger.info(
            f"Generated story '{story.title}' with {story.page_count} pages",
            extra={"story_id": story.id, "theme_id": story_theme_id, "page_count": story.page_count},
        )
        return story

    def _build_pages(
        self,
        contents: list[PageContent],
        child_name: str,
        theme_id: str,
        presentation: Theme,
    ) -> list[StoryPage]:
        portrait = character_image(presentation, child_name)
        return [
            StoryPage(
                id=str(page_number),
                title=content.title,
                text=content.text,
                page_number=page_number,
                theme_id=theme_id,
                character_image=portrait,
                card_background=card_background(presentation, content.text),
                image_url=self._resolve_image(theme_id, page_number),
            )
            for page_number, content in enumerate(contents, start=1)
        ]

    def _resolve_image(self, theme_id: str, page_number: int) -> Optional[str]:
        """Ask the image resolver for a URL; a failing resolver leaves the page without one."""
        if self.image_resolver is None:
            return None
        try:
            return self.image_resolver(theme_id, page_number) or None
        except Exception as e:
            logger.warning(
                f"Image resolution failed for {theme_id} page {page_number}: {e}",
                extra={"theme_id": theme_id, "stage": "image_resolution", "error_type": type(e).__name__},
            )
            return None


def generate_story(
    child_name: str,
    theme_id: str,
    reading_length: Union[ReadingLength, str],
    *,
    variation_seed: int = 0,
    display_theme: Union[DisplayTheme, str, None] = DisplayTheme.LIGHT,
) -> Story:
    """Generate a story with a generator using the configured mode and policy."""
    return StoryGenerator().generate_story(
        child_name,
        theme_id,
        reading_length,
        variation_seed=variation_seed,
        display_theme=display_theme,
    )
