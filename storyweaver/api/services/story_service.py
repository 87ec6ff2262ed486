"""Story service: runs generation for API requests."""

import time
from typing import Callable, Optional, Union

from storyweaver.core.errors import ValidationError
from storyweaver.core.page_count import coerce_reading_length
from storyweaver.core.programs.story_generator import StoryGenerator
from storyweaver.core.types import DisplayTheme, ReadingLength, Story

from ..logging import story_logger


def wall_clock_entropy() -> int:
    """Millisecond clock modulo 1000, for a fresh variation per request."""
    return int(time.time() * 1000) % 1000


class StoryService:
    """Generates stories on behalf of the UI layer. Stories are not stored."""

    def __init__(
        self,
        generator: StoryGenerator,
        entropy_source: Optional[Callable[[], int]] = None,
    ):
        self.generator = generator
        self._entropy_source = entropy_source or wall_clock_entropy

    def create_story(
        self,
        child_name: str,
        theme_id: str,
        reading_length: Union[ReadingLength, str],
        variation_seed: Optional[int] = None,
        display_theme: DisplayTheme = DisplayTheme.LIGHT,
    ) -> Story:
        """
        Generate a story.

        Args:
            child_name: The child's name
            theme_id: Theme id (unknown ids fall back to the default theme)
            reading_length: short, medium or long; unknown values use medium
            variation_seed: Explicit seed; when None a wall-clock value is used
                so repeated requests give different stories
            display_theme: light or dark

        Raises:
            ValidationError: If child_name is blank
        """
        start_time = time.time()
        length = coerce_reading_length(reading_length)
        story_logger.generation_started(theme_id, length.value)

        seed = variation_seed if variation_seed is not None else self._entropy_source()
        try:
            story = self.generator.generate_story(
                child_name,
                theme_id,
                length,
                variation_seed=seed,
                display_theme=display_theme,
            )
        except ValidationError as e:
            story_logger.validation_failed(e.field, e.message)
            raise
        except Exception as e:
            story_logger.generation_failed(e, theme_id)
            raise

        story_logger.generation_completed(
            story.id, story.settings.theme_id, story.page_count, time.time() - start_time
        )
        return story
