"""Pydantic models for API responses.

All responses serialize with camelCase keys.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from storyweaver.core.modules.beat_generator import Genre
from storyweaver.core.modules.image_resolver import default_image, search_queries
from storyweaver.core.types import DisplayTheme, ReadingLength, Story, StoryPage, Theme


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoryPageResponse(CamelModel):
    """A single page of the story."""

    id: str
    title: str
    text: str
    page_number: int
    theme_id: str
    character_image: Optional[str] = None
    card_background: Optional[str] = None
    image_url: Optional[str] = None

    @classmethod
    def from_page(cls, page: StoryPage) -> "StoryPageResponse":
        return cls(
            id=page.id,
            title=page.title,
            text=page.text,
            page_number=page.page_number,
            theme_id=page.theme_id,
            character_image=page.character_image,
            card_background=page.card_background,
            image_url=page.image_url,
        )


class StorySettingsResponse(CamelModel):
    """Settings snapshot the story was generated with."""

    reading_length: ReadingLength
    theme_id: str
    display_theme: DisplayTheme


class StoryResponse(CamelModel):
    """A complete generated story."""

    id: str
    title: str
    child_name: str
    settings: StorySettingsResponse
    pages: list[StoryPageResponse]
    created_at: datetime
    is_completed: bool

    @classmethod
    def from_story(cls, story: Story) -> "StoryResponse":
        return cls(
            id=story.id,
            title=story.title,
            child_name=story.child_name,
            settings=StorySettingsResponse(
                reading_length=story.settings.reading_length,
                theme_id=story.settings.theme_id,
                display_theme=story.settings.display_theme,
            ),
            pages=[StoryPageResponse.from_page(page) for page in story.pages],
            created_at=story.created_at,
            is_completed=story.is_completed,
        )


class ThemeResponse(CamelModel):
    """Theme catalog entry."""

    id: str
    name: str
    description: str
    color: str
    icon: str
    card_background: str
    image_url: str
    search_queries: list[str]
    is_fallback: bool = False

    @classmethod
    def from_theme(cls, theme: Theme, is_fallback: bool = False) -> "ThemeResponse":
        return cls(
            id=theme.id,
            name=theme.name,
            description=theme.description,
            color=theme.color,
            icon=theme.icon,
            card_background=theme.card_background,
            image_url=default_image(theme.id),
            search_queries=search_queries(theme.id),
            is_fallback=is_fallback,
        )


class GenreResponse(CamelModel):
    """Genre catalog entry (beats mode)."""

    id: str
    name: str
    icon: str
    description: str
    max_pages: int
    is_fallback: bool = False

    @classmethod
    def from_genre(cls, genre: Genre, is_fallback: bool = False) -> "GenreResponse":
        return cls(
            id=genre.id,
            name=genre.name,
            icon=genre.icon,
            description=genre.description,
            max_pages=genre.max_pages,
            is_fallback=is_fallback,
        )


class ErrorResponse(CamelModel):
    """Validation failure surfaced to the user."""

    detail: str
    field: Optional[str] = None
