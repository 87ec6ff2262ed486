"""Pydantic models for API requests."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from storyweaver.core.types import DisplayTheme, ReadingLength


class CreateStoryRequest(BaseModel):
    """Request body for generating a new story.

    Accepts camelCase keys (as sent by the mobile app) or snake_case.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    child_name: str = Field(
        ...,
        max_length=100,
        description="The child's name. Must not be blank.",
        examples=["Mia"],
    )
    theme_id: str = Field(
        ...,
        max_length=50,
        description="Theme (or genre, in beats mode) id. Unknown ids use the default theme.",
        examples=["space", "forest"],
    )
    reading_length: ReadingLength = Field(
        default=ReadingLength.MEDIUM,
        description="Story length: short, medium or long",
    )
    variation_seed: Optional[int] = Field(
        default=None,
        ge=0,
        description="Seed for a different story from the same inputs. Omit for a fresh variation.",
    )
    display_theme: DisplayTheme = Field(
        default=DisplayTheme.LIGHT,
        description="Reader display preference: light or dark",
    )
