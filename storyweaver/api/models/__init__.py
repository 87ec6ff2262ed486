"""Pydantic models for API requests and responses."""

from .requests import CreateStoryRequest
from .responses import (
    StoryResponse,
    StoryPageResponse,
    StorySettingsResponse,
    ThemeResponse,
    GenreResponse,
    ErrorResponse,
)

__all__ = [
    "CreateStoryRequest",
    "StoryResponse",
    "StoryPageResponse",
    "StorySettingsResponse",
    "ThemeResponse",
    "GenreResponse",
    "ErrorResponse",
]
