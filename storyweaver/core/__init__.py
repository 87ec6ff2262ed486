# Storyweaver - Core Domain

# Re-export types for convenient access
from .types import (
    ReadingLength,
    DisplayTheme,
    GenerationMode,
    PageCountPolicy,
    Slot,
    TemplateBank,
    Theme,
    PageContent,
    StoryPage,
    StorySettings,
    Story,
)
from .errors import StoryweaverError, ValidationError, EmptyTemplateListError

__all__ = [
    "ReadingLength",
    "DisplayTheme",
    "GenerationMode",
    "PageCountPolicy",
    "Slot",
    "TemplateBank",
    "Theme",
    "PageContent",
    "StoryPage",
    "StorySettings",
    "Story",
    "StoryweaverError",
    "ValidationError",
    "EmptyTemplateListError",
]
