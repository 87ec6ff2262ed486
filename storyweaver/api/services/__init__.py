"""Services for story generation."""

from .story_service import StoryService, wall_clock_entropy

__all__ = ["StoryService", "wall_clock_entropy"]
