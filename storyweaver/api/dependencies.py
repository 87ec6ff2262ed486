"""FastAPI dependency injection for services."""

from typing import Annotated

from fastapi import Depends

from storyweaver.core.programs.story_generator import StoryGenerator

from .services.story_service import StoryService


# Generator - reads the configured mode and page count policy
def get_story_generator() -> StoryGenerator:
    """Get a StoryGenerator using the configured mode and policy."""
    return StoryGenerator()


# Service - depends on generator
def get_story_service(
    generator: Annotated[StoryGenerator, Depends(get_story_generator)]
) -> StoryService:
    """Get a StoryService instance with injected generator."""
    return StoryService(generator)


# Type aliases for cleaner route signatures
Generator = Annotated[StoryGenerator, Depends(get_story_generator)]
Service = Annotated[StoryService, Depends(get_story_service)]
