from .story_generator import StoryGenerator, generate_story, validate_child_name

__all__ = ["StoryGenerator", "generate_story", "validate_child_name"]
