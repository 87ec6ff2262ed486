"""
Configuration module for Storyweaver.

Re-exports story configuration for convenient access.
"""

from .story import (
    STORY_CONSTANTS,
    GENERATION_MODE_ENV,
    PAGE_COUNT_POLICY_ENV,
    get_generation_mode,
    get_page_count_policy,
)

__all__ = [
    "STORY_CONSTANTS",
    "GENERATION_MODE_ENV",
    "PAGE_COUNT_POLICY_ENV",
    "get_generation_mode",
    "get_page_count_policy",
]
