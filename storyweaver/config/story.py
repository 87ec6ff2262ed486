"""
Story generation constants for Storyweaver.

Page tables, catalog defaults and the generation mode in force. The mode and
page count policy can be overridden from the environment (or a .env file),
but one generator instance always uses a single policy.
"""

import logging
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

# Story generation constants
STORY_CONSTANTS = {
    "page_count_policy": "fixed",  # "fixed" or "ranged"
    "generation_mode": "templated",  # "templated" or "beats"
    "fixed_page_counts": {"short": 5, "medium": 7, "long": 15},
    "ranged_page_counts": {"short": (3, 4), "medium": (5, 7), "long": (8, 12)},
    "default_reading_length": "medium",
    "default_theme_id": "forest",
    "default_genre_id": "superhero",
    "default_display_theme": "light",
    "seed_page_stride": 7,
    "max_background_keywords": 5,
}

GENERATION_MODE_ENV = "STORYWEAVER_GENERATION_MODE"
PAGE_COUNT_POLICY_ENV = "STORYWEAVER_PAGE_COUNT_POLICY"


def _env_choice(env_var: str, allowed: tuple[str, ...], default: str) -> str:
    value = os.getenv(env_var, "").strip().lower()
    if not value:
        return default
    if value not in allowed:
        logger.warning(f"Ignoring {env_var}={value!r}; expected one of {', '.join(allowed)}")
        return default
    return value


def get_generation_mode() -> str:
    """Get the configured generation mode ("templated" or "beats")."""
    return _env_choice(
        GENERATION_MODE_ENV,
        ("templated", "beats"),
        STORY_CONSTANTS["generation_mode"],
    )


def get_page_count_policy() -> str:
    """Get the configured page count policy ("fixed" or "ranged")."""
    return _env_choice(
        PAGE_COUNT_POLICY_ENV,
        ("fixed", "ranged"),
        STORY_CONSTANTS["page_count_policy"],
    )
