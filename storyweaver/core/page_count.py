"""
Page count policy: maps a reading length to a number of pages.

Two policies exist. FIXED always gives the same count per length; RANGED draws
from an inclusive range using a caller-supplied random source, so a seeded
source keeps the count reproducible.
"""

import logging
import random
from typing import Optional, Union

from storyweaver.config import STORY_CONSTANTS
from .types import PageCountPolicy, ReadingLength

logger = logging.getLogger(__name__)

FIXED_PAGE_COUNTS: dict[ReadingLength, int] = {
    ReadingLength(key): count
    for key, count in STORY_CONSTANTS["fixed_page_counts"].items()
}

RANGED_PAGE_COUNTS: dict[ReadingLength, tuple[int, int]] = {
    ReadingLength(key): bounds
    for key, bounds in STORY_CONSTANTS["ranged_page_counts"].items()
}

DEFAULT_READING_LENGTH = ReadingLength(STORY_CONSTANTS["default_reading_length"])


def coerce_reading_length(value: Union[ReadingLength, str, None]) -> ReadingLength:
    """Convert a raw value to a ReadingLength, falling back to the default."""
    if isinstance(value, ReadingLength):
        return value
    normalized = str(value or "").strip().lower()
    try:
        return ReadingLength(normalized)
    except ValueError:
        logger.warning(
            f"Unknown reading length {value!r}, using {DEFAULT_READING_LENGTH.value}"
        )
        return DEFAULT_READING_LENGTH


def resolve_count(
    reading_length: Union[ReadingLength, str],
    rng: Optional[random.Random] = None,
    policy: PageCountPolicy = PageCountPolicy.FIXED,
) -> int:
    """
    Resolve the page count for a reading length.

    Args:
        reading_length: Requested length category
        rng: Random source for the RANGED policy (module random if omitted)
        policy: FIXED or RANGED

    Returns:
        Page count, always >= 1
    """
    length = coerce_reading_length(reading_length)

    if PageCountPolicy(policy) is PageCountPolicy.RANGED:
        low, high = RANGED_PAGE_COUNTS[length]
        source = rng if rng is not None else random
        count = source.randint(low, high)
    else:
        count = FIXED_PAGE_COUNTS[length]

    return max(1, count)
