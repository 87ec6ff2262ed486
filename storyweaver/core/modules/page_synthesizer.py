"""
Templated page synthesis.

Each page is built from one value per slot, a title template and a body
template. Selection is seeded from the child's name, the page index and an
optional caller-supplied entropy value, so identical inputs always produce
identical pages.

Framing depends on position:
- First page: opens with "Once upon a time, "
- Last page: closes with a line naming the child
- Every other page: opens with "Continuing their journey, "
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from storyweaver.config import STORY_CONSTANTS
from ..selector import name_seed, pick
from ..types import PageContent, Slot, TemplateBank

logger = logging.getLogger(__name__)

OPENING_CLAUSE = "Once upon a time, "
CONTINUATION_CLAUSE = "Continuing their journey, "
CLOSING_TEMPLATE = (
    "And so, {child_name}'s amazing adventure came to a wonderful end, "
    "but the memories and lessons would last forever."
)

# Sub-seed offsets, one per slot
SLOT_OFFSETS: dict[Slot, int] = {
    Slot.CHARACTERS: 1,
    Slot.LOCATIONS: 2,
    Slot.EVENTS: 3,
    Slot.OBJECTS: 4,
    Slot.EMOTIONS: 5,
    Slot.LESSONS: 6,
}


@dataclass(frozen=True)
class SlotSelection:
    """One chosen value per slot for a single page."""

    character: str
    location: str
    event: str
    object: str
    emotion: str
    lesson: str


def _title_case(phrase: str) -> str:
    # str.title() would turn "dragon's" into "Dragon'S"
    return " ".join(word[:1].upper() + word[1:] for word in phrase.split())


def _article(noun: str) -> str:
    article = "an" if noun[:1].lower() in "aeiou" else "a"
    return f"{article} {noun}"


# =============================================================================
# Title Templates
# =============================================================================


class TitleTemplate(Enum):
    """Title phrasings, indexed by (page_index + total_pages)."""

    CHARACTER_WHO_EVENT = 0
    MEETING_CHARACTER = 1
    DAY_WE_EVENT = 2
    ENCOUNTER_WITH_CHARACTER = 3
    HOW_WE_EVENT = 4
    SECRETS_OF_CHARACTER = 5
    JOURNEY_WITH_CHARACTER = 6
    WHEN_CHARACTER_EVENT = 7


TITLE_RENDERERS: dict[TitleTemplate, Callable[[SlotSelection], str]] = {
    TitleTemplate.CHARACTER_WHO_EVENT: lambda s: f"The {_title_case(s.character)} Who {_title_case(s.event)}",
    TitleTemplate.MEETING_CHARACTER: lambda s: f"Meeting the {_title_case(s.character)}",
    TitleTemplate.DAY_WE_EVENT: lambda s: f"The Day We {_title_case(s.event)}",
    TitleTemplate.ENCOUNTER_WITH_CHARACTER: lambda s: f"An Encounter with the {_title_case(s.character)}",
    TitleTemplate.HOW_WE_EVENT: lambda s: f"How We {_title_case(s.event)}",
    TitleTemplate.SECRETS_OF_CHARACTER: lambda s: f"Secrets of the {_title_case(s.character)}",
    TitleTemplate.JOURNEY_WITH_CHARACTER: lambda s: f"Journey with the {_title_case(s.character)}",
    TitleTemplate.WHEN_CHARACTER_EVENT: lambda s: f"When the {_title_case(s.character)} {_title_case(s.event)}",
}


# =============================================================================
# Body Templates
# =============================================================================


class BodyTemplate(Enum):
    """Body phrasings, indexed by (len(child_name) + page_index)."""

    MET_IN_LOCATION = 0
    FOUND_THEMSELVES = 1
    DEEP_IN_LOCATION = 2
    WHILE_EXPLORING = 3
    HEART_OF_LOCATION = 4


BODY_RENDERERS: dict[BodyTemplate, Callable[[str, SlotSelection], str]] = {
    BodyTemplate.MET_IN_LOCATION: lambda name, s: (
        f"In the {s.location}, {name} met {_article(s.character)} who {s.event}. "
        f"Together, they discovered {_article(s.object)} that filled their hearts with {s.emotion}. "
        f"Through this adventure, {name} learned {s.lesson}."
    ),
    BodyTemplate.FOUND_THEMSELVES: lambda name, s: (
        f"{name} found themselves in a magical {s.location} where they encountered a friendly {s.character}. "
        f"When they {s.event}, they discovered the power of the {s.object} and felt overwhelming {s.emotion}. "
        f"This experience taught them {s.lesson}."
    ),
    BodyTemplate.DEEP_IN_LOCATION: lambda name, s: (
        f"Deep in the {s.location}, {name} had an amazing adventure with the {s.character}. "
        f"As they {s.event}, they found a special {s.object} that brought them great {s.emotion}. "
        f"Through this journey, {name} understood {s.lesson}."
    ),
    BodyTemplate.WHILE_EXPLORING: lambda name, s: (
        f"While exploring the {s.location}, {name} made friends with the {s.character}. "
        f"Together, they {s.event} and discovered a magical {s.object}. "
        f"This wonderful experience filled them with {s.emotion} and taught them {s.lesson}."
    ),
    BodyTemplate.HEART_OF_LOCATION: lambda name, s: (
        f"In the heart of the {s.location}, {name} encountered {_article(s.character)}. "
        f"When they {s.event}, they found an incredible {s.object} that sparked feelings of {s.emotion}. "
        f"This adventure helped them learn {s.lesson}."
    ),
}


# =============================================================================
# Synthesis
# =============================================================================


def page_seed(child_name: str, page_index: int, entropy: int = 0) -> int:
    """Base seed for one page."""
    return name_seed(child_name) + page_index * STORY_CONSTANTS["seed_page_stride"] + entropy


def select_slots(bank: TemplateBank, seed: int) -> SlotSelection:
    """Pick one value per slot, each with its own sub-seed."""
    chosen = {
        slot: pick(bank.slot(slot), seed + offset)
        for slot, offset in SLOT_OFFSETS.items()
    }
    return SlotSelection(
        character=chosen[Slot.CHARACTERS],
        location=chosen[Slot.LOCATIONS],
        event=chosen[Slot.EVENTS],
        object=chosen[Slot.OBJECTS],
        emotion=chosen[Slot.EMOTIONS],
        lesson=chosen[Slot.LESSONS],
    )


def choose_title_template(page_index: int, total_pages: int) -> TitleTemplate:
    return pick(list(TitleTemplate), page_index + total_pages)


def choose_body_template(child_name: str, page_index: int) -> BodyTemplate:
    return pick(list(BodyTemplate), len(child_name) + page_index)


def _lead_in(clause: str, body: str, child_name: str) -> str:
    """Prefix a clause, lower-casing the body's first letter unless it starts with the name."""
    # Whole-word match: a name like "In" must not keep "In the heart of..." capitalized
    if body.startswith(child_name + " "):
        return clause + body
    return clause + body[:1].lower() + body[1:]


def apply_framing(body: str, child_name: str, page_index: int, total_pages: int) -> str:
    """Add the opening, continuation or closing phrasing for the page position."""
    is_first = page_index == 0
    is_last = page_index == total_pages - 1

    text = body
    if is_first:
        text = _lead_in(OPENING_CLAUSE, text, child_name)
    elif not is_last:
        text = _lead_in(CONTINUATION_CLAUSE, text, child_name)

    if is_last:
        text = f"{text} {CLOSING_TEMPLATE.format(child_name=child_name)}"
    return text


def synthesize(
    bank: TemplateBank,
    child_name: str,
    page_index: int,
    total_pages: int,
    theme_id: str,
    entropy: int = 0,
) -> PageContent:
    """
    Build the title and text for one page.

    Args:
        bank: Template bank of the resolved theme
        child_name: Validated, non-empty name, interpolated verbatim
        page_index: 0-based index in [0, total_pages)
        total_pages: Number of pages in the story
        theme_id: Theme the bank belongs to
        entropy: Caller-supplied variation added to the seed (0 = reproducible)

    Returns:
        PageContent with non-empty title and text
    """
    seed = page_seed(child_name, page_index, entropy)
    selection = select_slots(bank, seed)

    title = TITLE_RENDERERS[choose_title_template(page_index, total_pages)](selection)
    body = BODY_RENDERERS[choose_body_template(child_name, page_index)](child_name, selection)
    text = apply_framing(body, child_name, page_index, total_pages)

    logger.debug(f"Synthesized page {page_index + 1}/{total_pages} for theme {theme_id}")
    return PageContent(title=title, text=text)
