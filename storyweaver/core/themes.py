"""
Theme catalog for story generation.

Every theme carries display metadata and a template bank. Lookups never fail:
unknown theme ids resolve to the default theme, the first one declared. The
catalog is validated once on import so an empty slot is caught at startup.
"""

import logging
from enum import Enum
from typing import Iterable, Optional

from storyweaver.config import STORY_CONSTANTS
from .errors import EmptyTemplateListError
from .template_banks import (
    CYBERPUNK_BANK,
    FAIRY_TALE_BANK,
    FOREST_BANK,
    MEDIEVAL_BANK,
    SPACE_BANK,
    STEAMPUNK_BANK,
    SUPERHERO_BANK,
    UNDERWATER_BANK,
)
from .types import TemplateBank, Theme

logger = logging.getLogger(__name__)


class ThemeId(Enum):
    """Available story themes, in catalog order."""

    FOREST = "forest"
    SPACE = "space"
    UNDERWATER = "underwater"
    MEDIEVAL = "medieval"
    CYBERPUNK = "cyberpunk"
    FAIRY_TALE = "fairy-tale"
    STEAMPUNK = "steampunk"
    SUPERHERO = "superhero"


THEMES: dict[ThemeId, Theme] = {

    ThemeId.FOREST: Theme(
        id=ThemeId.FOREST.value,
        name="Enchanted Forest",
        description="Transform into a magical forest adventure",
        color="#228B22",
        icon="🌲",
        card_background="A beautiful forest background with tall ancient trees, dappled sunlight filtering through leaves, moss-covered rocks, and magical woodland atmosphere. Soft green and brown tones, ethereal lighting, perfect for a children's story card.",
        character_portrait="{child_name} as a forest guardian wearing earth-toned clothing with leaf patterns, surrounded by woodland creatures and magical forest elements.",
        bank=FOREST_BANK,
    ),

    ThemeId.SPACE: Theme(
        id=ThemeId.SPACE.value,
        name="Space Explorer",
        description="Journey through the cosmos",
        color="#4169E1",
        icon="🚀",
        card_background="A stunning space background with distant stars, nebulas, planets, and cosmic dust. Deep blues and purples with sparkling stars, perfect for a children's space adventure story card.",
        character_portrait="{child_name} as a space explorer in a futuristic spacesuit with glowing elements, floating among stars and cosmic phenomena.",
        bank=SPACE_BANK,
    ),

    ThemeId.UNDERWATER: Theme(
        id=ThemeId.UNDERWATER.value,
        name="Ocean Depths",
        description="Dive into underwater adventures",
        color="#00CED1",
        icon="🐠",
        card_background="A magical underwater scene with colorful coral reefs, tropical fish, sea anemones, and flowing seaweed. Blue and turquoise tones with shimmering light effects, perfect for an underwater adventure story card.",
        character_portrait="{child_name} as an underwater explorer in diving gear or mermaid attire, surrounded by colorful coral reefs and sea creatures.",
        bank=UNDERWATER_BANK,
    ),

    ThemeId.MEDIEVAL: Theme(
        id=ThemeId.MEDIEVAL.value,
        name="Medieval Kingdom",
        description="Step into a medieval fantasy world",
        color="#8B4513",
        icon="🏰",
        card_background="A majestic medieval castle background with stone walls, towers, banners, and a royal courtyard. Rich browns, golds, and deep reds with regal atmosphere, perfect for a medieval adventure story card.",
        character_portrait="{child_name} as a brave knight in medieval armor with a sword and shield, standing in front of a majestic castle.",
        bank=MEDIEVAL_BANK,
    ),

    ThemeId.CYBERPUNK: Theme(
        id=ThemeId.CYBERPUNK.value,
        name="Cyberpunk City",
        description="Enter a futuristic cyberpunk world",
        color="#FF1493",
        icon="🌃",
        card_background="A futuristic cyberpunk cityscape with neon lights, holographic displays, and high-tech buildings. Bright pinks, purples, and electric blues with glowing effects, perfect for a cyberpunk adventure story card.",
        character_portrait="{child_name} as a cyber hero in futuristic clothing with neon accents and tech accessories, in a high-tech cityscape.",
        bank=CYBERPUNK_BANK,
    ),

    ThemeId.FAIRY_TALE: Theme(
        id=ThemeId.FAIRY_TALE.value,
        name="Fairy Tale",
        description="Become part of a magical fairy tale",
        color="#FF69B4",
        icon="🧚",
        card_background="A magical fairy tale background with floating sparkles, enchanted flowers, rainbow colors, and whimsical elements. Soft pastels with magical glow effects, perfect for a fairy tale story card.",
        character_portrait="{child_name} as a magical character with fairy wings and sparkly clothing, in an enchanted garden with magical creatures.",
        bank=FAIRY_TALE_BANK,
    ),

    ThemeId.STEAMPUNK: Theme(
        id=ThemeId.STEAMPUNK.value,
        name="Steampunk Adventure",
        description="Explore a Victorian steampunk world",
        color="#CD853F",
        icon="⚙️",
        card_background="A Victorian steampunk workshop background with brass gears, steam pipes, copper machinery, and industrial elements. Warm browns, coppers, and brass tones with mechanical details, perfect for a steampunk adventure story card.",
        character_portrait="{child_name} as a steam inventor in Victorian-era clothing with brass goggles and mechanical accessories, in a workshop.",
        bank=STEAMPUNK_BANK,
    ),

    ThemeId.SUPERHERO: Theme(
        id=ThemeId.SUPERHERO.value,
        name="Superhero",
        description="Become a powerful superhero",
        color="#DC143C",
        icon="🦸",
        card_background="A dynamic superhero cityscape background with skyscrapers, dramatic clouds, and heroic atmosphere. Bold reds, blues, and golds with action-packed energy, perfect for a superhero adventure story card.",
        character_portrait="{child_name} as a superhero in a colorful costume with a cape, in a dynamic pose against a city skyline.",
        bank=SUPERHERO_BANK,
    ),
}

DEFAULT_THEME_ID = ThemeId(STORY_CONSTANTS["default_theme_id"])


def _find_theme_id(theme_id: Optional[str]) -> Optional[ThemeId]:
    normalized = str(theme_id or "").strip().lower().replace("_", "-")
    for candidate in ThemeId:
        if candidate.value == normalized:
            return candidate
    return None


def is_known_theme(theme_id: Optional[str]) -> bool:
    """Whether a theme id names a catalog entry (case-insensitive)."""
    return _find_theme_id(theme_id) is not None


def get_theme(theme_id: Optional[str]) -> Theme:
    """Get a theme by id, falling back to the default theme if not found."""
    found = _find_theme_id(theme_id)
    if found is None:
        logger.warning(
            f"Unknown theme {theme_id!r}, falling back to {DEFAULT_THEME_ID.value}",
            extra={"theme_id": theme_id, "stage": "theme_fallback"},
        )
        return THEMES[DEFAULT_THEME_ID]
    return THEMES[found]


def get_default_theme() -> Theme:
    return THEMES[DEFAULT_THEME_ID]


def get_bank(theme_id: Optional[str]) -> TemplateBank:
    """Get the template bank for a theme id (never fails)."""
    return get_theme(theme_id).bank


def get_all_themes() -> list[Theme]:
    """Get all themes in catalog order."""
    return list(THEMES.values())


def validate_catalog(themes: Optional[Iterable[Theme]] = None) -> None:
    """
    Check that every slot of every theme bank has at least one candidate.

    Raises:
        EmptyTemplateListError: Naming each theme and its empty slots
    """
    problems = []
    for theme in themes if themes is not None else THEMES.values():
        empty = theme.bank.empty_slots()
        if empty:
            problems.append(f"{theme.id}: {', '.join(empty)}")
    if problems:
        raise EmptyTemplateListError(
            "Template bank slots must not be empty (" + "; ".join(problems) + ")"
        )


validate_catalog()
