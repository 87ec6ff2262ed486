"""
Image resolution for story pages.

The engine only needs a URL per (theme, page); fetching or generating images
is someone else's concern. The default resolver serves themed stock images
and is total: unknown themes get the default theme's images.

Also builds the descriptive character and card-background strings attached
to each page.
"""

import re
from typing import Optional, Protocol

from storyweaver.config import STORY_CONSTANTS
from ..types import Theme

_UNSPLASH = "https://images.unsplash.com/photo-{photo_id}?w=400&h=300&fit=crop"


def _urls(*photo_ids: str) -> tuple[str, ...]:
    return tuple(_UNSPLASH.format(photo_id=photo_id) for photo_id in photo_ids)


THEMED_IMAGES: dict[str, tuple[str, ...]] = {
    "forest": _urls("1441974231531-c6227db76b6e", "1506905925346-14b8e128d6ba", "1518837695005-2083093ee35b"),
    "space": _urls("1446776877081-d282a0f896e2", "1502134249126-9f3755a50d78", "1519904981063-b0cf448d479e"),
    "underwater": _urls("1559827260-dc66d52bef19", "1578662996442-48f60103fc96"),
    "medieval": _urls("1518709268805-4e9042af2176"),
    "cyberpunk": _urls("1518709268805-4e9042af2176"),
    "fairy-tale": _urls("1518709268805-4e9042af2176"),
    "steampunk": _urls("1518709268805-4e9042af2176"),
    "superhero": _urls("1518709268805-4e9042af2176"),
}

SEARCH_QUERIES: dict[str, tuple[str, ...]] = {
    "forest": ("magical forest", "enchanted woods", "fairy tale forest"),
    "space": ("space exploration", "cosmic adventure", "galaxy stars"),
    "underwater": ("underwater world", "ocean depths", "coral reef"),
    "medieval": ("medieval castle", "knight adventure", "fantasy kingdom"),
    "cyberpunk": ("futuristic city", "cyberpunk neon", "digital world"),
    "fairy-tale": ("fairy tale magic", "enchanted garden", "magical creatures"),
    "steampunk": ("steampunk workshop", "victorian machinery", "brass gears"),
    "superhero": ("superhero city", "heroic adventure", "comic book style"),
}

STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should", "may", "might",
    "can", "must", "shall",
})


class ImageResolver(Protocol):
    """Resolves an image URL for a page. Implementations must always return a URL."""

    def __call__(self, theme_id: str, page_number: int) -> str:
        ...


def _theme_key(theme_id: Optional[str]) -> str:
    key = str(theme_id or "").strip().lower()
    return key if key in THEMED_IMAGES else STORY_CONSTANTS["default_theme_id"]


def resolve_image(theme_id: str, page_number: int) -> str:
    """Themed image URL for a 1-based page number, cycling through the theme's images."""
    images = THEMED_IMAGES[_theme_key(theme_id)]
    return images[(page_number - 1) % len(images)]


def default_image(theme_id: str) -> str:
    """The first image of a theme (or of the default theme)."""
    return THEMED_IMAGES[_theme_key(theme_id)][0]


def search_queries(theme_id: str) -> list[str]:
    """Stock-image search phrases for a theme."""
    return list(SEARCH_QUERIES[_theme_key(theme_id)])


def character_image(theme: Theme, child_name: str) -> str:
    """Describe the child as the theme's character."""
    return theme.character_portrait.format(child_name=child_name)


def extract_keywords(text: str, limit: Optional[int] = None) -> list[str]:
    """
    Unique content words from text, in first-seen order.

    Words are lower-cased with punctuation stripped; words of three letters or
    fewer and stop words are skipped.
    """
    if limit is None:
        limit = STORY_CONSTANTS["max_background_keywords"]
    if limit <= 0:
        return []
    words = re.sub(r"[^\w\s]", "", text.lower()).split()
    keywords: list[str] = []
    for word in words:
        if len(word) > 3 and word not in STOP_WORDS and word not in keywords:
            keywords.append(word)
            if len(keywords) >= limit:
                break
    return keywords


def card_background(theme: Theme, text: str, max_keywords: Optional[int] = None) -> str:
    """Theme background description enriched with keywords from the page text."""
    description = theme.card_background
    keywords = extract_keywords(text, max_keywords)
    if keywords:
        description += f" The scene includes elements from the story: {', '.join(keywords)}."
    return description
