"""
Centralized domain types for Storyweaver.

All dataclasses and enums that are used across multiple modules are defined
here to make data flow explicit and avoid circular imports.
"""

from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


# =============================================================================
# Enumerations
# =============================================================================


class ReadingLength(str, Enum):
    """Requested story size category."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class DisplayTheme(str, Enum):
    """Reader display preference, carried through in the settings snapshot."""

    LIGHT = "light"
    DARK = "dark"


class GenerationMode(str, Enum):
    """How page content is produced."""

    TEMPLATED = "templated"  # Seeded slot templates, one page per index
    BEATS = "beats"  # Ordered story beats gated by page thresholds


class PageCountPolicy(str, Enum):
    """How a reading length maps to a page count."""

    FIXED = "fixed"
    RANGED = "ranged"


class Slot(str, Enum):
    """Substitutable content categories shared by every template bank."""

    CHARACTERS = "characters"
    LOCATIONS = "locations"
    EVENTS = "events"
    OBJECTS = "objects"
    EMOTIONS = "emotions"
    LESSONS = "lessons"


# =============================================================================
# Catalog Types
# =============================================================================


@dataclass(frozen=True)
class TemplateBank:
    """Candidate strings for each slot of one theme."""

    characters: tuple[str, ...]
    locations: tuple[str, ...]
    events: tuple[str, ...]
    objects: tuple[str, ...]
    emotions: tuple[str, ...]
    lessons: tuple[str, ...]

    def slot(self, slot: Slot) -> tuple[str, ...]:
        """Get the candidate list for a slot."""
        return getattr(self, slot.value)

    def empty_slots(self) -> list[str]:
        """Names of slots with no candidates."""
        return [f.name for f in fields(self) if len(getattr(self, f.name)) == 0]


@dataclass(frozen=True)
class Theme:
    """A visual/narrative setting with its template bank and display metadata."""

    id: str
    name: str
    description: str
    color: str  # Accent color, hex
    icon: str
    card_background: str  # Descriptive background text for page cards
    character_portrait: str  # Portrait description, contains {child_name}
    bank: TemplateBank

    @property
    def label(self) -> str:
        """Id with its first character upper-cased, as used in story titles."""
        return self.id[:1].upper() + self.id[1:]


# =============================================================================
# Story Structure Types
# =============================================================================


@dataclass(frozen=True)
class PageContent:
    """Title and body text produced for one page."""

    title: str
    text: str


@dataclass(frozen=True)
class StoryPage:
    """One generated page of a story, positioned at a 1-based index."""

    id: str
    title: str
    text: str
    page_number: int
    theme_id: str
    character_image: Optional[str] = None
    card_background: Optional[str] = None
    image_url: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "text": self.text,
            "pageNumber": self.page_number,
            "themeId": self.theme_id,
            "characterImage": self.character_image,
            "cardBackground": self.card_background,
            "imageUrl": self.image_url,
        }

    def __str__(self) -> str:
        return f"Page {self.page_number}: {self.title}"


@dataclass(frozen=True)
class StorySettings:
    """Snapshot of the settings a story was generated with."""

    reading_length: ReadingLength
    theme_id: str
    display_theme: DisplayTheme = DisplayTheme.LIGHT

    def to_dict(self) -> dict:
        return {
            "readingLength": self.reading_length.value,
            "themeId": self.theme_id,
            "displayTheme": self.display_theme.value,
        }


@dataclass
class Story:
    """A complete generated story, owned by the caller once returned."""

    id: str
    title: str
    child_name: str
    settings: StorySettings
    pages: list[StoryPage] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    is_completed: bool = False

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def get_page(self, page_number: int) -> Optional[StoryPage]:
        """Get a page by its 1-based number."""
        if 1 <= page_number <= len(self.pages):
            return self.pages[page_number - 1]
        return None

    def to_dict(self) -> dict:
        """Serialize with the camelCase keys the UI layer consumes."""
        return {
            "id": self.id,
            "title": self.title,
            "childName": self.child_name,
            "settings": self.settings.to_dict(),
            "pages": [page.to_dict() for page in self.pages],
            "createdAt": self.created_at.isoformat(),
            "isCompleted": self.is_completed,
        }

    def to_formatted_string(self) -> str:
        """Format the story as readable text."""
        lines = [f"# {self.title}", ""]
        for page in self.pages:
            lines.append(f"## Page {page.page_number}: {page.title}")
            lines.append("")
            lines.append(page.text)
            lines.append("")
        return "\n".join(lines).rstrip() + "\n"
