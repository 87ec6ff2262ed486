"""
Beat-based story generation.

An alternative to templated synthesis: each genre defines an ordered arc of
story beats (opening, inciting incident, ..., closing). The first and last
beats are always told; every beat in between is told only when the story has
at least that beat's threshold of pages, so longer stories fill in the arc.

Slot values (location, power, challenge, villain, friend) come from the
deterministic selector, never from a hidden random source.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from storyweaver.config import STORY_CONSTANTS
from ..selector import name_seed, pick
from ..types import PageContent

logger = logging.getLogger(__name__)


POWERS = (
    "super strength", "the ability to fly", "invisibility", "telepathy",
    "healing powers", "super speed", "shape-shifting", "the power to talk to animals",
)
CHALLENGES = (
    "a lost pet", "a broken bridge", "a crying child", "a dangerous storm",
    "a locked door", "a runaway wagon", "a trapped animal", "a confused old traveler",
)
VILLAINS = (
    "the Shadow Master", "Dr. Chaos", "the Storm King", "Captain Darkness",
    "the Time Thief", "Professor Mischief", "the Ice Queen", "the Shadow Dragon",
)
FRIENDS = (
    "a wise owl", "a talking cat", "a friendly robot", "a magical fairy",
    "a brave dog", "a clever fox", "a gentle giant", "a sparkling unicorn",
)


@dataclass(frozen=True)
class BeatContext:
    """Values a beat can interpolate."""

    name: str
    location: str
    power: str
    challenge: str
    villain: str
    friend: str

    @property
    def place(self) -> str:
        """Last word of the location ("a bustling city" -> "city")."""
        return self.location.split()[-1]

    @property
    def friend_name(self) -> str:
        """Friend without its article ("a wise owl" -> "wise owl")."""
        return self.friend.split(" ", 1)[-1]


@dataclass(frozen=True)
class StoryBeat:
    """One step of a genre's arc."""

    title: Callable[[BeatContext], str]
    text: Callable[[BeatContext], str]
    threshold: int  # Minimum page count for this beat to be told


@dataclass(frozen=True)
class Genre:
    """A narrative genre with its arc of beats."""

    id: str
    name: str
    icon: str
    description: str
    locations: tuple[str, ...]
    beats: tuple[StoryBeat, ...]

    @property
    def label(self) -> str:
        return self.id[:1].upper() + self.id[1:]

    @property
    def max_pages(self) -> int:
        return len(self.beats)


class GenreId(Enum):
    """Available narrative genres."""

    SUPERHERO = "superhero"
    ADVENTURE = "adventure"
    FANTASY = "fantasy"
    FAIRY_TALE = "fairy-tale"
    SPACE = "space"


GENRES: dict[GenreId, Genre] = {

    GenreId.SUPERHERO: Genre(
        id=GenreId.SUPERHERO.value,
        name="Superhero",
        icon="🦸",
        description="Your child becomes the hero",
        locations=("a bustling city", "a quiet neighborhood", "a magical town", "a futuristic metropolis", "a coastal village"),
        beats=(
            StoryBeat(lambda c: f"The Hero of the {c.place.title()}", lambda c: f"In {c.location}, there lived a brave young hero named {c.name}.", 1),
            StoryBeat(lambda c: "A Call to Help", lambda c: f"One day, while walking through the streets, {c.name} noticed {c.challenge} and knew they had to help.", 3),
            StoryBeat(lambda c: "The Power Awakens", lambda c: f"Suddenly, {c.name} felt a strange energy coursing through their body. They discovered they had {c.power}!", 4),
            StoryBeat(lambda c: "First Heroic Act", lambda c: f"Using their new ability, {c.name} helped solve the problem and felt a deep sense of purpose.", 5),
            StoryBeat(lambda c: "Rising Fame", lambda c: f"Word spread about the young hero, and soon people began calling {c.name} \"The Guardian of the {c.place.title()}\".", 6),
            StoryBeat(lambda c: "The Dark Threat", lambda c: f"But then, a new threat emerged: {c.villain} was causing chaos, and only {c.name} could stop them.", 7),
            StoryBeat(lambda c: "The Ultimate Challenge", lambda c: f"{c.name} knew this was their biggest challenge yet. They had to use all their courage and {c.power} to stop the villain.", 8),
            StoryBeat(lambda c: "Epic Battle", lambda c: f"In an epic battle, {c.name} outsmarted {c.villain} and saved the day. Everyone cheered for their young hero.", 9),
            StoryBeat(lambda c: "A Hero's Legacy", lambda c: f"From that day forward, {c.name} continued to protect {c.location}, proving that true heroism comes from the heart.", 10),
            StoryBeat(lambda c: "The Greatest Hero", lambda c: f"And so {c.name} became the greatest superhero the world had ever known, inspiring others to be kind and brave every day!", 1),
        ),
    ),

    GenreId.ADVENTURE: Genre(
        id=GenreId.ADVENTURE.value,
        name="Adventure",
        icon="🗺️",
        description="Epic quests and discoveries",
        locations=("a mysterious island", "an ancient forest", "a hidden valley", "a mountain peak", "a secret cave"),
        beats=(
            StoryBeat(lambda c: "The Curious Explorer", lambda c: f"Meet {c.name}, a brave young explorer who loved discovering new places.", 1),
            StoryBeat(lambda c: "The Mysterious Map", lambda c: f"One day, {c.name} found a mysterious map that led to {c.location}.", 3),
            StoryBeat(lambda c: "The Journey Begins", lambda c: f"Excited by the discovery, {c.name} packed their backpack and set off on their adventure.", 4),
            StoryBeat(lambda c: "A New Friend", lambda c: f"Along the way, {c.name} met {c.friend}, who became their trusted companion.", 5),
            StoryBeat(lambda c: "Facing Challenges", lambda c: f"The journey was filled with challenges, and {c.challenge} tested {c.name}'s resolve.", 6),
            StoryBeat(lambda c: "Overcoming Obstacles", lambda c: f"With the {c.friend_name}'s help, {c.name} overcame every obstacle and learned valuable lessons about courage and friendship.", 7),
            StoryBeat(lambda c: "The Hidden Treasure", lambda c: f"When they finally reached {c.location}, {c.name} discovered a treasure beyond their wildest dreams.", 8),
            StoryBeat(lambda c: "The Real Treasure", lambda c: f"But the greatest treasure of all was the confidence and wisdom {c.name} gained from their amazing adventure.", 9),
            StoryBeat(lambda c: "Home Again", lambda c: f"{c.name} returned home with stories to tell and a heart full of happy memories.", 10),
            StoryBeat(lambda c: "The Adventure Continues", lambda c: f"From that day forward, {c.name} continued to explore the world, always ready for the next great adventure!", 1),
        ),
    ),

    GenreId.FANTASY: Genre(
        id=GenreId.FANTASY.value,
        name="Fantasy",
        icon="🧙",
        description="Magic and mystical creatures",
        locations=("a magical kingdom", "an enchanted realm", "a mystical forest", "a crystal palace", "a floating island"),
        beats=(
            StoryBeat(lambda c: "The Young Wizard", lambda c: f"In {c.location}, there lived a young wizard named {c.name}.", 1),
            StoryBeat(lambda c: "The Ancient Gift", lambda c: f"One magical morning, {c.name} discovered they possessed the ancient gift of {c.power}.", 3),
            StoryBeat(lambda c: "The Wise Mentor", lambda c: f"A wise mentor appeared and began teaching {c.name} how to control their magical abilities.", 4),
            StoryBeat(lambda c: "A Magical Companion", lambda c: f"{c.name} made friends with {c.friend}, who became their magical companion.", 5),
            StoryBeat(lambda c: "Learning Balance", lambda c: f"Together, {c.name} and the {c.friend_name} learned about the balance between light and dark magic.", 6),
            StoryBeat(lambda c: "The Dark Threat", lambda c: f"But then, {c.villain} threatened to steal all the magic from {c.location}, and {c.name} was the only one who could help.", 7),
            StoryBeat(lambda c: "Preparing for Battle", lambda c: f"{c.name} knew they had to act. With the {c.friend_name}'s help, they prepared for the ultimate magical battle.", 8),
            StoryBeat(lambda c: "The Final Battle", lambda c: f"Using their {c.power} and the power of friendship, {c.name} defeated {c.villain} and restored magic to the realm.", 9),
            StoryBeat(lambda c: "The Greatest Wizard", lambda c: f"From that day forward, {c.name} became the greatest wizard the kingdom had ever known.", 10),
            StoryBeat(lambda c: "Magic from the Heart", lambda c: f"{c.name} continued to use their magic to spread joy and help others, proving that true magic comes from the heart!", 1),
        ),
    ),

    GenreId.FAIRY_TALE: Genre(
        id=GenreId.FAIRY_TALE.value,
        name="Fairy Tale",
        icon="🏰",
        description="Classic tales with a twist",
        locations=("a royal castle", "a magical garden", "a fairy glen", "a wishing well", "a rainbow bridge"),
        beats=(
            StoryBeat(lambda c: "The Kind Heart", lambda c: f"Once upon a time, near {c.location}, there lived a kind child named {c.name}.", 1),
            StoryBeat(lambda c: "A Heart of Gold", lambda c: f"{c.name} was known throughout the kingdom for their kindness to all creatures, great and small.", 3),
            StoryBeat(lambda c: "A Cry for Help", lambda c: f"One day, while exploring the royal gardens, {c.name} found {c.challenge} and knew they had to help.", 4),
            StoryBeat(lambda c: "A Magical Meeting", lambda c: f"Gently, {c.name} helped solve the problem, and in return, they met {c.friend}.", 5),
            StoryBeat(lambda c: "A Special Gift", lambda c: f"The {c.friend_name} was so moved by {c.name}'s kindness that they granted them a special gift.", 6),
            StoryBeat(lambda c: "The Power of Kindness", lambda c: f"\"You have shown me that true royalty comes from the heart,\" the {c.friend_name} told {c.name}. \"I grant you the power to bring joy to everyone you meet.\"", 7),
            StoryBeat(lambda c: "Magical Abilities", lambda c: f"From that moment on, {c.name} discovered they could make flowers bloom with a smile and bring hope to the hopeless.", 8),
            StoryBeat(lambda c: "Fame Spreads", lambda c: f"News of the magical gift spread throughout the kingdom, and people traveled from distant lands to meet {c.name}.", 9),
            StoryBeat(lambda c: "Banishing Darkness", lambda c: f"When darkness threatened the kingdom, {c.name} used their gift to organize a great celebration that banished the darkness forever.", 10),
            StoryBeat(lambda c: "Happily Ever After", lambda c: f"And so {c.name} lived happily ever after, proving that the greatest magic of all is the power of love and kindness!", 1),
        ),
    ),

    GenreId.SPACE: Genre(
        id=GenreId.SPACE.value,
        name="Space",
        icon="🚀",
        description="Journey through the stars",
        locations=("a distant planet", "a space station", "a nebula", "an asteroid field", "a galaxy far away"),
        beats=(
            StoryBeat(lambda c: "The Young Astronaut", lambda c: f"Meet {c.name}, a brilliant young astronaut whose imagination soared higher than any rocket ship.", 1),
            StoryBeat(lambda c: "The Secret Mission", lambda c: f"One day, {c.name} was chosen for a top-secret mission to explore {c.location}.", 3),
            StoryBeat(lambda c: "The Stellar Explorer", lambda c: f"{c.name}'s spaceship, the Stellar Explorer, was equipped with the most advanced technology ever created.", 4),
            StoryBeat(lambda c: "Cosmic Wonders", lambda c: f"As {c.name} journeyed through space, they encountered breathtaking phenomena and cosmic wonders.", 5),
            StoryBeat(lambda c: "First Contact", lambda c: f"Out near {c.location}, {c.name} discovered an ancient civilization and met {c.friend}.", 6),
            StoryBeat(lambda c: "Learning Together", lambda c: f"The {c.friend_name} taught {c.name} about their advanced science and philosophy of universal harmony.", 7),
            StoryBeat(lambda c: "The Cosmic Mystery", lambda c: f"Together, {c.name} and the {c.friend_name} worked to solve a cosmic mystery: {c.challenge}.", 8),
            StoryBeat(lambda c: "Saving the Galaxy", lambda c: f"Using Earth technology and alien wisdom, {c.name} discovered a solution that saved not just one planet, but an entire galaxy.", 9),
            StoryBeat(lambda c: "A Gift of Communication", lambda c: f"In gratitude, the {c.friend_name} gave {c.name} a crystal that would allow them to talk with any friendly life in the universe.", 10),
            StoryBeat(lambda c: "Inspiring Future Explorers", lambda c: f"When {c.name} returned to Earth, they shared their incredible discoveries and inspired a new generation of space explorers!", 1),
        ),
    ),
}

DEFAULT_GENRE_ID = GenreId(STORY_CONSTANTS["default_genre_id"])


def _find_genre_id(genre_id: Optional[str]) -> Optional[GenreId]:
    normalized = str(genre_id or "").strip().lower().replace("_", "-")
    for candidate in GenreId:
        if candidate.value == normalized:
            return candidate
    return None


def is_known_genre(genre_id: Optional[str]) -> bool:
    return _find_genre_id(genre_id) is not None


def get_genre(genre_id: Optional[str]) -> Genre:
    """Get a genre by id, falling back to the default genre if not found."""
    found = _find_genre_id(genre_id)
    if found is None:
        logger.warning(
            f"Unknown genre {genre_id!r}, falling back to {DEFAULT_GENRE_ID.value}",
            extra={"theme_id": genre_id, "stage": "theme_fallback"},
        )
        return GENRES[DEFAULT_GENRE_ID]
    return GENRES[found]


def get_all_genres() -> list[Genre]:
    return list(GENRES.values())


def select_beats(genre: Genre, total_pages: int) -> list[StoryBeat]:
    """First and last beats always, inner beats when total_pages reaches their threshold."""
    first, *inner, last = genre.beats
    return [first] + [beat for beat in inner if total_pages >= beat.threshold] + [last]


def build_context(genre: Genre, child_name: str, entropy: int = 0) -> BeatContext:
    seed = name_seed(child_name) + entropy
    return BeatContext(
        name=child_name,
        location=pick(genre.locations, seed + 1),
        power=pick(POWERS, seed + 2),
        challenge=pick(CHALLENGES, seed + 3),
        villain=pick(VILLAINS, seed + 4),
        friend=pick(FRIENDS, seed + 5),
    )


def generate_beats(
    child_name: str,
    genre_id: str,
    total_pages: int,
    entropy: int = 0,
) -> list[PageContent]:
    """
    Tell a genre's arc across up to total_pages pages.

    The result has between 2 and genre.max_pages pages: the opening and
    closing beats are always present, so it may differ from total_pages at
    either extreme.
    """
    genre = get_genre(genre_id)
    context = build_context(genre, child_name, entropy)
    return [
        PageContent(title=beat.title(context), text=beat.text(context))
        for beat in select_beats(genre, total_pages)
    ]
