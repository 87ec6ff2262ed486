# Templated synthesis (default mode)
from .page_synthesizer import synthesize, TitleTemplate, BodyTemplate

# Beat-based synthesis (alternative mode)
from .beat_generator import generate_beats, get_genre, get_all_genres, Genre, GenreId

# Images
from .image_resolver import ImageResolver, resolve_image, character_image, card_background

__all__ = [
    # Templated synthesis
    "synthesize",
    "TitleTemplate",
    "BodyTemplate",
    # Beat-based synthesis
    "generate_beats",
    "get_genre",
    "get_all_genres",
    "Genre",
    "GenreId",
    # Images
    "ImageResolver",
    "resolve_image",
    "character_image",
    "card_background",
]
