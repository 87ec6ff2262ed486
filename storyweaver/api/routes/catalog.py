"""Theme and genre catalog endpoints."""

from fastapi import APIRouter

from storyweaver.core.modules.beat_generator import get_all_genres, get_genre, is_known_genre
from storyweaver.core.themes import get_all_themes, get_theme, is_known_theme

from ..models.responses import GenreResponse, ThemeResponse

themes_router = APIRouter()
genres_router = APIRouter()


@themes_router.get(
    "/",
    response_model=list[ThemeResponse],
    summary="List themes",
)
async def list_themes():
    """List all themes in catalog order."""
    return [ThemeResponse.from_theme(theme) for theme in get_all_themes()]


@themes_router.get(
    "/{theme_id}",
    response_model=ThemeResponse,
    summary="Get a theme",
    description="Unknown ids return the default theme with isFallback set.",
)
async def get_theme_by_id(theme_id: str):
    """Get a theme by id."""
    return ThemeResponse.from_theme(get_theme(theme_id), is_fallback=not is_known_theme(theme_id))


@genres_router.get(
    "/",
    response_model=list[GenreResponse],
    summary="List genres",
    description="Narrative genres used when the generator runs in beats mode.",
)
async def list_genres():
    """List all genres."""
    return [GenreResponse.from_genre(genre) for genre in get_all_genres()]


@genres_router.get(
    "/{genre_id}",
    response_model=GenreResponse,
    summary="Get a genre",
    description="Unknown ids return the default genre with isFallback set.",
)
async def get_genre_by_id(genre_id: str):
    """Get a genre by id."""
    return GenreResponse.from_genre(get_genre(genre_id), is_fallback=not is_known_genre(genre_id))
