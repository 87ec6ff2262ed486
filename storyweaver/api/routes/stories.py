"""Story generation endpoints."""

from fastapi import APIRouter, status

from ..dependencies import Service
from ..models.requests import CreateStoryRequest
from ..models.responses import ErrorResponse, StoryResponse

router = APIRouter()


@router.post(
    "/",
    response_model=StoryResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a story",
    description="Generate a personalized story. Generation is synchronous and nothing is stored.",
    responses={422: {"model": ErrorResponse, "description": "Blank child name or invalid request"}},
)
async def create_story(request: CreateStoryRequest, service: Service):
    """Generate a story for a child."""
    story = service.create_story(
        child_name=request.child_name,
        theme_id=request.theme_id,
        reading_length=request.reading_length,
        variation_seed=request.variation_seed,
        display_theme=request.display_theme,
    )
    return StoryResponse.from_story(story)
