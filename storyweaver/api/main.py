"""FastAPI application for Storyweaver."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storyweaver.core.errors import ValidationError
from storyweaver.core.themes import get_all_themes

from .config import API_TITLE, API_VERSION, CORS_ORIGINS, LOG_JSON, LOG_LEVEL
from .dependencies import Generator
from .logging import configure_logging
from .routes import catalog, stories

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    configure_logging(json_format=LOG_JSON, level=LOG_LEVEL)
    logger.info(f"Theme catalog loaded with {len(get_all_themes())} themes")
    yield


app = FastAPI(
    title=API_TITLE,
    description="""
Generate personalized children's stories from a child's name, a theme and a reading length.

## Workflow
1. GET `/themes` to list available themes
2. POST `/stories` with `childName`, `themeId` and `readingLength`
3. Render the returned pages in order
    """,
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def story_validation_error_handler(request: Request, exc: ValidationError):
    """Surface input problems as a prompt for the user, not a server error."""
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "field": exc.field},
    )


# Include routers
app.include_router(stories.router, prefix="/stories", tags=["Stories"])
app.include_router(catalog.themes_router, prefix="/themes", tags=["Themes"])
app.include_router(catalog.genres_router, prefix="/genres", tags=["Genres"])


@app.get("/health", tags=["Health"])
async def health_check(generator: Generator):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "generationMode": generator.mode.value,
        "pageCountPolicy": generator.page_count_policy.value,
    }
