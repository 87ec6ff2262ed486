"""Pytest fixtures for unit and API tests."""

import logging
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from storyweaver.api.dependencies import get_story_service
from storyweaver.api.main import app
from storyweaver.api.services.story_service import StoryService
from storyweaver.core.programs.story_generator import StoryGenerator
from storyweaver.core.types import GenerationMode, PageCountPolicy

FIXED_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def restore_root_logging():
    """configure_logging() replaces root handlers; put the originals back after each test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


@pytest.fixture
def generator():
    """Templated generator with the fixed page policy and stable ids/timestamps."""
    return StoryGenerator(
        mode=GenerationMode.TEMPLATED,
        page_count_policy=PageCountPolicy.FIXED,
        id_factory=lambda: "story-123",
        clock=lambda: FIXED_TIME,
    )


@pytest.fixture
def beats_generator():
    """Beats-mode generator with the fixed page policy."""
    return StoryGenerator(
        mode=GenerationMode.BEATS,
        page_count_policy=PageCountPolicy.FIXED,
        id_factory=lambda: "story-456",
        clock=lambda: FIXED_TIME,
    )


@pytest.fixture
def service(generator):
    """StoryService with a deterministic generator and zero wall-clock entropy."""
    return StoryService(generator, entropy_source=lambda: 0)


@pytest.fixture
def client(service):
    """TestClient with the deterministic service injected."""
    app.dependency_overrides[get_story_service] = lambda: service

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
