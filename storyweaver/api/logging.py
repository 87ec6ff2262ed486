"""Structured logging infrastructure.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a StoryLogger helper for story generation events.
"""

import json
import logging
import sys
from datetime import datetime, timezone

# Structured fields copied from LogRecord extras into the JSON payload
EXTRA_FIELDS = ("story_id", "stage", "theme_id", "page_count", "duration", "error_type", "field_name")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class StoryLogger:
    """Logger for story generation events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("story_generation")

    def generation_started(self, theme_id: str, reading_length: str) -> None:
        self.logger.info(
            f"Story generation started ({reading_length})",
            extra={"stage": "started", "theme_id": theme_id},
        )

    def generation_completed(self, story_id: str, theme_id: str, page_count: int, duration: float) -> None:
        self.logger.info(
            "Story generation completed",
            extra={
                "story_id": story_id,
                "stage": "completed",
                "theme_id": theme_id,
                "page_count": page_count,
                "duration": round(duration, 4),
            },
        )

    def validation_failed(self, field: str, message: str) -> None:
        self.logger.warning(
            f"Story request rejected: {message}",
            extra={"stage": "validation", "error_type": "ValidationError", "field_name": field},
        )

    def generation_failed(self, error: Exception, theme_id: str = None) -> None:
        extra = {"stage": "failed", "error_type": type(error).__name__}
        if theme_id:
            extra["theme_id"] = theme_id
        self.logger.error(f"Story generation failed: {error}", extra=extra, exc_info=True)


# Global story logger instance
story_logger = StoryLogger()
