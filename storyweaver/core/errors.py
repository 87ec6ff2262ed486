"""Exceptions raised by the story engine."""


class StoryweaverError(Exception):
    """Base class for story engine errors."""


class ValidationError(StoryweaverError, ValueError):
    """Request input the caller must correct (e.g. a missing child name)."""

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.message = message
        self.field = field


class EmptyTemplateListError(StoryweaverError, ValueError):
    """A template bank slot has no candidates. This is a data defect."""
