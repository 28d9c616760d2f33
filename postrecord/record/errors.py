"""Exceptions raised while loading and validating posts."""

from __future__ import annotations


class PostRecordError(Exception):
    """Base class for everything postrecord raises."""


class ValidationError(PostRecordError):
    """A front-matter field failed validation."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class MissingFieldError(ValidationError):
    """A required field is absent."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Missing required field: {field}")


class MalformedFieldError(ValidationError):
    """A field is present but fails its type or format check."""

    def __init__(self, field: str, reason: str) -> None:
        self.reason = reason
        super().__init__(field, f"Field {field!r} is malformed: {reason}")


class FrontmatterError(PostRecordError):
    """The file has no parseable front-matter block."""
