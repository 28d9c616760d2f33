"""Post record model, validator and error taxonomy."""

from postrecord.record.errors import (
    FrontmatterError,
    MalformedFieldError,
    MissingFieldError,
    PostRecordError,
    ValidationError,
)
from postrecord.record.models import PostRecord
from postrecord.record.validator import REQUIRED_FIELDS, validate

__all__ = [
    "FrontmatterError",
    "MalformedFieldError",
    "MissingFieldError",
    "PostRecord",
    "PostRecordError",
    "REQUIRED_FIELDS",
    "ValidationError",
    "validate",
]
