"""postrecord - front-matter validation for static-site blog posts."""

from postrecord.collection import FileResult, PostValidator, find_duplicate_permalinks
from postrecord.config import PostRecordConfig, load_config
from postrecord.frontmatter import load_post, parse_post, split_frontmatter
from postrecord.record import (
    FrontmatterError,
    MalformedFieldError,
    MissingFieldError,
    PostRecord,
    PostRecordError,
    ValidationError,
    validate,
)

__version__ = "0.1.0"

__all__ = [
    "FileResult",
    "FrontmatterError",
    "MalformedFieldError",
    "MissingFieldError",
    "PostRecord",
    "PostRecordConfig",
    "PostRecordError",
    "PostValidator",
    "ValidationError",
    "find_duplicate_permalinks",
    "load_config",
    "load_post",
    "parse_post",
    "split_frontmatter",
    "validate",
]
