"""Front-matter schema validation for blog posts."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from datetime import date, datetime, time
from typing import Any

from postrecord.record.errors import MalformedFieldError, MissingFieldError
from postrecord.record.models import PostRecord

# Checked in this order; the first absent one is reported.
REQUIRED_FIELDS: tuple[str, ...] = ("layout", "title", "author", "permalink", "last_modified_at")

_REQUIRED_STRINGS: tuple[str, ...] = ("layout", "title", "author", "permalink")

_BOOLEAN_DEFAULTS: dict[str, bool] = {
    "featured": False,
    "comments": True,
    "toc": True,
}

_TRUE_WORDS = frozenset({"true", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "no", "off"})

# Lowercase path-safe segments joined by "/", optional leading and trailing slash.
PERMALINK_RE = re.compile(r"^/?[a-z0-9-]+(?:/[a-z0-9-]+)*/?$")

# Jekyll writes dates like "2020-12-17 10:30:00 +0800".
_TIMESTAMP_FORMATS = (
    "%Y-%m-%d %H:%M:%S %z",
    "%Y-%m-%d %H:%M %z",
    "%Y-%m-%d %H:%M:%S",
    # fromisoformat before 3.11 rejects a trailing "Z"
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f%z",
)

_URL_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


def validate(raw: Mapping[str, Any], body: str) -> PostRecord:
    """Validate a raw front-matter mapping and attach the body.

    Raises MissingFieldError or MalformedFieldError for the first problem
    found. Absent optional fields get their defaults.
    """
    if not isinstance(raw, Mapping):
        raise MalformedFieldError(
            "front_matter", f"expected a mapping, got {type(raw).__name__}"
        )

    for field in REQUIRED_FIELDS:
        if raw.get(field) is None:
            raise MissingFieldError(field)

    for field in _REQUIRED_STRINGS:
        _require_text(field, raw[field])

    flags = {
        field: _coerce_bool(field, raw[field]) if raw.get(field) is not None else default
        for field, default in _BOOLEAN_DEFAULTS.items()
    }

    last_modified_at = parse_timestamp(raw["last_modified_at"])

    permalink = raw["permalink"].strip()
    if not PERMALINK_RE.match(permalink):
        raise MalformedFieldError(
            "permalink",
            f"{permalink!r} must be lowercase letters, digits and hyphens separated by '/'",
        )

    excerpt = raw.get("excerpt")
    if excerpt is not None and not isinstance(excerpt, str):
        raise MalformedFieldError("excerpt", f"expected a string, got {type(excerpt).__name__}")

    return PostRecord(
        layout=raw["layout"].strip(),
        title=raw["title"].strip(),
        author=raw["author"].strip(),
        permalink=permalink,
        last_modified_at=last_modified_at,
        excerpt=excerpt,
        category=_category_tags(raw.get("category")),
        image=_image_path(raw.get("image")),
        body=body,
        **flags,
    )


def parse_timestamp(value: Any) -> datetime:
    """Turn a YAML timestamp, date or string into a datetime."""
    # datetime is a subclass of date, so test it first
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str) or not value.strip():
        raise MalformedFieldError(
            "last_modified_at", f"expected a date-time, got {type(value).__name__}"
        )

    text = value.strip()
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in _TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    raise MalformedFieldError("last_modified_at", f"{text!r} is not a valid date-time")


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _require_text(field: str, value: Any) -> None:
    if not isinstance(value, str):
        raise MalformedFieldError(field, f"expected a string, got {type(value).__name__}")
    if not value.strip():
        raise MalformedFieldError(field, "cannot be empty or whitespace")


def _coerce_bool(field: str, value: Any) -> bool:
    """Accept real booleans and the YAML 1.1 boolean words, nothing else."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise MalformedFieldError(field, f"expected a boolean, got {value!r}")


def _category_tags(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    # Jekyll accepts a single category as a plain string
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Sequence) or isinstance(value, (bytes, bytearray)):
        raise MalformedFieldError(
            "category", f"expected a sequence of tags, got {type(value).__name__}"
        )

    tags: list[str] = []
    for i, tag in enumerate(value):
        if not isinstance(tag, str) or not tag.strip():
            raise MalformedFieldError("category", f"tag #{i} must be a non-empty string")
        tags.append(tag.strip())
    return tuple(tags)


def _image_path(value: Any) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise MalformedFieldError("image", "expected a non-empty path string")
    path = value.strip()
    if path.startswith("/") or _URL_SCHEME_RE.match(path):
        raise MalformedFieldError("image", f"{path!r} must be a relative path")
    return path
