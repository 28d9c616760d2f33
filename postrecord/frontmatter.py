"""Split Markdown posts into YAML front matter and body."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from postrecord.record.errors import FrontmatterError
from postrecord.record.models import PostRecord
from postrecord.record.validator import validate

_DELIMITER = "---"


def split_frontmatter(content: str) -> tuple[dict[str, Any], str]:
    """Split post content into (front matter mapping, body).

    The first line must be exactly ``---`` and the block ends at the next
    line that is exactly ``---``. The body is everything after that line,
    untouched.
    """
    lines = content.splitlines(keepends=True)
    if not lines or lines[0].rstrip("\r\n") != _DELIMITER:
        raise FrontmatterError("No front matter found (file must start with a '---' line)")

    for idx in range(1, len(lines)):
        if lines[idx].rstrip("\r\n") == _DELIMITER:
            break
    else:
        raise FrontmatterError("Front matter is not closed (missing second '---' line)")

    yaml_str = "".join(lines[1:idx])
    body = "".join(lines[idx + 1:])

    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise FrontmatterError(f"YAML parse error: {exc}") from exc

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        raise FrontmatterError(f"Front matter is not a mapping, got {type(data).__name__}")
    return data, body


def parse_post(content: str) -> PostRecord:
    """Split and validate post content."""
    data, body = split_frontmatter(content)
    return validate(data, body)


def load_post(path: str | Path) -> PostRecord:
    """Read a post from disk and validate it."""
    content = Path(path).read_text(encoding="utf-8")
    return parse_post(content)
