"""Validate a directory of posts and check cross-post invariants."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from pathlib import Path

from pydantic import BaseModel, Field

from postrecord.frontmatter import parse_post
from postrecord.record.errors import PostRecordError
from postrecord.record.models import PostRecord

logger = logging.getLogger(__name__)


class FileResult(BaseModel):
    """Result of validating a single post."""

    valid: bool = True
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    path: str = ""
    record: PostRecord | None = None


def _permalink_key(permalink: str) -> str:
    # "/a/b/" and "a/b" publish to the same URL
    return permalink.strip("/")


def find_duplicate_permalinks(records: Iterable[tuple[str, PostRecord]]) -> dict[str, list[str]]:
    """Map each permalink shared by two or more posts to the sources using it."""
    seen: dict[str, list[str]] = defaultdict(list)
    for source, record in records:
        seen[_permalink_key(record.permalink)].append(source)
    return {link: sources for link, sources in seen.items() if len(sources) > 1}


class PostValidator:
    """Validates posts on disk or in memory.

    Modes:
      - "strict": any validation failure marks the post invalid
      - "warn": failures are logged and kept as warnings; the post stays valid
      - "off": skip validation, always return valid
    """

    def __init__(self, mode: str = "strict", *, unique_permalinks: bool = True) -> None:
        if mode not in ("strict", "warn", "off"):
            raise ValueError(f"Unknown validation mode: {mode!r}")
        self.mode = mode
        self.unique_permalinks = unique_permalinks

    def validate_content(self, content: str, source: str = "<string>") -> FileResult:
        """Validate post content from a string."""
        result = FileResult(path=source)

        if self.mode == "off":
            return result

        try:
            result.record = parse_post(content)
        except PostRecordError as exc:
            self._add_issue(result, str(exc))
        return result

    def validate_file(self, path: str | Path) -> FileResult:
        """Validate a single post file."""
        path = Path(path)

        if self.mode == "off":
            return FileResult(path=str(path))

        if not path.is_file():
            return FileResult(path=str(path), valid=False, errors=[f"File not found: {path}"])

        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            result = FileResult(path=str(path))
            self._add_issue(result, f"Could not read file: {exc}")
            return result

        return self.validate_content(content, source=str(path))

    def validate_directory(self, path: str | Path, pattern: str = "*.md") -> list[FileResult]:
        """Validate every post under a directory, then check permalink uniqueness."""
        path = Path(path)

        if not path.is_dir():
            return [FileResult(path=str(path), valid=False, errors=[f"Not a directory: {path}"])]

        results = [self.validate_file(p) for p in sorted(path.rglob(pattern)) if p.is_file()]
        logger.debug("validated %d post(s) under %s", len(results), path)

        if self.unique_permalinks and self.mode != "off":
            self._check_unique_permalinks(results)

        return results

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _check_unique_permalinks(self, results: list[FileResult]) -> None:
        by_path = {r.path: r for r in results}
        pairs = [(r.path, r.record) for r in results if r.record is not None]

        for link, sources in find_duplicate_permalinks(pairs).items():
            for source in sources:
                others = ", ".join(s for s in sources if s != source)
                self._add_issue(by_path[source], f"Duplicate permalink {link!r} (also used by {others})")

    def _add_issue(self, result: FileResult, message: str) -> None:
        """Add an error or warning depending on mode."""
        if self.mode == "strict":
            result.errors.append(message)
            result.valid = False
        elif self.mode == "warn":
            result.warnings.append(message)
            logger.warning("%s: %s", result.path, message)
