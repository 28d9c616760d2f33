"""Pydantic model for a validated post."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostRecord(BaseModel):
    """Front-matter metadata of one post plus its body."""

    model_config = ConfigDict(frozen=True)

    layout: str = Field(min_length=1)
    title: str = Field(min_length=1)
    author: str = Field(min_length=1)
    permalink: str = Field(min_length=1)
    last_modified_at: datetime
    excerpt: str | None = None
    category: tuple[str, ...] = ()
    featured: bool = False
    comments: bool = True
    toc: bool = True
    image: str | None = None
    body: str = ""

    def front_matter(self) -> dict:
        """Return the metadata fields without the body, absent optionals dropped."""
        data = self.model_dump(exclude={"body"}, exclude_none=True)
        data["category"] = list(self.category)
        return data
