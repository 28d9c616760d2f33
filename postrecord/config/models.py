from pydantic import BaseModel, Field
from typing import Literal


class ContentConfig(BaseModel):
    directory: str = "_posts"
    pattern: str = Field(default="*.md", min_length=1)


class ValidationConfig(BaseModel):
    mode: Literal["strict", "warn", "off"] = "strict"
    unique_permalinks: bool = True


class PostRecordConfig(BaseModel):
    content: ContentConfig = Field(default_factory=ContentConfig)
    validation: ValidationConfig = Field(default_factory=ValidationConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
