"""Locate, read and validate postrecord.yaml."""

import os
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import PostRecordConfig

CONFIG_FILENAME = "postrecord.yaml"

# ${VAR} or ${VAR:-fallback}
_ENV_REF = re.compile(r"\$\{(\w+)(?::-([^}]*))?\}")

def config_search_paths(cli_path: str | None = None) -> list[Path]:
    """Candidate config files, highest priority first.

    An explicit path wins outright; otherwise the blog root is searched
    before the user's home directory.
    """
    if cli_path:
        return [Path(cli_path)]
    return [Path(CONFIG_FILENAME), Path.home() / ".postrecord" / "config.yaml"]

def load_config(cli_path: str | None = None) -> PostRecordConfig:
    """Load the first non-empty config file found, or the defaults."""
    if cli_path and not Path(cli_path).is_file():
        raise ValueError(f"Config file not found: {cli_path}")

    for path in config_search_paths(cli_path):
        if not path.is_file():
            continue
        raw = _read_yaml(path)
        if raw is None:
            continue
        if not isinstance(raw, dict):
            raise ValueError(f"Invalid config in {path}: top level must be a mapping")
        try:
            return PostRecordConfig(**_expand_env(raw))
        except ValidationError as e:
            raise ValueError(f"Invalid config in {path}: {e}") from e

    return PostRecordConfig()

def _read_yaml(path: Path) -> object:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {path}: {e}") from e

def _expand_env(value: object) -> object:
    """Substitute environment references in every string of a parsed config."""
    if isinstance(value, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), m.group(2) or ""), value)
    if isinstance(value, dict):
        return {key: _expand_env(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_env(item) for item in value]
    return value


# Default YAML template for `postrecord config init`
DEFAULT_CONFIG_TEMPLATE = """\
# postrecord.yaml

# Where posts live
content:
  directory: "${POSTS_DIR:-_posts}"
  pattern: "*.md"

# Validation
validation:
  mode: "strict"                # strict | warn | off
  unique_permalinks: true

# Logging
log_level: "info"               # debug | info | warn | error
log_format: "text"              # text | json
"""
