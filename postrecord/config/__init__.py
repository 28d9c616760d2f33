from .loader import load_config
from .models import (
    ContentConfig,
    PostRecordConfig,
    ValidationConfig,
)

__all__ = [
    "ContentConfig",
    "PostRecordConfig",
    "ValidationConfig",
    "load_config",
]
