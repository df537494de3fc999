"""Core configuration and shared infrastructure."""

from promptlab.core.config import Settings, get_settings
from promptlab.core.constants import (
    COPY_ACK_SECONDS,
    DEFAULT_GEMINI_MODEL,
    JUSTIFICATION_MARKER,
    SECTION_SEPARATOR,
)
from promptlab.core.limiter import limiter

__all__ = [
    "Settings",
    "get_settings",
    "COPY_ACK_SECONDS",
    "DEFAULT_GEMINI_MODEL",
    "JUSTIFICATION_MARKER",
    "SECTION_SEPARATOR",
    "limiter",
]
