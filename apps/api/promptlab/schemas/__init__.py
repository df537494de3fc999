"""Pydantic request/response schemas."""

from promptlab.schemas.prompt import (
    FormattedLineResponse,
    FrameworkElementResponse,
    FrameworkResponse,
    GeneratePromptRequest,
    GeneratePromptResponse,
    RenderPromptRequest,
    RenderPromptResponse,
)

__all__ = [
    "FormattedLineResponse",
    "FrameworkElementResponse",
    "FrameworkResponse",
    "GeneratePromptRequest",
    "GeneratePromptResponse",
    "RenderPromptRequest",
    "RenderPromptResponse",
]
