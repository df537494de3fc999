from typing import Literal, Optional

from pydantic import BaseModel


class GeneratePromptRequest(BaseModel):
    task_description: str


class FormattedLineResponse(BaseModel):
    """One rendered body line: plain text, or a section header ("T – ") plus content."""

    kind: Literal["plain", "sectioned"]
    text: Optional[str] = None
    header: Optional[str] = None
    content: Optional[str] = None


class GeneratePromptResponse(BaseModel):
    """Result of POST /prompts/generate. raw_prompt is the full answer, as copied."""

    raw_prompt: str
    justification: str
    prompt_body: str
    lines: list[FormattedLineResponse] = []


class RenderPromptRequest(BaseModel):
    prompt_body: str
    strict: Optional[bool] = None  # None => STRICT_SECTION_HEADERS setting


class RenderPromptResponse(BaseModel):
    lines: list[FormattedLineResponse] = []


class FrameworkElementResponse(BaseModel):
    letter: str
    name: str
    description: str


class FrameworkResponse(BaseModel):
    key: str
    use_case: str
    elements: list[FrameworkElementResponse]
