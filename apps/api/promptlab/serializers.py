"""Shared domain-to-response serializers."""

from typing import Iterable

from promptlab.prompts import Framework
from promptlab.schemas import (
    FormattedLineResponse,
    FrameworkElementResponse,
    FrameworkResponse,
    GeneratePromptResponse,
)
from promptlab.services import ComposedPrompt, FormattedLine, LineKind


def formatted_line_to_response(line: FormattedLine) -> FormattedLineResponse:
    if line.kind is LineKind.SECTIONED:
        return FormattedLineResponse(kind="sectioned", header=line.header, content=line.content)
    return FormattedLineResponse(kind="plain", text=line.text)


def formatted_lines_to_response(lines: Iterable[FormattedLine]) -> list[FormattedLineResponse]:
    return [formatted_line_to_response(line) for line in lines]


def composed_prompt_to_response(
    composed: ComposedPrompt,
    lines: Iterable[FormattedLine],
) -> GeneratePromptResponse:
    return GeneratePromptResponse(
        raw_prompt=composed.raw,
        justification=composed.justification,
        prompt_body=composed.body,
        lines=formatted_lines_to_response(lines),
    )


def framework_to_response(framework: Framework) -> FrameworkResponse:
    return FrameworkResponse(
        key=framework.key,
        use_case=framework.use_case,
        elements=[
            FrameworkElementResponse(letter=e.letter, name=e.name, description=e.description)
            for e in framework.elements
        ],
    )
