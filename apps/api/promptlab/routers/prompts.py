import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from promptlab.core import get_settings, limiter
from promptlab.dependencies import get_prompt_composer
from promptlab.prompts import FRAMEWORKS
from promptlab.schemas import (
    FrameworkResponse,
    GeneratePromptRequest,
    GeneratePromptResponse,
    RenderPromptRequest,
    RenderPromptResponse,
)
from promptlab.serializers import (
    composed_prompt_to_response,
    formatted_lines_to_response,
    framework_to_response,
)
from promptlab.services import PromptComposer, PromptGenerationError, iter_formatted_lines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prompts", tags=["prompts"])


@router.get("/frameworks", response_model=list[FrameworkResponse])
async def list_frameworks():
    return [framework_to_response(fw) for fw in FRAMEWORKS]


@router.post("/generate", response_model=GeneratePromptResponse)
@limiter.limit(lambda: get_settings().generate_rate_limit)
async def generate_prompt(
    request: Request,
    body: GeneratePromptRequest,
    composer: PromptComposer = Depends(get_prompt_composer),
):
    """Turn a task description into a framework-structured prompt. No persistence."""
    if not body.task_description.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="task_description is required and cannot be empty",
        )
    try:
        composed = await composer.compose(body.task_description)
    except PromptGenerationError as e:
        if e.rate_limited:
            raise HTTPException(status_code=429, detail=e.message)
        raise HTTPException(status_code=503, detail=e.message)
    strict = get_settings().strict_section_headers
    return composed_prompt_to_response(composed, iter_formatted_lines(composed.body, strict=strict))


@router.post("/render", response_model=RenderPromptResponse)
async def render_prompt(body: RenderPromptRequest):
    """Format a prompt body line by line. Pure; no LLM call."""
    strict = body.strict if body.strict is not None else get_settings().strict_section_headers
    return RenderPromptResponse(
        lines=formatted_lines_to_response(iter_formatted_lines(body.prompt_body, strict=strict))
    )
