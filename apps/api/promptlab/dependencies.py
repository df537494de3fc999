from fastapi import HTTPException, Request, status

from promptlab.services import PromptComposer


def get_prompt_composer(request: Request) -> PromptComposer:
    """Composer built at startup from the configured chat provider."""
    composer = getattr(request.app.state, "composer", None)
    if composer is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Chat LLM not configured.",
        )
    return composer
