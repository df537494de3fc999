import logging
import re
from dataclasses import dataclass

from promptlab.core.constants import JUSTIFICATION_MARKER
from promptlab.prompts import get_framework_prompt
from promptlab.providers import ChatProvider, ChatRateLimitError, ChatServiceError
from promptlab.services.errors import PromptGenerationError

logger = logging.getLogger(__name__)

# Marker at position 0, optional spaces/tabs, then the rest of that first line.
_JUSTIFICATION_RE = re.compile(r"^" + re.escape(JUSTIFICATION_MARKER) + r"[^\S\r\n]*(.*)")


@dataclass(frozen=True)
class ParsedResponse:
    justification: str
    body: str


@dataclass(frozen=True)
class ComposedPrompt:
    """One model answer: the raw text (what gets copied) and its two display parts."""

    raw: str
    justification: str
    body: str


def parse_framework_response(raw: str) -> ParsedResponse:
    """Split a model answer into the "**Framework-Wahl:**" line and the prompt body.

    Without the marker at the very start the whole (trimmed) answer is the body.
    """
    text = raw or ""
    match = _JUSTIFICATION_RE.match(text)
    if not match:
        return ParsedResponse(justification="", body=text.strip())
    return ParsedResponse(
        justification=match.group(1).strip(),
        body=text[match.end():].strip(),
    )


class PromptComposer:
    """Builds the meta-prompt for a task, asks the provider once and parses the answer."""

    def __init__(self, provider: ChatProvider):
        self.provider = provider

    @property
    def model(self) -> str:
        return getattr(self.provider, "model", "")

    async def compose(self, task_description: str) -> ComposedPrompt:
        """
        Raises:
            ValueError: If the task description is blank.
            PromptGenerationError: If the provider call fails.
        """
        if not task_description or not task_description.strip():
            raise ValueError("task_description is required and cannot be empty")

        prompt = get_framework_prompt(task_description)
        logger.info(
            "Generating framework prompt (task_chars=%s, model=%s)",
            len(task_description),
            self.model,
        )
        try:
            raw = await self.provider.generate(prompt)
        except ChatRateLimitError as e:
            logger.warning("Prompt generation rate limited: %s", e)
            raise PromptGenerationError.from_provider_error(e, rate_limited=True) from e
        except ChatServiceError as e:
            logger.warning("Prompt generation failed: %s", e)
            raise PromptGenerationError.from_provider_error(e) from e
        except Exception as e:
            logger.exception("Prompt generation failed with unexpected error")
            raise PromptGenerationError.from_provider_error(e) from e

        parsed = parse_framework_response(raw)
        if not parsed.justification:
            logger.debug("Response had no %s line; using whole answer as body", JUSTIFICATION_MARKER)
        return ComposedPrompt(raw=raw, justification=parsed.justification, body=parsed.body)
