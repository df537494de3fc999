"""Client-side state for one user generating prompts, one request at a time."""

import logging
import time
from enum import Enum
from typing import Callable, Protocol

from promptlab.core.constants import COPY_ACK_SECONDS
from promptlab.services.composer import ComposedPrompt, PromptComposer
from promptlab.services.errors import PromptGenerationError, SessionBusyError
from promptlab.services.renderer import FormattedLine, iter_formatted_lines

logger = logging.getLogger(__name__)


class Clipboard(Protocol):
    def write(self, text: str) -> None: ...


class SessionState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class PromptSession:
    """
    Idle -> InFlight -> Succeeded | Failed, and back to InFlight on the next submit.

    Only one request may be outstanding. The state flips to InFlight before the
    first await, so a second submit on the same event loop sees it and is rejected.
    """

    def __init__(
        self,
        composer: PromptComposer,
        strict_headers: bool = False,
        copy_ack_seconds: float = COPY_ACK_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.composer = composer
        self.strict_headers = strict_headers
        self.copy_ack_seconds = copy_ack_seconds
        self._clock = clock

        self.task_description = ""
        self.state = SessionState.IDLE
        self.result: ComposedPrompt | None = None
        self.error: str | None = None
        self._copied_at: float | None = None

    @property
    def is_in_flight(self) -> bool:
        return self.state is SessionState.IN_FLIGHT

    @property
    def can_submit(self) -> bool:
        return not self.is_in_flight and bool(self.task_description.strip())

    async def submit(self, task_description: str | None = None) -> bool:
        """Generate a prompt for the current task description.

        Returns False (and sends nothing) when the text is blank.
        Raises SessionBusyError while a previous request is in flight.
        """
        if self.is_in_flight:
            raise SessionBusyError("A prompt is already being generated.")
        if task_description is not None:
            self.task_description = task_description
        if not self.task_description.strip():
            return False

        self.state = SessionState.IN_FLIGHT
        self.result = None
        self.error = None
        self._copied_at = None
        try:
            self.result = await self.composer.compose(self.task_description)
        except PromptGenerationError as e:
            self.error = e.message
            self.state = SessionState.FAILED
            return True
        except BaseException:
            # Cancelled or unexpected failure: leave InFlight without a result.
            self.state = SessionState.IDLE
            raise
        self.state = SessionState.SUCCEEDED
        return True

    @property
    def justification(self) -> str:
        return self.result.justification if self.result else ""

    @property
    def prompt_body(self) -> str:
        return self.result.body if self.result else ""

    def formatted_lines(self) -> list[FormattedLine]:
        if self.result is None:
            return []
        return list(iter_formatted_lines(self.result.body, strict=self.strict_headers))

    def copy(self, clipboard: Clipboard) -> bool:
        """Write the full generated answer (justification included) to the clipboard."""
        if self.result is None or self.is_in_flight:
            return False
        clipboard.write(self.result.raw)
        self._copied_at = self._clock()
        logger.debug("Copied %s characters to clipboard", len(self.result.raw))
        return True

    @property
    def is_copied(self) -> bool:
        if self._copied_at is None:
            return False
        return self._clock() - self._copied_at < self.copy_ack_seconds
