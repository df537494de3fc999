"""Error types surfaced by the prompt generation services."""

COMMUNICATION_ERROR_PREFIX = "Fehler bei der Kommunikation mit der KI"
UNKNOWN_ERROR_MESSAGE = "Ein unbekannter Fehler ist bei der Kommunikation mit der KI aufgetreten."


class PromptGenerationError(Exception):
    """The text-completion call failed; `message` is ready to show to the user."""

    def __init__(self, message: str, rate_limited: bool = False, cause: Exception | None = None):
        self.message = message
        self.rate_limited = rate_limited
        self.cause = cause
        super().__init__(message)

    @classmethod
    def from_provider_error(cls, error: Exception, rate_limited: bool = False) -> "PromptGenerationError":
        detail = str(error).strip()
        message = f"{COMMUNICATION_ERROR_PREFIX}: {detail}" if detail else UNKNOWN_ERROR_MESSAGE
        return cls(message, rate_limited=rate_limited, cause=error)


class SessionBusyError(Exception):
    """Raised when a prompt session is asked to submit while a request is still in flight."""
