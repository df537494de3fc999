from .composer import ComposedPrompt, ParsedResponse, PromptComposer, parse_framework_response
from .errors import (
    COMMUNICATION_ERROR_PREFIX,
    UNKNOWN_ERROR_MESSAGE,
    PromptGenerationError,
    SessionBusyError,
)
from .renderer import FormattedLine, LineKind, iter_formatted_lines
from .session import Clipboard, PromptSession, SessionState

__all__ = [
    "ComposedPrompt",
    "ParsedResponse",
    "PromptComposer",
    "parse_framework_response",
    "COMMUNICATION_ERROR_PREFIX",
    "UNKNOWN_ERROR_MESSAGE",
    "PromptGenerationError",
    "SessionBusyError",
    "FormattedLine",
    "LineKind",
    "iter_formatted_lines",
    "Clipboard",
    "PromptSession",
    "SessionState",
]
