from .chat import (
    ChatConfigError,
    ChatProvider,
    ChatRateLimitError,
    ChatServiceError,
    GeminiChatProvider,
    OpenAIChatProvider,
    OpenAICompatibleChatProvider,
    get_chat_provider,
)

__all__ = [
    "ChatConfigError",
    "ChatProvider",
    "ChatRateLimitError",
    "ChatServiceError",
    "GeminiChatProvider",
    "OpenAIChatProvider",
    "OpenAICompatibleChatProvider",
    "get_chat_provider",
]
