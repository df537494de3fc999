import logging
from abc import ABC, abstractmethod

import httpx

from promptlab.core import DEFAULT_GEMINI_MODEL, Settings, get_settings

logger = logging.getLogger(__name__)


class ChatServiceError(Exception):
    """Raised when the chat/LLM API is unavailable or returns invalid or unexpected output."""


class ChatRateLimitError(ChatServiceError):
    """Raised when the chat/LLM API rate limits the request."""


class ChatConfigError(ChatServiceError):
    """Raised when no chat provider credential is configured."""


def _provider_error_message(response: httpx.Response) -> str | None:
    """Pull the provider's own error message out of an error body, if there is one.

    Gemini and OpenAI both answer with {"error": {"message": "..."}}; some
    compatible servers use a plain {"error": "..."} or {"detail": "..."}.
    """
    try:
        data = response.json()
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    err = data.get("error")
    if isinstance(err, dict):
        msg = err.get("message")
        return msg.strip() if isinstance(msg, str) and msg.strip() else None
    if isinstance(err, str) and err.strip():
        return err.strip()
    detail = data.get("detail")
    if isinstance(detail, str) and detail.strip():
        return detail.strip()
    return None


class ChatProvider(ABC):
    model: str

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Send the whole prompt as one user turn and return the model's text."""
        pass


class _HttpChatProvider(ChatProvider):
    """Shared POST + error mapping for JSON chat endpoints."""

    name = "Chat"

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout
        self._transport = transport

    async def _post(self, url: str, payload: dict, headers: dict[str, str]) -> dict:
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                r = await client.post(url, json=payload, headers=headers)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPStatusError as e:
            body = getattr(e.response, "text", None) or ""
            if body:
                logger.warning(
                    "%s API error %s: %s",
                    self.name,
                    e.response.status_code,
                    body[:500],
                )
            message = _provider_error_message(e.response)
            if e.response.status_code == 429:
                raise ChatRateLimitError(
                    message or f"{self.name} API rate limited the request. Please retry later."
                ) from e
            raise ChatServiceError(
                message or f"{self.name} API returned {e.response.status_code}. Please try again later."
            ) from e
        except httpx.RequestError as e:
            raise ChatServiceError(
                f"{self.name} service unavailable (timeout or connection error). Please try again later."
            ) from e
        except ValueError as e:
            raise ChatServiceError(f"{self.name} API returned a non-JSON response.") from e

    @staticmethod
    def _require_text(content: object, name: str) -> str:
        if content is None or not isinstance(content, str):
            raise ChatServiceError(f"{name} API returned missing or non-string content.")
        if not content.strip():
            raise ChatServiceError(
                f"{name} API returned empty content (LLM may have failed or been rate-limited)."
            )
        return content


class GeminiChatProvider(_HttpChatProvider):
    """Google Gemini REST API (generateContent)."""

    name = "Gemini"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str = "https://generativelanguage.googleapis.com/v1beta",
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")

    async def generate(self, prompt: str) -> str:
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}
        headers = {"Content-Type": "application/json", "x-goog-api-key": self.api_key}
        data = await self._post(
            f"{self.base_url}/models/{self.model}:generateContent",
            payload,
            headers,
        )
        try:
            candidates = data.get("candidates") or []
            if not candidates:
                reason = (data.get("promptFeedback") or {}).get("blockReason")
                raise ChatServiceError(
                    f"Gemini API returned no candidates (blocked: {reason})."
                    if reason
                    else "Gemini API returned no candidates."
                )
            parts = (candidates[0].get("content") or {}).get("parts") or []
            texts = [p["text"] for p in parts if isinstance(p.get("text"), str)]
        except (AttributeError, KeyError, TypeError) as e:
            raise ChatServiceError("Gemini API returned unexpected response format.") from e
        return self._require_text("".join(texts) if texts else None, self.name)


class OpenAICompatibleChatProvider(_HttpChatProvider):
    """OpenAI-compatible endpoint (vLLM, etc.)."""

    def __init__(
        self,
        base_url: str,
        api_key: str | None,
        model: str,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(timeout=timeout, transport=transport)
        self.base_url = base_url.rstrip("/")
        if not self.base_url.endswith("/v1"):
            self.base_url = f"{self.base_url}/v1"
        self.api_key = api_key
        self.model = model

    async def generate(self, prompt: str) -> str:
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        data = await self._post(f"{self.base_url}/chat/completions", payload, headers)
        try:
            choices = data.get("choices") or []
            if not choices:
                raise ChatServiceError("Chat API returned no choices (e.g. content filter).")
            content = (choices[0].get("message") or {}).get("content")
        except (AttributeError, KeyError, TypeError, IndexError) as e:
            raise ChatServiceError("Chat API returned unexpected response format.") from e
        return self._require_text(content, self.name)


class OpenAIChatProvider(OpenAICompatibleChatProvider):
    """Official OpenAI API."""

    def __init__(self, api_key: str, model: str | None = None, timeout: float | None = None):
        super().__init__(
            base_url="https://api.openai.com/v1",
            api_key=api_key,
            model=model or _OPENAI_DEFAULT_MODEL,
            timeout=timeout,
        )


# Default model for OpenAI official API when CHAT_MODEL is not set
_OPENAI_DEFAULT_MODEL = "gpt-4o-mini"
# Default model for OpenAI-compatible (vLLM, etc.) when CHAT_MODEL is not set
_OPENAI_COMPATIBLE_DEFAULT_MODEL = "Qwen/Qwen2.5-7B-Instruct"


def get_chat_provider(settings: Settings | None = None) -> ChatProvider:
    """Build the configured provider. An explicit CHAT_API_BASE_URL wins, then Gemini, then OpenAI."""
    s = settings or get_settings()
    if s.chat_api_base_url:
        return OpenAICompatibleChatProvider(
            base_url=s.chat_api_base_url,
            api_key=s.chat_api_key,
            model=s.chat_model or _OPENAI_COMPATIBLE_DEFAULT_MODEL,
            timeout=s.chat_timeout_seconds,
        )
    if s.api_key:
        return GeminiChatProvider(
            api_key=s.api_key,
            model=s.chat_model or DEFAULT_GEMINI_MODEL,
            base_url=s.gemini_api_base_url,
            timeout=s.chat_timeout_seconds,
        )
    if s.openai_api_key:
        return OpenAIChatProvider(
            api_key=s.openai_api_key,
            model=s.chat_model,
            timeout=s.chat_timeout_seconds,
        )
    raise ChatConfigError(
        "Chat LLM not configured. Set API_KEY (Gemini), OPENAI_API_KEY or CHAT_API_BASE_URL."
    )
