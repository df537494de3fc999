from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from apps/api so it works regardless of CWD
_env_file = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore")

    # Gemini credential (kept as API_KEY for existing deployments)
    api_key: str | None = None
    gemini_api_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    # OpenAI official / OpenAI-compatible endpoint (vLLM, Groq, etc.)
    openai_api_key: str | None = None
    chat_api_base_url: str | None = None
    chat_api_key: str | None = None

    # None => provider-specific default
    chat_model: str | None = None
    # None => no local timeout; the provider governs latency
    chat_timeout_seconds: float | None = None

    # Only treat single known framework letters (T, C, R, E, I, L, A) as section headers
    strict_section_headers: bool = False

    generate_rate_limit: str = "10/minute"

    # CORS (comma-separated origins; * allows all)
    cors_origins: str = "*"

    log_level: str = "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parsed CORS origins for middleware."""
        raw = self.cors_origins.strip()
        return ["*"] if not raw else [o.strip() for o in raw.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
