import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from promptlab.core import get_settings, limiter
from promptlab.providers import get_chat_provider
from promptlab.routers import ROUTERS
from promptlab.services import PromptComposer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    s = get_settings()
    logging.basicConfig(
        level=getattr(logging, s.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)
    # Missing credential raises ChatConfigError here and the app refuses to start.
    provider = get_chat_provider(s)
    app.state.composer = PromptComposer(provider)
    logger.info("Chat provider ready: %s (model=%s)", type(provider).__name__, provider.model)
    yield


app = FastAPI(
    title="AIKIA Prompt Generator API",
    description="Turns task descriptions into TCREI/CLEAR framework-structured LLM prompts.",
    version="0.1.0",
    lifespan=lifespan,
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for router in ROUTERS:
    app.include_router(router)


@app.get("/health")
async def health():
    return {"status": "ok"}
