from .prompts import router as prompts_router

ROUTERS = (prompts_router,)

__all__ = [
    "ROUTERS",
    "prompts_router",
]
