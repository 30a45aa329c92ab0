"""API routers."""

from .agent import router as agent_router
from .health import router as health_router
from .retrieve import router as retrieve_router

__all__ = [
    "agent_router",
    "health_router",
    "retrieve_router",
]
