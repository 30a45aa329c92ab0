"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    agent_router,
    health_router,
    retrieve_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(agent_router)
api_router.include_router(retrieve_router)
api_router.include_router(health_router)

__all__ = ["api_router"]
