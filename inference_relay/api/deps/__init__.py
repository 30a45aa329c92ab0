"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_agent_service,
    get_retrieval_service,
    get_service_cache,
)

__all__ = [
    "get_agent_service",
    "get_retrieval_service",
    "get_service_cache",
]
