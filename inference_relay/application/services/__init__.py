"""Application services."""

from .agent_service import AgentService, new_session_id
from .retrieval_service import RetrievalService

__all__ = ["AgentService", "RetrievalService", "new_session_id"]
