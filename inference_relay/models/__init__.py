"""
Request and response models.

Dependencies: pydantic
System role: HTTP API contracts and normalized inference results
"""

from inference_relay.models.agent import AgentRequest, AgentResult
from inference_relay.models.common import ErrorResponse, HealthResponse
from inference_relay.models.retrieval import (
    Citation,
    RetrievalOutput,
    RetrievalRequest,
    RetrievalResponse,
    RetrievalResult,
    RetrievedReference,
)

__all__ = [
    "AgentRequest",
    "AgentResult",
    "Citation",
    "ErrorResponse",
    "HealthResponse",
    "RetrievalOutput",
    "RetrievalRequest",
    "RetrievalResponse",
    "RetrievalResult",
    "RetrievedReference",
]
