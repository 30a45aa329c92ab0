"""
Health check API endpoint.

Routes: GET /health

System role: Readiness check HTTP API
"""

from fastapi import APIRouter

from inference_relay.models.common import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic readiness check."""
    return HealthResponse(status="OK")
