"""Retrieval API endpoint.

Routes:
- POST /retrieve - Knowledge base retrieve-and-generate with signed citation links

Dependencies: inference_relay.application.services.retrieval_service
System role: Retrieval HTTP API
"""

from fastapi import APIRouter, Body, Depends

from inference_relay.api.deps import get_retrieval_service
from inference_relay.api.routers.router_utils import require_prompt
from inference_relay.application.services.retrieval_service import RetrievalService
from inference_relay.core.sanitizer import sanitize_session_id
from inference_relay.models.common import ErrorResponse
from inference_relay.models.retrieval import RetrievalRequest, RetrievalResult


router = APIRouter(tags=["retrieve"])


@router.post(
    "/retrieve",
    response_model=RetrievalResult,
    response_model_by_alias=True,
    response_model_exclude_unset=True,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def retrieve(
    request: RetrievalRequest | None = Body(default=None),
    retrieval_service: RetrievalService = Depends(get_retrieval_service),
) -> RetrievalResult:
    """Answer a prompt from the knowledge base.

    The session ID returned in the response should be sent back as
    session_id to continue the same conversation.

    Args:
        request: RetrievalRequest with message and optional session_id
        retrieval_service: Injected RetrievalService

    Returns:
        RetrievalResult: Session ID, answer, guardrail action and citations

    Raises:
        ValidationError: Invalid prompt or session ID (rendered as 400)
        UpstreamServiceError: Bedrock failure (rendered with its status)
    """
    prompt = require_prompt(request.message if request else None)
    session_id = sanitize_session_id(request.session_id)

    return await retrieval_service.invoke_retrieval(prompt, session_id or None)
