"""Agent API endpoint.

Routes:
- POST /agent - Send a prompt to the Bedrock agent, returns plain-text completion

Dependencies: inference_relay.application.services.agent_service
System role: Agent HTTP API
"""

import logging

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse, PlainTextResponse

from inference_relay.api.deps import get_agent_service
from inference_relay.api.routers.router_utils import require_prompt
from inference_relay.application.services.agent_service import (
    AgentService,
    new_session_id,
)
from inference_relay.core.exceptions import UpstreamError
from inference_relay.models.agent import AgentRequest
from inference_relay.models.common import ErrorResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["agent"])


@router.post(
    "/agent",
    response_class=PlainTextResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def invoke_agent(
    request: AgentRequest | None = Body(default=None),
    agent_service: AgentService = Depends(get_agent_service),
):
    """Invoke the agent with a fresh session.

    Flow:
    1. Validate and sanitize the message
    2. Generate a new session ID
    3. Invoke the agent and return the completion as plain text

    Args:
        request: AgentRequest with message
        agent_service: Injected AgentService

    Returns:
        PlainTextResponse: Agent completion

    Raises:
        ValidationError: Missing or oversized prompt (rendered as 400)
    """
    prompt = require_prompt(request.message if request else None)
    session_id = new_session_id()

    try:
        result = await agent_service.invoke_agent(prompt, session_id)
    except UpstreamError as e:
        logger.error(f"{__name__}:invoke_agent - {type(e).__name__}: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to connect to external API"},
        )

    return PlainTextResponse(result.completion)
