"""
Agent service for Bedrock agent invocations.

Translates an internal (prompt, session_id) call into an InvokeAgent request
and reassembles the streamed completion.

Dependencies: boto3 (bedrock-agent-runtime), botocore, inference_relay.core
System role: Agent client adapter
"""

import asyncio
import codecs
import logging
import uuid
from collections.abc import Iterable
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from inference_relay.application.services.upstream_errors import to_upstream_error
from inference_relay.core.exceptions import UpstreamProtocolError, UpstreamTimeoutError
from inference_relay.models.agent import AgentResult
from inference_relay.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    """Generate a fresh random hex session identifier for one agent call."""
    return uuid.uuid4().hex


def collect_completion(events: Iterable[dict[str, Any]]) -> str:
    """
    Concatenate the chunk bytes of a completion event stream in arrival order.

    Non-chunk events (traces, return control, files) are skipped. A single
    incremental decoder runs over the whole stream so that a multibyte
    character split across two chunks decodes intact.

    Args:
        events: InvokeAgent completion event stream

    Returns:
        str: UTF-8 decoded completion text
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    parts: list[str] = []
    for event in events:
        chunk = event.get("chunk")
        if chunk is None:
            continue
        parts.append(decoder.decode(chunk.get("bytes", b"")))
    parts.append(decoder.decode(b"", final=True))
    return "".join(parts)


class AgentService:
    """
    Bedrock agent client.

    Invokes a fixed agent alias and returns the full completion text.
    """

    def __init__(
        self,
        bedrock_client,
        agent_id: str,
        agent_alias_id: str,
        timeout: float = 60.0,
    ) -> None:
        """
        Initialize agent service.

        Args:
            bedrock_client: boto3 bedrock-agent-runtime client
            agent_id: Bedrock agent identifier
            agent_alias_id: Bedrock agent alias identifier
            timeout: Upper bound in seconds for one invocation
        """
        self._client = bedrock_client
        self._agent_id = agent_id
        self._agent_alias_id = agent_alias_id
        self._timeout = timeout

    async def invoke_agent(self, prompt: str, session_id: str) -> AgentResult:
        """
        Invoke the agent and wait for the complete response.

        Args:
            prompt: Sanitized prompt text
            session_id: Session identifier for this invocation

        Returns:
            AgentResult: Session ID and concatenated completion

        Raises:
            UpstreamProtocolError: If the response carries no completion stream
            UpstreamServiceError: If Bedrock rejects or fails the call
            UpstreamTimeoutError: If the call exceeds the configured timeout
        """
        logger.info(
            f"{__name__}:invoke_agent - START session_id={session_id}, "
            f"prompt={safe_log_value(prompt, max_length=80)!r}"
        )
        try:
            completion = await asyncio.wait_for(
                asyncio.to_thread(self._invoke, prompt, session_id),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"{__name__}:invoke_agent - timed out after {self._timeout}s")
            raise UpstreamTimeoutError("invoke_agent", self._timeout) from e
        except (ClientError, BotoCoreError) as e:
            logger.error(f"{__name__}:invoke_agent - {type(e).__name__}: {e}")
            raise to_upstream_error(e) from e

        logger.info(
            f"{__name__}:invoke_agent - END session_id={session_id}, "
            f"completion_len={len(completion)}"
        )
        return AgentResult(session_id=session_id, completion=completion)

    def _invoke(self, prompt: str, session_id: str) -> str:
        response = self._client.invoke_agent(
            agentId=self._agent_id,
            agentAliasId=self._agent_alias_id,
            sessionId=session_id,
            inputText=prompt,
        )
        events = response.get("completion")
        if events is None:
            raise UpstreamProtocolError("Completion is undefined")
        return collect_completion(events)
