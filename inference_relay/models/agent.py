"""
Agent request/response schemas.

Dependencies: pydantic
System role: Agent API contracts
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AgentRequest(BaseModel):
    """Request body for POST /agent."""

    message: str | None = Field(default=None, description="User prompt")


class AgentResult(BaseModel):
    """Completion assembled from the agent's response stream."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    session_id: str = Field(description="Session identifier sent with the invocation")
    completion: str = Field(description="Concatenated completion text")
