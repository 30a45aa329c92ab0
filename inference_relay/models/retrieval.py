"""
Retrieve-and-generate domain models and schemas.

Field names serialize in the upstream's camelCase so that callers see the
same citation shape Bedrock returns, plus a signedUrl per reference.

Dependencies: pydantic
System role: Retrieval API contracts
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RetrievalRequest(BaseModel):
    """Request body for POST /retrieve."""

    message: str | None = Field(default=None, description="User prompt")
    session_id: str | None = Field(
        default=None,
        description="Session identifier returned by a previous call",
    )


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RetrievedReference(_CamelModel):
    """One source document pointer returned with a citation.

    Unknown provider keys are kept as extra fields.
    """

    model_config = ConfigDict(extra="allow")

    content: dict[str, Any] | None = None
    location: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    signed_url: str | None = Field(
        default=None,
        description="Time-limited download link for the referenced object",
    )

    @property
    def s3_uri(self) -> Any:
        """Raw s3Location.uri value, or None when absent."""
        s3_location = (self.location or {}).get("s3Location") or {}
        return s3_location.get("uri")


class Citation(_CamelModel):
    """Evidence record: the generated text span plus its references."""

    generated_response_part: dict[str, Any] | None = None
    metadata: dict[str, Any] | None = None
    retrieved_references: list[RetrievedReference] = Field(default_factory=list)


class RetrievalOutput(_CamelModel):
    text: str | None = None


class RetrievalResponse(_CamelModel):
    output: RetrievalOutput
    citations: list[Citation] = Field(default_factory=list)
    guardrail_action: str | None = None


class RetrievalResult(_CamelModel):
    """Normalized retrieve-and-generate result returned to the caller."""

    session_id: str | None = Field(
        default=None,
        description="Session identifier to resend on the next call",
    )
    response: RetrievalResponse
