"""
Common response models.

Error and health schemas shared by all routers.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Error message")
    code: str | None = Field(default=None, description="Upstream error code, if any")


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
