"""
HTTP server settings.

Dependencies: pydantic_settings
System role: Server binding, CORS and request timeout configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """Settings for the HTTP layer."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    client_host: str = Field(
        default="*",
        description="Allowed cross-origin host for browser clients",
    )
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=4000, description="Bind port")
    request_timeout_seconds: float = Field(
        default=60.0,
        description="Upper bound for a single upstream call",
    )
