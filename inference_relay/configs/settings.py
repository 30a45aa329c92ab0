"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from inference_relay.configs.aws import AwsSettings
from inference_relay.configs.base import BaseSettings
from inference_relay.configs.bedrock import BedrockSettings
from inference_relay.configs.s3_documents import S3DocumentsSettings
from inference_relay.configs.server import ServerSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    aws: AwsSettings = Field(default_factory=AwsSettings)
    bedrock: BedrockSettings = Field(default_factory=BedrockSettings)
    s3_documents: S3DocumentsSettings = Field(default_factory=S3DocumentsSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from inference_relay.configs import get_settings
        settings = get_settings()
    """
    return Settings()
