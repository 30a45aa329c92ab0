"""
AWS connection settings.

Region, optional static credentials and botocore timeouts shared by the
Bedrock runtime and S3 clients. When no static keys are set, boto3 falls
back to its default credential chain.

Dependencies: pydantic_settings
System role: AWS client configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AwsSettings(BaseSettings):
    """Settings for AWS client construction."""

    model_config = SettingsConfigDict(
        env_prefix="AWS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    region: str = Field(
        default="ca-central-1",
        description="AWS region for Bedrock and S3 clients",
    )
    access_key_id: str | None = Field(
        default=None,
        description="Static access key (optional)",
    )
    secret_access_key: str | None = Field(
        default=None,
        description="Static secret key (optional)",
    )
    session_token: str | None = Field(
        default=None,
        description="Session token for temporary credentials (optional)",
    )
    connect_timeout: int = Field(
        default=10,
        description="botocore connect timeout in seconds",
    )
    read_timeout: int = Field(
        default=60,
        description="botocore read timeout in seconds",
    )
