"""
Bedrock agent runtime client factory.

Builds the boto3 session and the bedrock-agent-runtime client used by the
agent and retrieval services. Clients are created once and injected.

Dependencies: boto3, botocore
System role: AWS client construction
"""

import boto3
from botocore.config import Config

from inference_relay.configs.aws import AwsSettings


def build_boto3_session(settings: AwsSettings) -> boto3.session.Session:
    """
    Create a boto3 session from settings.

    Static keys are used only when both are configured; otherwise boto3
    resolves credentials through its default chain (env, profile, role).

    Args:
        settings: AWS settings

    Returns:
        boto3.session.Session: Session bound to the configured region
    """
    if settings.access_key_id and settings.secret_access_key:
        return boto3.session.Session(
            aws_access_key_id=settings.access_key_id,
            aws_secret_access_key=settings.secret_access_key,
            aws_session_token=settings.session_token,
            region_name=settings.region,
        )
    return boto3.session.Session(region_name=settings.region)


def build_client_config(settings: AwsSettings) -> Config:
    """botocore config with explicit timeouts and a single attempt per call."""
    return Config(
        connect_timeout=settings.connect_timeout,
        read_timeout=settings.read_timeout,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )


def build_bedrock_agent_runtime_client(
    settings: AwsSettings,
    session: boto3.session.Session | None = None,
):
    """
    Create a bedrock-agent-runtime client.

    Args:
        settings: AWS settings
        session: Optional pre-built session to share with other clients

    Returns:
        botocore client for the bedrock-agent-runtime service
    """
    session = session or build_boto3_session(settings)
    return session.client(
        "bedrock-agent-runtime",
        config=build_client_config(settings),
    )
