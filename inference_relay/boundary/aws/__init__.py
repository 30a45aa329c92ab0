"""
AWS boundary modules.

Exports: S3DocumentClient, build_boto3_session, build_bedrock_agent_runtime_client
"""

from .bedrock_client import build_bedrock_agent_runtime_client, build_boto3_session
from .s3_client import S3DocumentClient

__all__ = [
    "S3DocumentClient",
    "build_bedrock_agent_runtime_client",
    "build_boto3_session",
]
