"""
S3 client for knowledge base source documents.

Generates presigned download URLs for objects referenced by retrieval
citations. The bucket varies per reference, so it is passed per call.

Dependencies: boto3
System role: Signed URL issuance for referenced documents
"""

import boto3

from inference_relay.boundary.aws.bedrock_client import (
    build_boto3_session,
    build_client_config,
)
from inference_relay.configs.aws import AwsSettings


class S3DocumentClient:
    """S3 client for document bucket operations (presigned URLs only)."""

    def __init__(self, s3_client) -> None:
        """
        Initialize with a boto3 S3 client.

        Args:
            s3_client: boto3 S3 client
        """
        self._s3_client = s3_client

    @classmethod
    def from_settings(
        cls,
        settings: AwsSettings,
        session: boto3.session.Session | None = None,
    ) -> "S3DocumentClient":
        """
        Build a client from AWS settings.

        Args:
            settings: AWS settings
            session: Optional shared boto3 session

        Returns:
            S3DocumentClient: Client using the configured region and credentials
        """
        session = session or build_boto3_session(settings)
        return cls(session.client("s3", config=build_client_config(settings)))

    def generate_presigned_download_url(
        self,
        bucket: str,
        s3_key: str,
        expires_in: int = 3600,
    ) -> str:
        """
        Generate presigned URL for downloading/viewing an S3 object.

        Args:
            bucket: S3 bucket name
            s3_key: S3 object key (path in bucket)
            expires_in: URL expiry in seconds (default 1 hour)

        Returns:
            str: Presigned GET URL

        Raises:
            ClientError: If presigned URL generation fails
        """
        return self._s3_client.generate_presigned_url(
            ClientMethod="get_object",
            Params={
                "Bucket": bucket,
                "Key": s3_key,
            },
            ExpiresIn=expires_in,
        )
