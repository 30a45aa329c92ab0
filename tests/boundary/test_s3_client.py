"""
Test suite for S3DocumentClient.

System role: Verification of presigned URL issuance
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from inference_relay.boundary.aws.s3_client import S3DocumentClient
from inference_relay.configs.aws import AwsSettings


@pytest.fixture
def boto_s3() -> MagicMock:
    """Provide mock boto3 S3 client."""
    client = MagicMock()
    client.generate_presigned_url.return_value = "https://bucket.s3.amazonaws.com/key?sig"
    return client


class TestGeneratePresignedDownloadUrl:
    """Test suite for generate_presigned_download_url."""

    def test_should_sign_get_object_for_bucket_and_key(self, boto_s3: MagicMock) -> None:
        client = S3DocumentClient(boto_s3)

        url = client.generate_presigned_download_url("bucket", "docs/a.pdf")

        assert url == "https://bucket.s3.amazonaws.com/key?sig"
        boto_s3.generate_presigned_url.assert_called_once_with(
            ClientMethod="get_object",
            Params={"Bucket": "bucket", "Key": "docs/a.pdf"},
            ExpiresIn=3600,
        )

    def test_should_pass_custom_expiry(self, boto_s3: MagicMock) -> None:
        S3DocumentClient(boto_s3).generate_presigned_download_url(
            "bucket", "k", expires_in=60
        )

        assert boto_s3.generate_presigned_url.call_args.kwargs["ExpiresIn"] == 60

    def test_should_propagate_client_errors(self, boto_s3: MagicMock) -> None:
        boto_s3.generate_presigned_url.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}},
            "GeneratePresignedUrl",
        )

        with pytest.raises(ClientError):
            S3DocumentClient(boto_s3).generate_presigned_download_url("b", "k")


class TestFromSettings:
    """Test suite for S3DocumentClient.from_settings."""

    def test_should_create_s3_client_from_session(self) -> None:
        session = MagicMock()

        S3DocumentClient.from_settings(AwsSettings(region="ca-central-1"), session=session)

        args, kwargs = session.client.call_args
        assert args == ("s3",)
        assert kwargs["config"].connect_timeout == 10
