"""
Shared test fixtures and configuration for entire test suite.

Provides: boto3 client stubs, Bedrock settings, sample upstream payloads
Dependencies: pytest, unittest.mock
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest

from inference_relay.configs.bedrock import BedrockSettings


@pytest.fixture
def bedrock_settings() -> BedrockSettings:
    """Provide Bedrock settings with fixed identifiers."""
    return BedrockSettings(
        agent_id="AGENT123",
        agent_alias_id="ALIAS456",
        knowledge_base_id="KB789",
        model_arn="arn:aws:bedrock:ca-central-1::foundation-model/anthropic.claude-3-haiku",
    )


@pytest.fixture
def mock_bedrock_client() -> MagicMock:
    """Provide mock bedrock-agent-runtime boto3 client."""
    return MagicMock()


@pytest.fixture
def mock_s3_document_client() -> MagicMock:
    """Provide mock S3DocumentClient that signs bucket/key deterministically."""
    client = MagicMock()
    client.generate_presigned_download_url.side_effect = (
        lambda bucket, s3_key, expires_in=3600: (
            f"https://{bucket}.s3.amazonaws.com/{s3_key}?X-Amz-Expires={expires_in}"
        )
    )
    return client


def make_reference(uri, text: str = "snippet") -> dict:
    """Build a retrievedReferences entry the way Bedrock returns it."""
    return {
        "content": {"text": text},
        "location": {"type": "S3", "s3Location": {"uri": uri}},
        "metadata": {"x-amz-bedrock-kb-source-uri": uri},
    }


def make_citation(*uris) -> dict:
    """Build a citation dict with one reference per URI."""
    return {
        "generatedResponsePart": {
            "textResponsePart": {"text": "answer", "span": {"start": 0, "end": 6}}
        },
        "retrievedReferences": [make_reference(uri) for uri in uris],
    }


@pytest.fixture
def sample_citation_payload() -> dict:
    """Provide an upstream citation with three S3 references."""
    return make_citation(
        "s3://docs-bucket/guides/intro.pdf",
        "s3://docs-bucket/guides/setup.pdf",
        "s3://other-bucket/faq.md",
    )
