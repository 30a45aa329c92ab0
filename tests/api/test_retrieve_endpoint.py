"""
Test suite for retrieval API endpoint.

Tests POST /retrieve with FastAPI TestClient and a mocked RetrievalService.

System role: Verification of retrieval HTTP API endpoint
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from conftest import make_citation
from inference_relay.api.deps import get_retrieval_service
from inference_relay.core.exceptions import (
    MalformedReferenceError,
    UpstreamServiceError,
    UpstreamTimeoutError,
)
from inference_relay.main import create_app
from inference_relay.models.retrieval import (
    Citation,
    RetrievalOutput,
    RetrievalResponse,
    RetrievalResult,
)


@pytest.fixture
def sample_result() -> RetrievalResult:
    """Provide a retrieval result with one signed reference."""
    citation = Citation.model_validate(make_citation("s3://docs/a.pdf"))
    reference = citation.retrieved_references[0].model_copy(
        update={"signed_url": "https://docs.s3.amazonaws.com/a.pdf?sig"}
    )
    return RetrievalResult(
        session_id="session-abc",
        response=RetrievalResponse(
            output=RetrievalOutput(text="answer"),
            citations=[citation.model_copy(update={"retrieved_references": [reference]})],
            guardrail_action="NONE",
        ),
    )


@pytest.fixture
def mock_retrieval_service(sample_result: RetrievalResult) -> MagicMock:
    """Provide mock RetrievalService."""
    service = MagicMock()
    service.invoke_retrieval = AsyncMock(return_value=sample_result)
    return service


@pytest.fixture
def app(mock_retrieval_service: MagicMock) -> FastAPI:
    """Create application with the retrieval service overridden."""
    app = create_app()
    app.dependency_overrides[get_retrieval_service] = lambda: mock_retrieval_service
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app, raise_server_exceptions=False)


class TestRetrieveEndpoint:
    """Test suite for POST /retrieve."""

    def test_should_return_normalized_result(self, client: TestClient) -> None:
        response = client.post("/retrieve", json={"message": "What is X?"})

        assert response.status_code == 200
        body = response.json()
        assert body["sessionId"] == "session-abc"
        assert body["response"]["output"] == {"text": "answer"}
        assert body["response"]["guardrailAction"] == "NONE"
        reference = body["response"]["citations"][0]["retrievedReferences"][0]
        assert reference["signedUrl"] == "https://docs.s3.amazonaws.com/a.pdf?sig"
        assert reference["location"]["s3Location"]["uri"] == "s3://docs/a.pdf"

    def test_should_keep_null_provider_keys_and_omit_unset_fields(
        self, client: TestClient, mock_retrieval_service: MagicMock
    ) -> None:
        payload = make_citation("s3://docs/a.pdf")
        payload["retrievedReferences"][0]["score"] = None
        citation = Citation.model_validate(payload)
        reference = citation.retrieved_references[0].model_copy(
            update={"signed_url": "https://docs.s3.amazonaws.com/a.pdf?sig"}
        )
        mock_retrieval_service.invoke_retrieval.return_value = RetrievalResult(
            session_id="session-abc",
            response=RetrievalResponse(
                output=RetrievalOutput(text="answer"),
                citations=[citation.model_copy(update={"retrieved_references": [reference]})],
            ),
        )

        response = client.post("/retrieve", json={"message": "q"})

        assert response.status_code == 200
        body = response.json()
        assert "guardrailAction" not in body["response"]
        returned = body["response"]["citations"][0]["retrievedReferences"][0]
        assert returned == {
            **payload["retrievedReferences"][0],
            "signedUrl": "https://docs.s3.amazonaws.com/a.pdf?sig",
        }

    def test_should_pass_sanitized_prompt_and_session(
        self, client: TestClient, mock_retrieval_service: MagicMock
    ) -> None:
        client.post(
            "/retrieve",
            json={"message": " What is <X>? ", "session_id": "abc 123/def"},
        )

        mock_retrieval_service.invoke_retrieval.assert_awaited_once_with(
            "what is x?", "abc123def"
        )

    @pytest.mark.parametrize("session_id", [None, "", "$$$"])
    def test_missing_or_empty_session_should_be_omitted(
        self,
        client: TestClient,
        mock_retrieval_service: MagicMock,
        session_id,
    ) -> None:
        client.post("/retrieve", json={"message": "q", "session_id": session_id})

        mock_retrieval_service.invoke_retrieval.assert_awaited_once_with("q", None)

    def test_missing_message_should_return_400(
        self, client: TestClient, mock_retrieval_service: MagicMock
    ) -> None:
        response = client.post("/retrieve", json={"session_id": "abc"})

        assert response.status_code == 400
        assert response.json() == {"error": "Prompt is required"}
        mock_retrieval_service.invoke_retrieval.assert_not_called()

    def test_malformed_json_should_return_400(self, client: TestClient) -> None:
        response = client.post(
            "/retrieve",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400

    def test_upstream_error_should_use_upstream_status(
        self, client: TestClient, mock_retrieval_service: MagicMock
    ) -> None:
        mock_retrieval_service.invoke_retrieval.side_effect = UpstreamServiceError(
            "AWS Bedrock API error: ThrottlingException - slow down",
            code="ThrottlingException",
            status_code=429,
        )

        response = client.post("/retrieve", json={"message": "q"})

        assert response.status_code == 429
        assert response.json() == {
            "error": "AWS Bedrock API error: ThrottlingException - slow down",
            "code": "ThrottlingException",
        }

    def test_upstream_error_without_status_should_return_500(
        self, client: TestClient, mock_retrieval_service: MagicMock
    ) -> None:
        mock_retrieval_service.invoke_retrieval.side_effect = UpstreamServiceError(
            "AWS Bedrock API error: EndpointConnectionError - unreachable",
            code="EndpointConnectionError",
        )

        response = client.post("/retrieve", json={"message": "q"})

        assert response.status_code == 500

    def test_timeout_should_return_504(
        self, client: TestClient, mock_retrieval_service: MagicMock
    ) -> None:
        mock_retrieval_service.invoke_retrieval.side_effect = UpstreamTimeoutError(
            "retrieve_and_generate", 60.0
        )

        response = client.post("/retrieve", json={"message": "q"})

        assert response.status_code == 504
        assert response.json()["code"] == "RequestTimeout"

    def test_malformed_reference_should_return_500(
        self, client: TestClient, mock_retrieval_service: MagicMock
    ) -> None:
        mock_retrieval_service.invoke_retrieval.side_effect = MalformedReferenceError(
            "Invalid S3 URI: not-a-uri", uri="not-a-uri"
        )

        response = client.post("/retrieve", json={"message": "q"})

        assert response.status_code == 500
        assert response.json() == {"error": "Invalid S3 URI: not-a-uri"}

    def test_unexpected_error_should_return_generic_500(
        self, client: TestClient, mock_retrieval_service: MagicMock
    ) -> None:
        mock_retrieval_service.invoke_retrieval.side_effect = RuntimeError("boom")

        response = client.post("/retrieve", json={"message": "q"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}
