"""
Retrieval service for Bedrock knowledge base retrieve-and-generate.

Builds the RetrieveAndGenerate request, maps the upstream answer into a
RetrievalResult and enriches citations with presigned document links.

Dependencies: boto3 (bedrock-agent-runtime), botocore, inference_relay.core
System role: Retrieval client adapter
"""

import asyncio
import logging
from typing import Any

from botocore.exceptions import ClientError

from inference_relay.application.services.upstream_errors import to_upstream_error
from inference_relay.configs.bedrock import BedrockSettings
from inference_relay.core.citation_resolver import CitationResolver
from inference_relay.core.exceptions import UpstreamTimeoutError, ValidationError
from inference_relay.core.sanitizer import is_valid_session_id
from inference_relay.models.retrieval import (
    Citation,
    RetrievalOutput,
    RetrievalResponse,
    RetrievalResult,
)
from inference_relay.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

RETRIEVAL_TYPE = "KNOWLEDGE_BASE"


def build_retrieve_and_generate_request(
    prompt: str,
    settings: BedrockSettings,
    session_id: str | None = None,
) -> dict[str, Any]:
    """
    Build RetrieveAndGenerate keyword arguments.

    Args:
        prompt: Sanitized query text
        settings: Knowledge base, model and inference parameters
        session_id: Session to continue; omitted so Bedrock creates one

    Returns:
        dict: Keyword arguments for client.retrieve_and_generate
    """
    text_inference_config = {
        "temperature": settings.temperature,
        "topP": settings.top_p,
        "maxTokens": settings.max_tokens,
    }
    # topK is not part of the textInferenceConfig shape; it goes through
    # additionalModelRequestFields instead.
    inference_config = {
        "inferenceConfig": {"textInferenceConfig": text_inference_config},
        "additionalModelRequestFields": {"top_k": settings.top_k},
    }

    request: dict[str, Any] = {
        "input": {"text": prompt},
        "retrieveAndGenerateConfiguration": {
            "type": RETRIEVAL_TYPE,
            "knowledgeBaseConfiguration": {
                "knowledgeBaseId": settings.knowledge_base_id,
                "modelArn": settings.model_arn,
                "retrievalConfiguration": {
                    "vectorSearchConfiguration": {
                        "numberOfResults": settings.number_of_results,
                        "overrideSearchType": settings.override_search_type,
                    },
                },
                "generationConfiguration": dict(inference_config),
                "orchestrationConfiguration": dict(inference_config),
            },
        },
    }
    if session_id:
        request["sessionId"] = session_id
    return request


class RetrievalService:
    """
    Bedrock knowledge base client.

    Runs retrieve-and-generate and resolves citation references into
    presigned URLs.
    """

    def __init__(
        self,
        bedrock_client,
        citation_resolver: CitationResolver,
        settings: BedrockSettings,
        timeout: float = 60.0,
    ) -> None:
        """
        Initialize retrieval service.

        Args:
            bedrock_client: boto3 bedrock-agent-runtime client
            citation_resolver: Resolver used for returned citations
            settings: Knowledge base, model and inference parameters
            timeout: Upper bound in seconds for the upstream call
        """
        self._client = bedrock_client
        self._citation_resolver = citation_resolver
        self._settings = settings
        self._timeout = timeout

    async def invoke_retrieval(
        self,
        prompt: str,
        session_id: str | None = None,
    ) -> RetrievalResult:
        """
        Query the knowledge base and generate a grounded answer.

        Args:
            prompt: Sanitized prompt text
            session_id: Session identifier from a previous call, if any

        Returns:
            RetrievalResult: Upstream session ID, answer text, guardrail
                action and citations with signed URLs

        Raises:
            ValidationError: If session_id is outside the accepted format
            UpstreamServiceError: If Bedrock rejects or fails the call
            UpstreamTimeoutError: If the call exceeds the configured timeout
            MalformedReferenceError: If a citation reference has no valid S3 URI
        """
        if session_id and not is_valid_session_id(session_id):
            raise ValidationError(
                "Session ID must be 2-100 characters of [0-9A-Za-z._:-]",
                field="session_id",
            )

        logger.info(
            f"{__name__}:invoke_retrieval - START session_id={session_id}, "
            f"prompt={safe_log_value(prompt, max_length=80)!r}"
        )
        request = build_retrieve_and_generate_request(prompt, self._settings, session_id)

        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(self._client.retrieve_and_generate, **request),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"{__name__}:invoke_retrieval - timed out after {self._timeout}s")
            raise UpstreamTimeoutError("retrieve_and_generate", self._timeout) from e
        except ClientError as e:
            error = to_upstream_error(e)
            logger.error(f"{__name__}:invoke_retrieval - {error.message}")
            raise error from e
        except Exception as e:
            logger.error(
                f"{__name__}:invoke_retrieval - Error invoking AWS Bedrock retrieval: "
                f"{type(e).__name__}: {e}"
            )
            raise

        citations = [
            Citation.model_validate(citation)
            for citation in response.get("citations") or []
        ]
        resolved = await self._citation_resolver.resolve_citations(citations)

        # Only fields the upstream returned are set; the route drops unset ones.
        answer: dict[str, Any] = {
            "output": RetrievalOutput.model_validate(response.get("output") or {}),
            "citations": resolved,
        }
        if response.get("guardrailAction") is not None:
            answer["guardrail_action"] = response["guardrailAction"]
        fields: dict[str, Any] = {"response": RetrievalResponse(**answer)}
        if response.get("sessionId") is not None:
            fields["session_id"] = response["sessionId"]
        result = RetrievalResult(**fields)
        logger.info(
            f"{__name__}:invoke_retrieval - END session_id={result.session_id}, "
            f"citations={len(resolved)}"
        )
        return result
