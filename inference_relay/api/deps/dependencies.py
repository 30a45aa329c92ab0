"""
Dependency injection container.

Factory functions for FastAPI dependencies. AWS clients are built once per
process and shared by the services; services themselves hold no request
state.

Dependencies: inference_relay.configs, inference_relay.application, inference_relay.boundary
System role: DI container for service injection
"""

from inference_relay.application.services import AgentService, RetrievalService
from inference_relay.boundary.aws import (
    S3DocumentClient,
    build_bedrock_agent_runtime_client,
    build_boto3_session,
)
from inference_relay.configs import Settings, get_settings
from inference_relay.core.citation_resolver import CitationResolver


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings
        self._boto3_session = None
        self._bedrock_client = None
        self._s3_client = None
        self._agent_service = None
        self._retrieval_service = None

    @property
    def settings(self) -> Settings:
        """Get settings (process-wide singleton unless injected)."""
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def boto3_session(self):
        """Get cached boto3 session."""
        if self._boto3_session is None:
            self._boto3_session = build_boto3_session(self.settings.aws)
        return self._boto3_session

    @property
    def bedrock_client(self):
        """Get cached bedrock-agent-runtime client."""
        if self._bedrock_client is None:
            self._bedrock_client = build_bedrock_agent_runtime_client(
                self.settings.aws, session=self.boto3_session
            )
        return self._bedrock_client

    @property
    def s3_client(self) -> S3DocumentClient:
        """Get cached S3 document client."""
        if self._s3_client is None:
            self._s3_client = S3DocumentClient.from_settings(
                self.settings.aws, session=self.boto3_session
            )
        return self._s3_client

    @property
    def agent_service(self) -> AgentService:
        """Get cached agent service."""
        if self._agent_service is None:
            bedrock = self.settings.bedrock
            self._agent_service = AgentService(
                bedrock_client=self.bedrock_client,
                agent_id=bedrock.agent_id,
                agent_alias_id=bedrock.agent_alias_id,
                timeout=self.settings.server.request_timeout_seconds,
            )
        return self._agent_service

    @property
    def retrieval_service(self) -> RetrievalService:
        """Get cached retrieval service."""
        if self._retrieval_service is None:
            resolver = CitationResolver(
                s3_client=self.s3_client,
                expires_in=self.settings.s3_documents.presigned_url_expiry,
            )
            self._retrieval_service = RetrievalService(
                bedrock_client=self.bedrock_client,
                citation_resolver=resolver,
                settings=self.settings.bedrock,
                timeout=self.settings.server.request_timeout_seconds,
            )
        return self._retrieval_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._boto3_session = None
        self._bedrock_client = None
        self._s3_client = None
        self._agent_service = None
        self._retrieval_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_agent_service() -> AgentService:
    """
    Get agent service instance.

    Returns:
        AgentService: Service bound to the configured agent alias
    """
    return get_service_cache().agent_service


def get_retrieval_service() -> RetrievalService:
    """
    Get retrieval service instance.

    Returns:
        RetrievalService: Service bound to the configured knowledge base
    """
    return get_service_cache().retrieval_service
