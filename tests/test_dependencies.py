"""
Test suite for dependency injection container.

Tests ServiceCache construction and reuse of AWS clients and services.

System role: Verification of DI container
"""

from unittest.mock import MagicMock, patch

import pytest

from inference_relay.api.deps import (
    get_agent_service,
    get_retrieval_service,
    get_service_cache,
)
from inference_relay.api.deps.dependencies import ServiceCache
from inference_relay.application.services import AgentService, RetrievalService
from inference_relay.configs.bedrock import BedrockSettings
from inference_relay.configs.server import ServerSettings
from inference_relay.configs.settings import Settings


@pytest.fixture
def settings() -> Settings:
    """Provide settings with fixed Bedrock identifiers."""
    return Settings(
        bedrock=BedrockSettings(agent_id="AGENT", agent_alias_id="ALIAS"),
        server=ServerSettings(request_timeout_seconds=5),
    )


@pytest.fixture
def cache(settings: Settings):
    """Provide ServiceCache with boto3 construction patched out."""
    with patch(
        "inference_relay.api.deps.dependencies.build_boto3_session"
    ) as mock_session, patch(
        "inference_relay.api.deps.dependencies.build_bedrock_agent_runtime_client"
    ) as mock_bedrock:
        mock_session.return_value = MagicMock()
        mock_bedrock.return_value = MagicMock()
        yield ServiceCache(settings=settings)


class TestServiceCache:
    """Test suite for ServiceCache."""

    def test_agent_service_should_be_built_once(self, cache: ServiceCache) -> None:
        service = cache.agent_service

        assert isinstance(service, AgentService)
        assert cache.agent_service is service

    def test_services_should_share_bedrock_client(self, cache: ServiceCache) -> None:
        assert cache.agent_service._client is cache.retrieval_service._client

    def test_retrieval_service_should_use_configured_timeout(
        self, cache: ServiceCache
    ) -> None:
        service = cache.retrieval_service

        assert isinstance(service, RetrievalService)
        assert service._timeout == 5

    def test_clear_should_drop_cached_instances(self, cache: ServiceCache) -> None:
        first = cache.agent_service

        cache.clear()

        assert cache.agent_service is not first


def test_get_service_cache_is_singleton() -> None:
    assert get_service_cache() is get_service_cache()


def test_dependency_factories_read_from_cache() -> None:
    cache = get_service_cache()
    agent_service = MagicMock(spec=AgentService)
    retrieval_service = MagicMock(spec=RetrievalService)

    with patch.object(ServiceCache, "agent_service", agent_service), patch.object(
        ServiceCache, "retrieval_service", retrieval_service
    ):
        assert get_agent_service() is agent_service
        assert get_retrieval_service() is retrieval_service
    assert cache is get_service_cache()
