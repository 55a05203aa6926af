"""Tests for the embedding-aware services."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from checkpoint_api.modules.checkpoint.schemas import CheckpointSearchRequest, CheckpointSearchResponse
from checkpoint_api.modules.checkpoint.services import CheckpointService
from checkpoint_api.modules.embedding.services import EmbeddingInfoService, EmbeddingSearchService


@pytest.fixture
def mock_provider():
    provider = MagicMock()
    provider.model_name = "test-model"
    provider.embedding_dimension = None
    provider.is_loaded = AsyncMock(return_value=False)
    provider.embed_text = AsyncMock(return_value=[0.5, 0.5, 0.5])
    return provider


@pytest.fixture
def mock_checkpoint_service():
    service = MagicMock(spec=CheckpointService)
    service.search_checkpoints = AsyncMock(
        return_value=CheckpointSearchResponse(results=[], total=0, has_more=False)
    )
    return service


class TestEmbeddingSearchService:
    """Query embedding before search."""

    @pytest.mark.asyncio
    async def test_query_is_embedded_when_enabled(self, mock_provider, mock_checkpoint_service):
        service = EmbeddingSearchService(mock_checkpoint_service, mock_provider, query_embedding_enabled=True)
        request = CheckpointSearchRequest(query="pandas groupby", tags=["python"])

        prepared = await service.prepare_request(request)

        assert prepared.embedding == [0.5, 0.5, 0.5]
        assert prepared.tags == ["python"]
        assert request.embedding is None
        mock_provider.embed_text.assert_awaited_once_with("pandas groupby")

    @pytest.mark.asyncio
    async def test_query_not_embedded_when_disabled(self, mock_provider, mock_checkpoint_service):
        service = EmbeddingSearchService(mock_checkpoint_service, mock_provider, query_embedding_enabled=False)
        request = CheckpointSearchRequest(query="pandas groupby")

        prepared = await service.prepare_request(request)

        assert prepared is request
        mock_provider.embed_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_explicit_embedding_wins(self, mock_provider, mock_checkpoint_service):
        service = EmbeddingSearchService(mock_checkpoint_service, mock_provider, query_embedding_enabled=True)
        request = CheckpointSearchRequest(query="pandas", embedding=[1.0, 0.0])

        prepared = await service.prepare_request(request)

        assert prepared.embedding == [1.0, 0.0]
        mock_provider.embed_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_query_not_embedded(self, mock_provider, mock_checkpoint_service):
        service = EmbeddingSearchService(mock_checkpoint_service, mock_provider, query_embedding_enabled=True)

        prepared = await service.prepare_request(CheckpointSearchRequest(query="   "))

        assert prepared.embedding is None
        mock_provider.embed_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_search_delegates_prepared_request(self, mock_provider, mock_checkpoint_service):
        service = EmbeddingSearchService(mock_checkpoint_service, mock_provider, query_embedding_enabled=True)
        db = MagicMock()

        result = await service.search(CheckpointSearchRequest(query="hooks", limit=5), db)

        assert result.total == 0
        sent_request, sent_db = mock_checkpoint_service.search_checkpoints.await_args.args
        assert sent_request.embedding == [0.5, 0.5, 0.5]
        assert sent_request.limit == 5
        assert sent_db is db


class TestEmbeddingInfoService:
    @pytest.mark.asyncio
    async def test_info_before_load(self, mock_provider):
        info = await EmbeddingInfoService(mock_provider).get_embedding_info()

        assert info.model_name == "test-model"
        assert info.dimension is None
        assert info.is_loaded is False
