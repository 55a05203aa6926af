"""Services that add embedding capabilities on top of the checkpoint service."""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.config.settings import get_settings
from ...infrastructure.embedding import EmbeddingProvider, get_embedding_provider
from ...infrastructure.logging import get_logger
from ..checkpoint.schemas import CheckpointSearchRequest, CheckpointSearchResponse
from ..checkpoint.services import CheckpointService
from .schemas import EmbeddingInfo

logger = get_logger(__name__)


class EmbeddingSearchService:
    """Checkpoint search that embeds free-text queries before searching.

    When a request carries a ``query`` but no ``embedding`` and query
    embedding is enabled, the provider's vector for the query becomes the
    request's embedding, which switches the search to similarity ordering.
    Every other request is passed through unchanged.
    """

    def __init__(
        self,
        checkpoint_service: Optional[CheckpointService] = None,
        embedding_provider: Optional[EmbeddingProvider] = None,
        query_embedding_enabled: Optional[bool] = None,
    ):
        self.checkpoint_service = checkpoint_service or CheckpointService()
        self._embedding_provider = embedding_provider
        if query_embedding_enabled is None:
            query_embedding_enabled = get_settings().QUERY_EMBEDDING_ENABLED
        self.query_embedding_enabled = query_embedding_enabled

    @property
    def embedding_provider(self) -> EmbeddingProvider:
        if self._embedding_provider is None:
            self._embedding_provider = get_embedding_provider()
        return self._embedding_provider

    async def prepare_request(self, search_request: CheckpointSearchRequest) -> CheckpointSearchRequest:
        """Return the request the checkpoint search should run."""
        if search_request.embedding or not self.query_embedding_enabled:
            return search_request
        if not search_request.query or not search_request.query.strip():
            return search_request

        embedding = await self.embedding_provider.embed_text(search_request.query)
        logger.debug("Embedded search query", extra={"dimension": len(embedding)})

        return search_request.model_copy(update={"embedding": embedding})

    async def search(self, search_request: CheckpointSearchRequest, db: AsyncSession) -> CheckpointSearchResponse:
        """Search checkpoints, embedding the free-text query when needed."""
        prepared_request = await self.prepare_request(search_request)
        return await self.checkpoint_service.search_checkpoints(prepared_request, db)


class EmbeddingInfoService:
    """Service for embedding provider information."""

    def __init__(self, embedding_provider: Optional[EmbeddingProvider] = None):
        self.embedding_provider = embedding_provider or get_embedding_provider()

    async def get_embedding_info(self) -> EmbeddingInfo:
        """Get information about the embedding provider."""
        return EmbeddingInfo(
            model_name=self.embedding_provider.model_name,
            dimension=self.embedding_provider.embedding_dimension,
            is_loaded=await self.embedding_provider.is_loaded(),
            query_embedding_enabled=get_settings().QUERY_EMBEDDING_ENABLED,
        )
