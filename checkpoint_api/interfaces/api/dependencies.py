"""FastAPI dependencies for use in API endpoints."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.database.session import async_session
from ...modules.checkpoint.services import CheckpointService
from ...modules.embedding.services import EmbeddingInfoService, EmbeddingSearchService

DbSession = Annotated[AsyncSession, Depends(async_session)]


def get_checkpoint_service() -> CheckpointService:
    """Dependency for providing a CheckpointService instance."""
    return CheckpointService()


def get_embedding_search_service() -> EmbeddingSearchService:
    """Dependency for providing an EmbeddingSearchService instance."""
    return EmbeddingSearchService()


def get_embedding_info_service() -> EmbeddingInfoService:
    """Dependency for providing an EmbeddingInfoService instance."""
    return EmbeddingInfoService()
