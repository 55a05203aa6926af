"""Embedding provider API endpoints."""

from fastapi import APIRouter, Depends

from ....modules.embedding import EmbeddingInfo, EmbeddingInfoService
from ..dependencies import get_embedding_info_service

router = APIRouter(prefix="/embedding", tags=["Embedding"])


@router.get(
    "/info",
    summary="Get Embedding Model Information",
    description="""Information about the model used to embed free-text search queries.

    Reports the model name, whether it has been loaded, its embedding
    dimension once loaded, and whether search queries are embedded
    automatically.
    """,
    responses={
        200: {"description": "Embedding model information returned successfully"},
    },
)
async def get_embedding_info(service: EmbeddingInfoService = Depends(get_embedding_info_service)) -> EmbeddingInfo:
    """Get information about the embedding model."""
    return await service.get_embedding_info()
