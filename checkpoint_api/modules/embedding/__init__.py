"""Embedding module for text-to-vector search operations."""

from .schemas import EmbeddingInfo
from .services import EmbeddingInfoService, EmbeddingSearchService

__all__ = [
    "EmbeddingInfo",
    "EmbeddingInfoService",
    "EmbeddingSearchService",
]
