"""Embedding infrastructure for text-to-vector conversion."""

from .base import EmbeddingProvider
from .service import SentenceTransformerEmbeddingProvider, get_embedding_provider

__all__ = ["EmbeddingProvider", "SentenceTransformerEmbeddingProvider", "get_embedding_provider"]
