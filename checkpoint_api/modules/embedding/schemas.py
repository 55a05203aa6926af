"""Schemas for embedding-backed operations."""

from typing import Optional

from pydantic import BaseModel, Field


class EmbeddingInfo(BaseModel):
    """Information about the embedding provider."""

    model_name: str = Field(description="Name of the embedding model")
    dimension: Optional[int] = Field(default=None, description="Embedding dimension, known once the model is loaded")
    is_loaded: bool = Field(description="Whether the model is loaded in memory")
    query_embedding_enabled: bool = Field(description="Whether search queries are embedded automatically")
