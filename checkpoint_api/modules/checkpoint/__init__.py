"""Code checkpoint module: storage, filtering and similarity search."""

from .schemas import (
    CheckpointCreate,
    CheckpointRead,
    CheckpointSearchRequest,
    CheckpointSearchResponse,
    CheckpointStats,
    CheckpointUpdate,
)
from .services import CheckpointService

__all__ = [
    "CheckpointCreate",
    "CheckpointRead",
    "CheckpointSearchRequest",
    "CheckpointSearchResponse",
    "CheckpointService",
    "CheckpointStats",
    "CheckpointUpdate",
]
