"""Code checkpoint API endpoints."""

from typing import List

from fastapi import APIRouter, Depends, status

from ....infrastructure.logging import get_logger
from ....modules.checkpoint.schemas import (
    CheckpointCreate,
    CheckpointDeleteResponse,
    CheckpointRead,
    CheckpointSearchRequest,
    CheckpointSearchResponse,
    CheckpointStats,
    CheckpointUpdate,
)
from ....modules.checkpoint.services import CheckpointService
from ....modules.common.exceptions import CheckpointNotFoundError
from ....modules.common.utils.error_handler import handle_exception
from ....modules.embedding.services import EmbeddingSearchService
from ..dependencies import DbSession, get_checkpoint_service, get_embedding_search_service

logger = get_logger(__name__)

router = APIRouter(prefix="/checkpoint", tags=["Checkpoints"])


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    summary="Create Checkpoint",
    description="""
    Stores a new code checkpoint.

    - **title**, **summary**, **code_snippet**, **user_feedback**, **programming_language**: non-empty text
    - **tags**: optional list of tags (default: empty)
    - **embedding**: non-empty numeric vector used for similarity ordering
    """,
    responses={
        201: {"description": "Checkpoint created successfully"},
        422: {"description": "Missing or invalid fields"},
    },
)
async def create_checkpoint(
    checkpoint_data: CheckpointCreate,
    db: DbSession,
    checkpoint_service: CheckpointService = Depends(get_checkpoint_service),
) -> CheckpointRead:
    """Create a new checkpoint."""
    try:
        return await checkpoint_service.create_checkpoint(checkpoint_data, db)
    except Exception as e:
        raise handle_exception(e, logger)


@router.get(
    "/",
    summary="List Checkpoints",
    description="Returns every checkpoint, newest first.",
    responses={200: {"description": "All checkpoints"}},
)
async def get_checkpoints(
    db: DbSession,
    checkpoint_service: CheckpointService = Depends(get_checkpoint_service),
) -> List[CheckpointRead]:
    """List all checkpoints."""
    try:
        return await checkpoint_service.get_checkpoints(db)
    except Exception as e:
        raise handle_exception(e, logger)


@router.get(
    "/stats",
    summary="Checkpoint Statistics",
    description="""
    Aggregate figures over all checkpoints: total count, the five most used
    languages, the eight most used tags and how many checkpoints were
    created recently.
    """,
    responses={200: {"description": "Checkpoint statistics"}},
)
async def get_checkpoint_stats(
    db: DbSession,
    checkpoint_service: CheckpointService = Depends(get_checkpoint_service),
) -> CheckpointStats:
    """Get checkpoint statistics."""
    try:
        return await checkpoint_service.get_checkpoint_stats(db)
    except Exception as e:
        raise handle_exception(e, logger)


@router.post(
    "/search",
    summary="Search Checkpoints",
    description="""
    Filters checkpoints and returns one page of results.

    - **keywords**: every keyword must appear (case-insensitively) in the title, summary or tags
    - **programming_language**: exact language match
    - **tags**: checkpoints carrying any of these tags
    - **embedding**: rank by descending dot product with this vector instead of newest first
    - **query**: free text; embedded into **embedding** when query embedding is enabled
    - **limit** / **offset**: paging (defaults 20 / 0)

    The response holds the page, the total number of matches and whether
    more results follow.
    """,
    responses={
        200: {"description": "Page of matching checkpoints"},
        422: {"description": "Invalid search parameters or incompatible embedding dimension"},
    },
)
async def search_checkpoints(
    search_request: CheckpointSearchRequest,
    db: DbSession,
    search_service: EmbeddingSearchService = Depends(get_embedding_search_service),
) -> CheckpointSearchResponse:
    """Search checkpoints."""
    try:
        return await search_service.search(search_request, db)
    except Exception as e:
        raise handle_exception(e, logger)


@router.get(
    "/{checkpoint_id}",
    summary="Get Checkpoint",
    description="Retrieves a single checkpoint by ID.",
    responses={
        200: {"description": "Checkpoint details"},
        404: {"description": "Checkpoint not found"},
    },
)
async def get_checkpoint(
    checkpoint_id: int,
    db: DbSession,
    checkpoint_service: CheckpointService = Depends(get_checkpoint_service),
) -> CheckpointRead:
    """Get a specific checkpoint by ID."""
    try:
        result = await checkpoint_service.get_checkpoint(checkpoint_id, db)
        if result is None:
            raise CheckpointNotFoundError()
        return result
    except Exception as e:
        raise handle_exception(e, logger)


@router.put(
    "/{checkpoint_id}",
    summary="Update Checkpoint",
    description="""
    Partially updates a checkpoint: only the fields present in the body are
    written. An empty body returns the checkpoint unchanged. The ID and
    creation time cannot be changed.
    """,
    responses={
        200: {"description": "Checkpoint updated successfully"},
        404: {"description": "Checkpoint not found"},
        422: {"description": "Invalid update data"},
    },
)
async def update_checkpoint(
    checkpoint_id: int,
    update_data: CheckpointUpdate,
    db: DbSession,
    checkpoint_service: CheckpointService = Depends(get_checkpoint_service),
) -> CheckpointRead:
    """Update a checkpoint."""
    try:
        result = await checkpoint_service.update_checkpoint(checkpoint_id, update_data, db)
        if result is None:
            raise CheckpointNotFoundError()
        return result
    except Exception as e:
        raise handle_exception(e, logger)


@router.delete(
    "/{checkpoint_id}",
    summary="Delete Checkpoint",
    description="""
    Deletes a checkpoint. Deleting an unknown ID is not an error: the
    response reports `deleted: false`.
    """,
    responses={200: {"description": "Whether a checkpoint was deleted"}},
)
async def delete_checkpoint(
    checkpoint_id: int,
    db: DbSession,
    checkpoint_service: CheckpointService = Depends(get_checkpoint_service),
) -> CheckpointDeleteResponse:
    """Delete a checkpoint."""
    try:
        deleted = await checkpoint_service.delete_checkpoint(checkpoint_id, db)
        return CheckpointDeleteResponse(deleted=deleted)
    except Exception as e:
        raise handle_exception(e, logger)
