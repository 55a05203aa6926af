"""Code checkpoint management and search service."""

from datetime import UTC, datetime, timedelta
from typing import List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.exc import NoResultFound
from sqlalchemy.ext.asyncio import AsyncSession

from ...infrastructure.config.settings import get_settings
from ...infrastructure.logging import get_logger
from .crud import checkpoint_crud
from .models import CodeCheckpoint
from .query import build_search_conditions, recency_order
from .schemas import (
    CheckpointCreate,
    CheckpointRead,
    CheckpointSearchRequest,
    CheckpointSearchResponse,
    CheckpointStats,
    CheckpointUpdate,
    LanguageCount,
    TagCount,
)
from .similarity import rank_by_similarity

logger = get_logger(__name__)

TOP_LANGUAGES = 5
TOP_TAGS = 8


class CheckpointService:
    """Service for storing, browsing and searching code checkpoints.

    Lookups by id never raise for unknown ids: reads and updates return
    ``None`` and deletes return ``False``. Storage errors propagate to the
    caller unchanged.
    """

    async def create_checkpoint(
        self,
        checkpoint_data: CheckpointCreate,
        db: AsyncSession,
    ) -> CheckpointRead:
        """Create a new checkpoint.

        Args:
            checkpoint_data: Checkpoint creation data
            db: Database session

        Returns:
            Created checkpoint with its id and timestamps
        """
        created_checkpoint = await checkpoint_crud.create(db=db, object=checkpoint_data)
        checkpoint = CheckpointRead.model_validate(created_checkpoint)

        logger.info(
            "Checkpoint created",
            extra={"checkpoint_id": checkpoint.id, "programming_language": checkpoint.programming_language},
        )
        return checkpoint

    async def get_checkpoint(
        self,
        checkpoint_id: int,
        db: AsyncSession,
    ) -> Optional[CheckpointRead]:
        """Get a checkpoint by id, or None if it does not exist."""
        checkpoint = await checkpoint_crud.get(db=db, id=checkpoint_id)
        if checkpoint is None:
            return None
        return CheckpointRead.model_validate(checkpoint)

    async def get_checkpoints(self, db: AsyncSession) -> List[CheckpointRead]:
        """Get every checkpoint, newest first."""
        stmt = select(CodeCheckpoint).order_by(*recency_order()).execution_options(populate_existing=True)
        result = await db.execute(stmt)
        return [CheckpointRead.model_validate(row) for row in result.scalars().all()]

    async def update_checkpoint(
        self,
        checkpoint_id: int,
        update_data: CheckpointUpdate,
        db: AsyncSession,
    ) -> Optional[CheckpointRead]:
        """Overwrite the fields supplied in ``update_data``.

        Fields left unset (or sent as null) keep their stored value. An update
        with no fields returns the current record unchanged.

        Args:
            checkpoint_id: Checkpoint ID to update
            update_data: Fields to overwrite
            db: Database session

        Returns:
            Updated checkpoint, or None if the id is unknown or the row
            disappeared before the write
        """
        update_dict = update_data.model_dump(exclude_unset=True, exclude_none=True)
        if not update_dict:
            return await self.get_checkpoint(checkpoint_id, db)

        try:
            await checkpoint_crud.update(db=db, object=update_dict, id=checkpoint_id)
        except NoResultFound:
            return None

        logger.info("Checkpoint updated", extra={"checkpoint_id": checkpoint_id, "fields": sorted(update_dict)})
        return await self.get_checkpoint(checkpoint_id, db)

    async def delete_checkpoint(
        self,
        checkpoint_id: int,
        db: AsyncSession,
    ) -> bool:
        """Delete a checkpoint.

        Returns:
            True if a checkpoint was deleted, False if none had this id
        """
        if not await checkpoint_crud.exists(db=db, id=checkpoint_id):
            return False

        try:
            await checkpoint_crud.delete(db=db, id=checkpoint_id)
        except NoResultFound:
            return False

        logger.info("Checkpoint deleted", extra={"checkpoint_id": checkpoint_id})
        return True

    async def search_checkpoints(
        self,
        search_request: CheckpointSearchRequest,
        db: AsyncSession,
    ) -> CheckpointSearchResponse:
        """Filter, order and paginate checkpoints.

        With a non-empty ``embedding`` the matching records are ranked by
        descending dot product with it; otherwise they are ordered newest
        first. ``total`` always counts every matching record, regardless of
        ``limit`` and ``offset``.

        Args:
            search_request: Filters, optional query vector and paging
            db: Database session

        Returns:
            One page of results with the total and whether more remain

        Raises:
            EmbeddingDimensionError: If the dimension policy is ``reject`` and
                a matching record's embedding differs in length from the query
        """
        conditions = build_search_conditions(search_request)
        offset, limit = search_request.offset, search_request.limit

        logger.debug(
            "Searching checkpoints",
            extra={
                "filter_count": len(conditions),
                "similarity_ordering": bool(search_request.embedding),
                "limit": limit,
                "offset": offset,
            },
        )

        if search_request.embedding:
            candidates = await db.execute(
                select(CodeCheckpoint.id, CodeCheckpoint.embedding).where(*conditions).order_by(*recency_order())
            )
            rows = candidates.all()
            total = len(rows)

            ranked_ids = rank_by_similarity(
                search_request.embedding,
                [(row.id, row.embedding) for row in rows],
                policy=get_settings().SIMILARITY_DIMENSION_POLICY,
            )
            results = await self._get_checkpoints_by_ids(ranked_ids[offset : offset + limit], db)
        else:
            count_result = await db.execute(select(func.count()).select_from(CodeCheckpoint).where(*conditions))
            total = count_result.scalar_one()

            page = await db.execute(
                select(CodeCheckpoint)
                .where(*conditions)
                .order_by(*recency_order())
                .offset(offset)
                .limit(limit)
                .execution_options(populate_existing=True)
            )
            results = [CheckpointRead.model_validate(row) for row in page.scalars().all()]

        return CheckpointSearchResponse(results=results, total=total, has_more=offset + limit < total)

    async def get_checkpoint_stats(self, db: AsyncSession) -> CheckpointStats:
        """Count checkpoints overall, per language, per tag and recently created."""
        total = await checkpoint_crud.count(db=db)

        language_count = func.count().label("count")
        language_rows = await db.execute(
            select(CodeCheckpoint.programming_language, language_count)
            .group_by(CodeCheckpoint.programming_language)
            .order_by(language_count.desc(), CodeCheckpoint.programming_language)
            .limit(TOP_LANGUAGES)
        )

        tags = select(func.unnest(CodeCheckpoint.tags).label("tag")).subquery()
        tag_count = func.count().label("count")
        tag_rows = await db.execute(
            select(tags.c.tag, tag_count).group_by(tags.c.tag).order_by(tag_count.desc(), tags.c.tag).limit(TOP_TAGS)
        )

        cutoff = datetime.now(UTC) - timedelta(days=get_settings().STATS_RECENT_DAYS)
        recent = await checkpoint_crud.count(db=db, created_at__gte=cutoff)

        return CheckpointStats(
            total_checkpoints=total,
            language_stats=[LanguageCount(language=row[0], count=row[1]) for row in language_rows.all()],
            tag_stats=[TagCount(tag=row[0], count=row[1]) for row in tag_rows.all()],
            recent_checkpoints=recent,
        )

    async def _get_checkpoints_by_ids(self, checkpoint_ids: Sequence[int], db: AsyncSession) -> List[CheckpointRead]:
        """Load checkpoints and return them in the order of ``checkpoint_ids``."""
        if not checkpoint_ids:
            return []

        stmt = (
            select(CodeCheckpoint)
            .where(CodeCheckpoint.id.in_(checkpoint_ids))
            .execution_options(populate_existing=True)
        )
        result = await db.execute(stmt)
        by_id = {checkpoint.id: checkpoint for checkpoint in result.scalars().all()}

        return [CheckpointRead.model_validate(by_id[i]) for i in checkpoint_ids if i in by_id]
