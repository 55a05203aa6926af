"""Dot-product ranking of checkpoints against a query vector."""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from ...infrastructure.config.settings import DimensionPolicy
from ..common.exceptions import EmbeddingDimensionError


def dot_product_scores(query: Sequence[float], embeddings: Sequence[Sequence[float]]) -> List[Optional[float]]:
    """Score each embedding by its dot product with the query.

    Embeddings whose length differs from the query's get ``None``: a dot
    product between vectors of different dimension is undefined.

    Args:
        query: Query vector
        embeddings: Stored vectors, scored in the given order

    Returns:
        One score (or None) per embedding
    """
    query_vec = np.asarray(query, dtype=np.float64)
    dimension = query_vec.shape[0]

    scores: List[Optional[float]] = [None] * len(embeddings)
    comparable = [i for i, embedding in enumerate(embeddings) if len(embedding) == dimension]

    if comparable:
        matrix = np.asarray([embeddings[i] for i in comparable], dtype=np.float64)
        for i, value in zip(comparable, matrix @ query_vec):
            scores[i] = float(value)

    return scores


def rank_by_similarity(
    query: Sequence[float],
    candidates: Sequence[Tuple[int, Sequence[float]]],
    policy: DimensionPolicy = DimensionPolicy.RANK_LAST,
) -> List[int]:
    """Order checkpoint ids by descending dot product with the query.

    ``candidates`` must already be in recency order: the sort is stable, so
    equal scores keep that order, and so do unscored candidates placed after
    the scored ones.

    Args:
        query: Non-empty query vector
        candidates: ``(checkpoint_id, embedding)`` pairs in recency order
        policy: What to do with embeddings of a different dimension

    Returns:
        Checkpoint ids, best match first

    Raises:
        EmbeddingDimensionError: If policy is REJECT and any embedding
            length differs from the query length
    """
    scores = dot_product_scores(query, [embedding for _, embedding in candidates])

    scored: List[Tuple[int, float]] = []
    unscored: List[int] = []
    for (checkpoint_id, embedding), score in zip(candidates, scores):
        if score is None:
            if policy == DimensionPolicy.REJECT:
                raise EmbeddingDimensionError(checkpoint_id, expected=len(query), actual=len(embedding))
            unscored.append(checkpoint_id)
        else:
            scored.append((checkpoint_id, score))

    scored.sort(key=lambda item: item[1], reverse=True)

    return [checkpoint_id for checkpoint_id, _ in scored] + unscored
