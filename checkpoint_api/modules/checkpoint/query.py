"""Predicate and ordering clauses for checkpoint searches."""

from typing import List, Sequence

from sqlalchemy import ColumnElement, Text, and_, func, or_
from sqlalchemy.sql.elements import UnaryExpression

from .models import CodeCheckpoint
from .schemas import CheckpointSearchRequest

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value is matched literally."""
    return value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2).replace("%", LIKE_ESCAPE + "%").replace("_", LIKE_ESCAPE + "_")


def keyword_condition(keyword: str) -> ColumnElement[bool]:
    """Match a keyword against title, summary or the tag list, ignoring case."""
    pattern = f"%{escape_like(keyword)}%"
    tag_text = func.array_to_string(CodeCheckpoint.tags, " ", type_=Text)
    return or_(
        CodeCheckpoint.title.ilike(pattern, escape=LIKE_ESCAPE),
        CodeCheckpoint.summary.ilike(pattern, escape=LIKE_ESCAPE),
        tag_text.ilike(pattern, escape=LIKE_ESCAPE),
    )


def tags_condition(tags: Sequence[str]) -> ColumnElement[bool]:
    """Match records holding at least one of the tags."""
    return CodeCheckpoint.tags.overlap(list(tags))


def build_search_conditions(request: CheckpointSearchRequest) -> List[ColumnElement[bool]]:
    """Translate search filters into WHERE clauses.

    Each filter category contributes at most one clause and the clauses are
    meant to be ANDed. An empty list means every record matches.

    Args:
        request: Search filters

    Returns:
        Clauses for language, tags and keywords, in that order, when supplied
    """
    conditions: List[ColumnElement[bool]] = []

    if request.programming_language is not None:
        conditions.append(CodeCheckpoint.programming_language == request.programming_language)

    if request.tags:
        conditions.append(tags_condition(request.tags))

    if request.keywords:
        conditions.append(and_(*[keyword_condition(keyword) for keyword in request.keywords]))

    return conditions


def recency_order() -> List[UnaryExpression]:
    """Newest first; later inserts win ties on created_at."""
    return [CodeCheckpoint.created_at.desc(), CodeCheckpoint.id.desc()]
