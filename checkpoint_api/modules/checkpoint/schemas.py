"""Pydantic schemas for code checkpoint entities."""

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field, FiniteFloat, field_validator

from ...infrastructure.config.settings import get_settings
from ..common.schemas import TimestampSchema

NonEmptyStr = Annotated[str, Field(min_length=1)]


class CheckpointBase(BaseModel):
    """Base schema for checkpoint data."""

    title: Annotated[str, Field(min_length=1, description="Short title of the checkpoint")]
    summary: Annotated[str, Field(min_length=1, description="What the code does")]
    code_snippet: Annotated[str, Field(min_length=1, description="The code itself")]
    user_feedback: Annotated[str, Field(min_length=1, description="Feedback recorded for the code")]
    programming_language: Annotated[str, Field(min_length=1, description="Language of the snippet, e.g. Python")]
    tags: List[str] = Field(default_factory=list, description="Tags used for filtering")
    embedding: Annotated[List[FiniteFloat], Field(description="Numeric embedding used for similarity ordering")]


class CheckpointCreate(CheckpointBase):
    """Schema for creating a new checkpoint."""

    @field_validator("embedding")
    @classmethod
    def validate_embedding(cls, v: List[FiniteFloat]) -> List[FiniteFloat]:
        if not v:
            raise ValueError("Embedding cannot be empty")
        return v


class CheckpointUpdate(BaseModel):
    """Schema for updating an existing checkpoint.

    Only fields present in the request are written. ``id`` and ``created_at``
    are not accepted.
    """

    model_config = ConfigDict(extra="forbid")

    title: Optional[NonEmptyStr] = None
    summary: Optional[NonEmptyStr] = None
    code_snippet: Optional[NonEmptyStr] = None
    user_feedback: Optional[NonEmptyStr] = None
    programming_language: Optional[NonEmptyStr] = None
    tags: Optional[List[str]] = None
    embedding: Optional[List[FiniteFloat]] = None

    @field_validator("embedding")
    @classmethod
    def validate_embedding(cls, v: Optional[List[FiniteFloat]]) -> Optional[List[FiniteFloat]]:
        if v is not None and not v:
            raise ValueError("Embedding cannot be empty")
        return v


class CheckpointRead(TimestampSchema, CheckpointBase):
    """Schema for reading checkpoint data."""

    model_config = ConfigDict(from_attributes=True)

    id: int


class CheckpointSearchRequest(BaseModel):
    """Filters, ordering input and paging for a checkpoint search.

    Categories are ANDed together; values inside ``tags`` are ORed; every
    keyword must match the title, summary or tags of a record.
    """

    query: Optional[str] = Field(default=None, description="Free-text query; requests semantic ordering")
    keywords: Optional[List[str]] = Field(default=None, description="Case-insensitive substrings, all must match")
    programming_language: Optional[str] = Field(default=None, description="Exact language match")
    tags: Optional[List[str]] = Field(default=None, description="Records containing any of these tags")
    embedding: Optional[List[FiniteFloat]] = Field(default=None, description="Query vector for dot-product ordering")
    limit: int = Field(
        default_factory=lambda: get_settings().SEARCH_DEFAULT_LIMIT, ge=0, description="Maximum number of results"
    )
    offset: int = Field(default=0, ge=0, description="Number of results to skip")

    @field_validator("keywords")
    @classmethod
    def drop_blank_keywords(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        if v is None:
            return v
        return [keyword for keyword in v if keyword.strip()]


class CheckpointSearchResponse(BaseModel):
    """Page envelope returned by a checkpoint search."""

    results: List[CheckpointRead]
    total: int = Field(description="Number of records matching the filters")
    has_more: bool = Field(description="Whether records exist past this page")


class CheckpointDeleteResponse(BaseModel):
    """Outcome of a delete request."""

    deleted: bool


class LanguageCount(BaseModel):
    language: str
    count: int


class TagCount(BaseModel):
    tag: str
    count: int


class CheckpointStats(BaseModel):
    """Aggregate figures over all stored checkpoints."""

    total_checkpoints: int
    language_stats: List[LanguageCount]
    tag_stats: List[TagCount]
    recent_checkpoints: int = Field(description="Checkpoints created within the recent window")
