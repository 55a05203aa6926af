"""SQLAlchemy models for code checkpoint entities."""

from typing import List

from sqlalchemy import Float, Integer, Text, text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from ...infrastructure.database.models import TimestampMixin
from ...infrastructure.database.session import Base


class CodeCheckpoint(Base, TimestampMixin):
    """A stored code snippet with feedback, tags and an embedding vector.

    ``id`` grows with insertion order and doubles as the recency tiebreak.
    ``tags`` keeps order and duplicates; ``embedding`` has no fixed dimension.
    """

    __tablename__ = "code_checkpoints"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True, init=False)
    title: Mapped[str] = mapped_column(Text)
    summary: Mapped[str] = mapped_column(Text)
    code_snippet: Mapped[str] = mapped_column(Text)
    user_feedback: Mapped[str] = mapped_column(Text)
    programming_language: Mapped[str] = mapped_column(Text, index=True)
    embedding: Mapped[List[float]] = mapped_column(ARRAY(Float))
    tags: Mapped[List[str]] = mapped_column(ARRAY(Text), default_factory=list, server_default=text("'{}'"))
