"""Schemas shared by several modules."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class TimestampSchema(BaseModel):
    """Timestamps maintained by the database layer."""

    created_at: datetime
    updated_at: Optional[datetime] = None
