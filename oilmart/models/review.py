# oilmart/models/review.py
import uuid
from datetime import datetime

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field


class Reviewer(SQLModel):
    """Embedded `profiles` row of a review's author."""

    model_config = ConfigDict(extra="forbid")

    full_name: str | None = None


class Review(SQLModel):
    """Row of the `reviews` table with its author's display name."""

    model_config = ConfigDict(extra="forbid")

    id: uuid.UUID
    rating: int = Field(ge=0, le=5)
    comment: str | None = None
    created_at: datetime
    profile: Reviewer | None = None


REVIEW_COLUMNS = "id, rating, comment, created_at, profile:profiles(full_name)"
