"""
Training session database model.

Append-only log of training sessions.  ``load`` is computed at insert
time as ``duration_min * rpe`` and stored for cheap aggregation.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class TrainingSession(SQLModel, table=True):
    """A single training session.

    ``activity`` is either one of the preset activity names or a
    lower-cased custom activity.  ``category`` is one of the
    :class:`~app.schemas.training_session.TrainingCategory` values.
    """

    __tablename__ = "training_sessions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    activity: str = Field(nullable=False, max_length=100)
    category: str = Field(nullable=False, max_length=20)
    duration_min: float = Field(nullable=False)
    rpe: float = Field(nullable=False)
    load: float = Field(nullable=False)
    notes: str = Field(default="", max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
