"""
Daily check-in database model.

Defines the daily_checkins table for the user's daily self-report.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class DailyCheckin(SQLModel, table=True):
    """
    Daily check-in entry.

    Stores sleep, soreness, stress, mood and free-text notes.
    One entry per user per day (enforced by unique constraint).
    The wellness score is derived on read and never stored.
    """
    __tablename__ = "daily_checkins"
    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_checkin_user_date"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    sleep_hours: Optional[float] = Field(default=None)
    soreness: Optional[int] = Field(default=None)  # 1-5
    stress: Optional[int] = Field(default=None)  # 1-5
    mood: Optional[int] = Field(default=None)  # 1-5
    notes: str = Field(default="", max_length=2000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
