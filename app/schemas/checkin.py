"""
Daily check-in API schemas.

Every metric is optional; a check-in may be saved partially filled
in and completed later the same day.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field


class CheckinBase(BaseModel):
    """Fields shared by check-in requests and responses."""

    sleep_hours: Optional[float] = Field(
        None, ge=0.0, le=24.0,
        description="Hours slept last night",
    )
    soreness: Optional[int] = Field(
        None, ge=1, le=5,
        description="Muscle soreness, 1 (none) to 5 (severe)",
    )
    stress: Optional[int] = Field(
        None, ge=1, le=5,
        description="Perceived stress, 1 (calm) to 5 (very stressed)",
    )
    mood: Optional[int] = Field(
        None, ge=1, le=5,
        description="Mood, 1 (low) to 5 (great)",
    )
    notes: str = Field(
        "", max_length=2000,
        description="Free-text notes",
    )


# Request schemas
class CheckinUpsert(CheckinBase):
    """Schema for saving the check-in of a date.  Replaces the stored record."""
    pass


# Response schemas
class CheckinResponse(CheckinBase):
    """Schema for check-in data in API responses."""
    id: int
    user_id: int
    date: datetime.date
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
