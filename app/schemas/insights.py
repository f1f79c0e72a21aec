"""
Insights schemas.

Score breakdown for a single day and the insights summary
(today's score, streak and the recent history window).
"""

import datetime

from pydantic import BaseModel, Field


class ScoreBreakdown(BaseModel):
    """Wellness score for one day, with its components."""

    score: int = Field(..., ge=0, le=100, description="Total score, 0-100")
    health: int = Field(..., ge=0, le=40, description="Sleep + soreness, 0-40")
    mind: int = Field(..., ge=0, le=30, description="Mood + stress, 0-30")
    finance: int = Field(..., ge=0, le=30, description="Finance component (fixed)")
    flags: list[str] = Field(default_factory=list, description="Warnings, e.g. 'Low sleep'")


class HistoryEntry(BaseModel):
    """One day of the history window."""

    date: datetime.date
    score: int = Field(..., ge=0, le=100)


class InsightsResponse(BaseModel):
    """Insights summary returned by the insights endpoint."""

    email: str
    as_of: datetime.date
    today: ScoreBreakdown
    streak: int = Field(..., ge=0, description="Consecutive days logged, ending today")
    history_days: int = Field(..., description="Size of the history window in days")
    history: list[HistoryEntry] = Field(
        default_factory=list,
        description="Check-ins in the window, most recent first",
    )
    training_load_today: float = Field(0.0, ge=0.0, description="Sum of session loads on as_of")
    training_sessions_today: int = Field(0, ge=0)
