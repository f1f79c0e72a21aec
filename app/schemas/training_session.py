"""
Training session API schemas.

Activity is chosen from a preset list; picking ``other`` lets the user
type a custom activity name.  The session load is computed server-side.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ActivityPreset(str, Enum):
    """Preset activities offered by the quick activity log."""

    STRENGTH = "strength"
    CARDIO = "cardio"
    SPORT_PRACTICE = "sport_practice"
    MOBILITY = "mobility"
    OTHER = "other"


class TrainingCategory(str, Enum):
    """Session category (intent of the session)."""

    EASY = "easy"
    MODERATE = "moderate"
    HARD = "hard"
    RECOVERY = "recovery"
    COMPETITION = "competition"


class TrainingSessionCreate(BaseModel):
    """Schema for logging a training session."""

    activity: ActivityPreset = Field(
        ActivityPreset.STRENGTH,
        description="Preset activity; use 'other' together with custom_activity",
    )
    custom_activity: Optional[str] = Field(
        None, max_length=100,
        description="Free-text activity name, used only when activity is 'other'",
    )
    category: TrainingCategory = Field(
        TrainingCategory.MODERATE,
        description="Session category",
    )
    duration_min: float = Field(
        ..., description="Session duration in minutes (> 0)",
    )
    rpe: float = Field(
        ..., description="Rating of perceived exertion, 1-10",
    )
    notes: str = Field(
        "", max_length=1000, description="Optional session notes",
    )

    @field_validator("duration_min")
    @classmethod
    def _check_duration(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Duration must be > 0.")
        return v

    @field_validator("rpe")
    @classmethod
    def _check_rpe(cls, v: float) -> float:
        if v < 1 or v > 10:
            raise ValueError("RPE must be 1-10.")
        return v

    def resolve_activity(self) -> str:
        """Activity name to store: the preset, or the cleaned custom name for ``other``."""
        if self.activity is not ActivityPreset.OTHER:
            return self.activity.value
        custom = (self.custom_activity or "").strip()
        return custom.lower() if custom else ActivityPreset.OTHER.value


class TrainingSessionResponse(BaseModel):
    """Schema for training session in API responses."""

    id: int
    user_id: int
    date: datetime.date
    activity: str
    category: TrainingCategory
    duration_min: float
    rpe: float
    load: float
    notes: str
    created_at: datetime.datetime

    class Config:
        from_attributes = True
