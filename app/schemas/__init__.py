"""Pydantic schemas for request/response validation."""

from app.schemas.token import Token
from app.schemas.user import UserCreate, UserLogin, UserResponse
from app.schemas.checkin import CheckinUpsert, CheckinResponse
from app.schemas.training_session import (
    ActivityPreset,
    TrainingCategory,
    TrainingSessionCreate,
    TrainingSessionResponse,
)
from app.schemas.insights import HistoryEntry, InsightsResponse, ScoreBreakdown

__all__ = [
    "Token",
    "UserCreate",
    "UserLogin",
    "UserResponse",
    "CheckinUpsert",
    "CheckinResponse",
    "ActivityPreset",
    "TrainingCategory",
    "TrainingSessionCreate",
    "TrainingSessionResponse",
    "HistoryEntry",
    "InsightsResponse",
    "ScoreBreakdown",
]
