"""SQLModel database models."""

from app.models.user import User
from app.models.checkin import DailyCheckin
from app.models.training_session import TrainingSession
from app.models.revoked_token import RevokedToken

__all__ = [
    "User",
    "DailyCheckin",
    "TrainingSession",
    "RevokedToken",
]
