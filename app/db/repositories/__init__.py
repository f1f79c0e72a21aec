"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.checkin import CheckinRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.db.repositories.revoked_token import RevokedTokenRepository

__all__ = [
    "UserRepository",
    "CheckinRepository",
    "TrainingSessionRepository",
    "RevokedTokenRepository",
]
