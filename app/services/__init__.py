"""Business logic services."""

from app.services.user_service import UserService
from app.services.checkin_service import CheckinService
from app.services.training_session_service import TrainingSessionService
from app.services.insights_service import InsightsService

__all__ = [
    "UserService",
    "CheckinService",
    "TrainingSessionService",
    "InsightsService",
]
