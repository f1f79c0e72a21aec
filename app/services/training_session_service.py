"""
Training session service.

Resolves the activity name, computes the session load
(``duration_min * rpe``) and stores the session.  Sessions are
append-only: they can be listed and deleted but not edited.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.logging import get_logger
from app.db.repositories.training_session import TrainingSessionRepository
from app.models.training_session import TrainingSession
from app.schemas.training_session import TrainingSessionCreate, TrainingSessionResponse

logger = get_logger(__name__)


def compute_load(duration_min: float, rpe: float) -> float:
    """Session load: duration in minutes times perceived exertion."""
    return duration_min * rpe


class TrainingSessionService:
    """Service for training session business logic."""

    def __init__(self, session: Session):
        self.repository = TrainingSessionRepository(session)

    def create(self, user_id: int, date: datetime.date, data: TrainingSessionCreate, ) -> TrainingSessionResponse:
        entry = TrainingSession(user_id=user_id, date=date, activity=data.resolve_activity(),
                                category=data.category.value, duration_min=data.duration_min, rpe=data.rpe,
                                load=compute_load(data.duration_min, data.rpe), notes=data.notes, )
        entry = self.repository.create(entry)
        logger.info(f"Training session {entry.id} ({entry.activity}, load {entry.load:g}) logged for user {user_id}")
        return TrainingSessionResponse.model_validate(entry)

    def get_by_date(self, user_id: int, date: datetime.date) -> list[TrainingSessionResponse]:
        entries = self.repository.get_by_user_and_date(user_id, date)
        return [TrainingSessionResponse.model_validate(e) for e in entries]

    def get_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[TrainingSessionResponse]:
        if start > end:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="start must not be after end", )
        entries = self.repository.get_by_user_date_range(user_id, start, end)
        return [TrainingSessionResponse.model_validate(e) for e in entries]

    def delete(self, user_id: int, entry_id: int) -> None:
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training session not found", )
        self.repository.delete(entry_id)
        logger.info(f"Training session {entry_id} deleted for user {user_id}")
