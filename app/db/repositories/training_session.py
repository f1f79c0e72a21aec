"""
Training session repository.

Handles database operations for :class:`TrainingSession`.
Includes the daily load aggregation used by the insights summary.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.training_session import TrainingSession


class TrainingSessionRepository:
    """Repository for TrainingSession database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: TrainingSession) -> TrainingSession:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[TrainingSession]:
        return self.session.get(TrainingSession, entry_id)

    def get_by_user_and_date(self, user_id: int, date: datetime.date, ) -> list[TrainingSession]:
        statement = (
            select(TrainingSession).where(TrainingSession.user_id == user_id, TrainingSession.date == date, ).order_by(
                TrainingSession.created_at, TrainingSession.id))
        return list(self.session.exec(statement).all())

    def get_by_user_date_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[TrainingSession]:
        statement = (select(TrainingSession).where(TrainingSession.user_id == user_id, TrainingSession.date >= start,
                                                   TrainingSession.date <= end, ).order_by(TrainingSession.date.desc(),
                                                                                           TrainingSession.id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    def sum_load_by_date(self, user_id: int, date: datetime.date, ) -> tuple[float, int]:
        """Total load and session count for one day."""
        statement = select(func.coalesce(func.sum(TrainingSession.load), 0.0), func.count(TrainingSession.id), ).where(
            TrainingSession.user_id == user_id, TrainingSession.date == date, )
        row = self.session.exec(statement).first()
        if row is None:
            return 0.0, 0
        return float(row[0]), int(row[1])

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
