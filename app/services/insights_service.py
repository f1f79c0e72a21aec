"""
Insights service.

Builds the insights summary: today's score, the check-in streak,
the scored history window and today's training load.
"""

import datetime

from sqlmodel import Session

from app.consistency.score import compute_score
from app.consistency.streak import compute_streak
from app.core.config import settings
from app.db.repositories.checkin import CheckinRepository
from app.db.repositories.training_session import TrainingSessionRepository
from app.models.user import User
from app.schemas.insights import HistoryEntry, InsightsResponse


class InsightsService:
    """Service for the insights summary."""

    def __init__(self, session: Session):
        self.checkins = CheckinRepository(session)
        self.sessions = TrainingSessionRepository(session)

    def summary(self, user: User, as_of: datetime.date) -> InsightsResponse:
        """Insights for *user* with *as_of* taken as "today".

        The history window covers the last ``HISTORY_DAYS`` days
        including *as_of*.  The streak is not limited to the window.
        """
        window_start = as_of - datetime.timedelta(days=settings.HISTORY_DAYS - 1)
        rows = self.checkins.get_since(user.id, window_start, until=as_of)

        today_row = next((r for r in rows if r.date == as_of), None)
        streak = compute_streak(self.checkins.get_dates_until(user.id, as_of), as_of)
        load, count = self.sessions.sum_load_by_date(user.id, as_of)

        return InsightsResponse(
            email=user.email,
            as_of=as_of,
            today=compute_score(today_row),
            streak=streak,
            history_days=settings.HISTORY_DAYS,
            history=[HistoryEntry(date=r.date, score=compute_score(r).score) for r in rows],
            training_load_today=load,
            training_sessions_today=count,
        )
