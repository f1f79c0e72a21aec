"""
Check-in service.

Business logic for the daily check-in: upsert by (user, date),
lookups, and the score derived from a stored check-in.
"""

import datetime

from fastapi import HTTPException, status
from sqlmodel import Session

from app.consistency.score import compute_score
from app.core.clock import utc_now
from app.core.logging import get_logger
from app.db.repositories.checkin import CheckinRepository
from app.models.checkin import DailyCheckin
from app.schemas.checkin import CheckinResponse, CheckinUpsert
from app.schemas.insights import ScoreBreakdown

logger = get_logger(__name__)


class CheckinService:
    """Service for check-in business logic."""

    def __init__(self, session: Session):
        self.repository = CheckinRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def upsert(
        self, user_id: int, date: datetime.date, data: CheckinUpsert,
    ) -> tuple[CheckinResponse, bool]:
        """Save the check-in for *date*, replacing any stored values.

        Fields left out of *data* are stored as empty, the same as a
        full form submission.

        Returns:
            Tuple of (response, created) where created is True if new entry.
        """
        existing = self.repository.get_by_user_and_date(user_id, date)

        if existing:
            for key, value in data.model_dump().items():
                setattr(existing, key, value)
            existing.updated_at = utc_now()
            entry = self.repository.update(existing)
            logger.info(f"Check-in {date} updated for user {user_id}")
            return CheckinResponse.model_validate(entry), False

        entry = DailyCheckin(user_id=user_id, date=date, **data.model_dump())
        entry = self.repository.create(entry)
        logger.info(f"Check-in {date} created for user {user_id}")
        return CheckinResponse.model_validate(entry), True

    def get_by_date(self, user_id: int, date: datetime.date) -> CheckinResponse:
        entry = self._get_entry(user_id, date)
        return CheckinResponse.model_validate(entry)

    def list_since(self, user_id: int, since: datetime.date) -> list[CheckinResponse]:
        entries = self.repository.get_since(user_id, since)
        return [CheckinResponse.model_validate(e) for e in entries]

    def score_for_date(self, user_id: int, date: datetime.date) -> ScoreBreakdown:
        """Score of the check-in on *date*; all zeros if there is none."""
        return compute_score(self.repository.get_by_user_and_date(user_id, date))

    def delete_by_date(self, user_id: int, date: datetime.date) -> None:
        entry = self._get_entry(user_id, date)
        self.repository.delete(entry)
        logger.info(f"Check-in {date} deleted for user {user_id}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_entry(self, user_id: int, date: datetime.date) -> DailyCheckin:
        entry = self.repository.get_by_user_and_date(user_id, date)
        if not entry:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"No check-in for {date}",
            )
        return entry
