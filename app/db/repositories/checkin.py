"""
Check-in repository.

Handles database operations for DailyCheckin model.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.checkin import DailyCheckin


class CheckinRepository:
    """Repository for DailyCheckin database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: DailyCheckin) -> DailyCheckin:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_and_date(
        self, user_id: int, date: datetime.date,
    ) -> Optional[DailyCheckin]:
        """Get the check-in of a user on a specific date."""
        statement = select(DailyCheckin).where(
            DailyCheckin.user_id == user_id,
            DailyCheckin.date == date,
        )
        return self.session.exec(statement).first()

    def get_since(
        self, user_id: int, since: datetime.date, until: Optional[datetime.date] = None,
    ) -> list[DailyCheckin]:
        """Get check-ins with ``date >= since`` (and ``<= until`` if given), most recent first."""
        statement = select(DailyCheckin).where(
            DailyCheckin.user_id == user_id,
            DailyCheckin.date >= since,
        )
        if until is not None:
            statement = statement.where(DailyCheckin.date <= until)
        statement = statement.order_by(DailyCheckin.date.desc())
        return list(self.session.exec(statement).all())

    def get_dates_until(self, user_id: int, until: datetime.date) -> list[datetime.date]:
        """All check-in dates up to and including *until*, most recent first."""
        statement = (
            select(DailyCheckin.date)
            .where(
                DailyCheckin.user_id == user_id,
                DailyCheckin.date <= until,
            )
            .order_by(DailyCheckin.date.desc())
        )
        return list(self.session.exec(statement).all())

    def update(self, entry: DailyCheckin) -> DailyCheckin:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry: DailyCheckin) -> None:
        self.session.delete(entry)
        self.session.commit()
