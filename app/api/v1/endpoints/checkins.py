"""
Daily check-in endpoints.

One check-in per user per date, saved with a date-based upsert.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.core.clock import utc_today
from app.core.config import settings
from app.db.session import get_db
from app.models.user import User
from app.schemas.checkin import CheckinResponse, CheckinUpsert
from app.schemas.insights import ScoreBreakdown
from app.services.checkin_service import CheckinService

router = APIRouter()


@router.put("/{date}", summary="Create or replace the check-in for a date.", response_model=CheckinResponse, )
def upsert_checkin(date: datetime.date, data: CheckinUpsert, response: Response, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    """Upsert by (user, date): 201 when created, 200 when an existing check-in was replaced."""
    service = CheckinService(db)
    entry, created = service.upsert(user.id, date, data)
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return entry


@router.get("", summary="List check-ins since a date, most recent first.", response_model=list[CheckinResponse], )
def list_checkins(since: Optional[datetime.date] = Query(None, description="First date included (default: 30 days)"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CheckinService(db)
    if since is None:
        since = utc_today() - datetime.timedelta(days=settings.HISTORY_DAYS - 1)
    return service.list_since(user.id, since)


@router.get("/{date}", summary="Get the check-in for a specific date.", response_model=CheckinResponse, )
def get_checkin(date: datetime.date, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CheckinService(db)
    return service.get_by_date(user.id, date)


@router.get("/{date}/score", summary="Get the wellness score for a date.", response_model=ScoreBreakdown, )
def get_checkin_score(date: datetime.date, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CheckinService(db)
    return service.score_for_date(user.id, date)


@router.delete("/{date}", summary="Delete the check-in for a specific date.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_checkin(date: datetime.date, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = CheckinService(db)
    service.delete_by_date(user.id, date)
