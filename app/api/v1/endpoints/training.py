"""
Training session endpoints.

Append-only session log with date-based organisation.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.core.clock import utc_today
from app.core.config import settings
from app.db.session import get_db
from app.models.user import User
from app.schemas.training_session import TrainingSessionCreate, TrainingSessionResponse
from app.services.training_session_service import TrainingSessionService

router = APIRouter()


@router.post("", summary="Log a training session for today.", response_model=TrainingSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session_today(data: TrainingSessionCreate, db: Session = Depends(get_db),
                         user: User = Depends(get_current_user), ):
    service = TrainingSessionService(db)
    return service.create(user.id, utc_today(), data)


@router.post("/{date}", summary="Log a training session for a date.", response_model=TrainingSessionResponse,
             status_code=status.HTTP_201_CREATED, )
def create_session(date: datetime.date, data: TrainingSessionCreate, db: Session = Depends(get_db),
                   user: User = Depends(get_current_user), ):
    service = TrainingSessionService(db)
    return service.create(user.id, date, data)


@router.get("/{date}", summary="Get all training sessions for a date.", response_model=list[TrainingSessionResponse], )
def get_sessions_by_date(date: datetime.date, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = TrainingSessionService(db)
    return service.get_by_date(user.id, date)


@router.get("", summary="List training sessions with optional date range.",
            response_model=list[TrainingSessionResponse], )
def list_sessions(start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                  end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                  db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = TrainingSessionService(db)
    # Each missing bound defaults on its own: end to today, start to the history window before end
    end = end or utc_today()
    start = start or end - datetime.timedelta(days=settings.HISTORY_DAYS - 1)
    return service.get_range(user.id, start, end)


@router.delete("/id/{session_id}", summary="Delete a training session.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_session(session_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = TrainingSessionService(db)
    service.delete(user.id, session_id)
