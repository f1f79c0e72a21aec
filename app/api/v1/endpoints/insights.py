"""
Insights endpoints: today's score, streak and recent history.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.core.clock import utc_today
from app.db.session import get_db
from app.models.user import User
from app.schemas.insights import InsightsResponse
from app.services.insights_service import InsightsService

router = APIRouter()


@router.get(
    "",
    summary="Get today's score, streak and the recent score history.",
    response_model=InsightsResponse,
)
def get_insights(
    as_of: Optional[datetime.date] = Query(
        None, description="Reference date (defaults to today, UTC)"
    ),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    ref_date = as_of or utc_today()
    return InsightsService(db).summary(user, ref_date)
