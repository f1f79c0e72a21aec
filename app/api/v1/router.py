"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import auth, checkins, insights, training

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    checkins.router, prefix="/checkins", tags=["Daily check-ins"]
)
api_router.include_router(
    training.router,
    prefix="/training/sessions",
    tags=["Training sessions"],
)
api_router.include_router(
    insights.router, prefix="/insights", tags=["Insights"]
)
