"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.checkin import DailyCheckin  # noqa: F401
from app.models.training_session import TrainingSession  # noqa: F401
from app.models.revoked_token import RevokedToken  # noqa: F401
