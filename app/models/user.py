"""
User database model.

Account identity for sign-up, password sign-in and ownership of
check-ins and training sessions.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class User(SQLModel, table=True):
    """
    Registered account.

    ``email`` is the login name and the JWT subject.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    full_name: Optional[str] = Field(default=None, max_length=255)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
