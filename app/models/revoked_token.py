"""
Revoked token database model.

Access tokens are stateless JWTs; signing out stores the token's hash
here until it would have expired anyway.
"""

import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from app.core.clock import utc_now


class RevokedToken(SQLModel, table=True):
    """A signed-out access token (stored as SHA-256 hex digest)."""

    __tablename__ = "revoked_tokens"

    id: Optional[int] = Field(default=None, primary_key=True)
    token_hash: str = Field(unique=True, index=True, max_length=64, nullable=False)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    expires_at: datetime.datetime = Field(nullable=False, sa_type=DateTime(timezone=True))
    revoked_at: datetime.datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
