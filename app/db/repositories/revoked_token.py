"""
Revoked token repository.

Handles database operations for RevokedToken model.
"""

import datetime

from sqlmodel import Session, select

from app.models.revoked_token import RevokedToken


class RevokedTokenRepository:
    """Repository for RevokedToken database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: RevokedToken) -> RevokedToken:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def is_revoked(self, token_hash: str) -> bool:
        statement = select(RevokedToken.id).where(RevokedToken.token_hash == token_hash)
        return self.session.exec(statement).first() is not None

    def purge_expired(self, now: datetime.datetime) -> None:
        """Drop entries whose token has expired on its own."""
        statement = select(RevokedToken).where(RevokedToken.expires_at < now)
        for entry in self.session.exec(statement).all():
            self.session.delete(entry)
        self.session.commit()
