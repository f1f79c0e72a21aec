"""
User service.

Business logic for sign-up, password sign-in and sign-out.
"""

import datetime
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.clock import utc_now
from app.core.config import settings
from app.core.logging import get_logger
from app.core.security import (create_access_token, decode_token, get_password_hash, hash_token,
                               verify_password, )
from app.db.repositories.revoked_token import RevokedTokenRepository
from app.db.repositories.user import UserRepository
from app.models.revoked_token import RevokedToken
from app.models.user import User
from app.schemas.token import Token
from app.schemas.user import UserCreate, UserLogin

logger = get_logger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)
        self.revoked = RevokedTokenRepository(session)

    def register(self, user_data: UserCreate) -> User:
        """
        Register a new user.

        Args:
            user_data: Sign-up data

        Returns:
            Created user

        Raises:
            HTTPException: If email already exists
        """
        email = user_data.email.lower()
        if self.repository.exists_by_email(email):
            logger.warning("Sign-up rejected, email already registered")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already registered")

        user = User(email=email, hashed_password=get_password_hash(user_data.password),
                    full_name=user_data.full_name, )
        user = self.repository.create(user)
        logger.info(f"User {user.id} registered")
        return user

    def authenticate(self, login_data: UserLogin) -> Token:
        """
        Authenticate user and return access token.

        Args:
            login_data: User login credentials

        Returns:
            JWT access token

        Raises:
            HTTPException: If credentials are invalid or the account is inactive
        """
        user = self.repository.get_by_email(login_data.email.lower())

        if not user or not verify_password(login_data.password, user.hashed_password):
            logger.warning("Failed sign-in attempt")
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Incorrect email or password",
                                headers={ "WWW-Authenticate": "Bearer" }, )

        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")

        access_token_expires = datetime.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(data={ "sub": user.email }, expires_delta=access_token_expires)
        logger.info(f"User {user.id} signed in")

        return Token(access_token=access_token, token_type="bearer")

    def logout(self, user: User, token: str) -> None:
        """
        Revoke *token* so it can no longer be used.

        The revocation entry is kept until the token's own expiry.
        """
        payload = decode_token(token)
        if payload is None:
            return
        expires_at = datetime.datetime.fromtimestamp(payload["exp"], datetime.timezone.utc)
        token_hash = hash_token(token)
        if not self.revoked.is_revoked(token_hash):
            self.revoked.create(RevokedToken(token_hash=token_hash, user_id=user.id, expires_at=expires_at))
        self.revoked.purge_expired(utc_now())
        logger.info(f"User {user.id} signed out")

    def is_token_revoked(self, token: str) -> bool:
        return self.revoked.is_revoked(hash_token(token))

    def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email (case-insensitive; stored emails are lower-case).

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        return self.repository.get_by_email(email.lower())
