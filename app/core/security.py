"""
Security utilities.

Password hashing (bcrypt), JWT access tokens (PyJWT) and the OAuth2
bearer scheme used by protected endpoints.
"""

import datetime
import hashlib
import uuid
from typing import Any, Optional

import bcrypt
import jwt
from fastapi.security import OAuth2PasswordBearer

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login")


# ==================== PASSWORD HASHING ====================


def get_password_hash(password: str) -> str:
    """Hash a password with bcrypt."""
    salt = bcrypt.gensalt(rounds=settings.PASSWORD_HASH_ROUNDS)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its bcrypt hash.

    Returns False for malformed hashes instead of raising.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError as e:
        logger.error(f"Password verification failed: {e}")
        return False


# ==================== JWT TOKENS ====================


def create_access_token(data: dict[str, Any], expires_delta: Optional[datetime.timedelta] = None) -> str:
    """
    Create a signed JWT access token.

    Args:
        data: Claims to encode (``sub`` holds the user email)
        expires_delta: Token lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        Encoded JWT
    """
    to_encode = data.copy()
    now = datetime.datetime.now(datetime.timezone.utc)
    expire = now + (expires_delta or datetime.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"iat": now, "exp": expire, "jti": uuid.uuid4().hex})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> Optional[dict[str, Any]]:
    """Decode and validate a JWT.  Returns the claims, or ``None`` if invalid or expired."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except jwt.InvalidTokenError:
        return None


def decode_access_token(token: str) -> Optional[str]:
    """Return the subject (user email) of a valid token, otherwise ``None``."""
    payload = decode_token(token)
    if payload is None:
        return None
    return payload.get("sub")


def hash_token(token: str) -> str:
    """SHA-256 digest of a token, used to store revoked tokens."""
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
