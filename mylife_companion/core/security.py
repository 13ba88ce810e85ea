"""
Password hashing and JWT helpers.

Provides:
- Password hashing and verification (passlib + bcrypt)
- Access, refresh and password-reset token creation and validation (python-jose)

Every token carries the account id under ``id`` and its purpose under ``type``;
a token presented for the wrong purpose is rejected just like a forged one.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import Enum
from functools import lru_cache
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from mylife_companion.core.logging_config import get_logger
from mylife_companion.server.core.config import settings

logger = get_logger(__name__)


class TokenType(str, Enum):
    access = "access"
    refresh = "refresh"
    password_reset = "password_reset"


class InvalidTokenError(Exception):
    """Raised when a token is malformed, forged, expired or of the wrong type."""

    def __init__(self, message: str, *, expired: bool = False) -> None:
        super().__init__(message)
        self.expired = expired


@lru_cache(maxsize=1)
def _pwd_context() -> CryptContext:
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=settings.password.bcrypt_rounds,
    )


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        Hashed password
    """
    return _pwd_context().hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against its hash.

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password

    Returns:
        True if password matches, False otherwise (including unreadable hashes)
    """
    try:
        return _pwd_context().verify(plain_password, hashed_password)
    except (ValueError, TypeError) as e:
        logger.warning(f"Password verification failed on a malformed hash: {e}")
        return False


def _secret_for(token_type: TokenType) -> str:
    jwt_config = settings.jwt
    if token_type is TokenType.refresh:
        return jwt_config.refresh_secret
    return jwt_config.secret


def _lifetime_for(token_type: TokenType) -> timedelta:
    jwt_config = settings.jwt
    if token_type is TokenType.refresh:
        return timedelta(days=jwt_config.refresh_expires_days)
    if token_type is TokenType.password_reset:
        return timedelta(minutes=jwt_config.password_reset_expires_minutes)
    return timedelta(minutes=jwt_config.expires_minutes)


def create_token(user_id: int, token_type: TokenType, expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT for ``user_id``.

    Args:
        user_id: Account the token identifies
        token_type: Purpose of the token; selects signing secret and lifetime
        expires_delta: Custom lifetime (optional)

    Returns:
        Encoded JWT string
    """
    now = datetime.now(timezone.utc)
    payload = {
        "id": user_id,
        "type": token_type.value,
        "iat": now,
        "exp": now + (expires_delta if expires_delta is not None else _lifetime_for(token_type)),
    }
    return jwt.encode(payload, _secret_for(token_type), algorithm=settings.jwt.algorithm)


def create_access_token(user_id: int) -> str:
    return create_token(user_id, TokenType.access)


def create_refresh_token(user_id: int) -> str:
    return create_token(user_id, TokenType.refresh)


def create_password_reset_token(user_id: int) -> str:
    return create_token(user_id, TokenType.password_reset)


def decode_token(token: str, token_type: TokenType = TokenType.access) -> int:
    """
    Validate a JWT and return the account id it carries.

    Args:
        token: Encoded JWT string
        token_type: Purpose the caller expects the token to have

    Returns:
        The ``id`` claim

    Raises:
        InvalidTokenError: If the signature, expiry, purpose or id claim is wrong
    """
    try:
        payload = jwt.decode(token, _secret_for(token_type), algorithms=[settings.jwt.algorithm])
    except ExpiredSignatureError as e:
        raise InvalidTokenError("Token has expired", expired=True) from e
    except JWTError as e:
        raise InvalidTokenError("Invalid token") from e

    if payload.get("type") != token_type.value:
        raise InvalidTokenError("Invalid token")
    user_id = payload.get("id")
    if not isinstance(user_id, int):
        raise InvalidTokenError("Invalid token")
    return user_id
