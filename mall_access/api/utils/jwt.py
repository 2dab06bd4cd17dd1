from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(user_id: UUID, email: str) -> str:
    """
    Generate JWT access token

    Args:
        user_id: AdminUser UUID
        email: AdminUser email

    Returns:
        JWT token string, expiring after JWT_EXPIRE_MINUTES
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": str(user_id),
        "email": email,
        "exp": now + timedelta(minutes=ApplicationConfig.JWT_EXPIRE_MINUTES),
        "iat": now,
    }
    return jwt.encode(
        payload, ApplicationConfig.JWT_SECRET, algorithm=ApplicationConfig.JWT_ALGORITHM
    )


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Returns:
        Decoded payload dict or None if invalid or expired
    """
    try:
        return jwt.decode(
            token,
            ApplicationConfig.JWT_SECRET,
            algorithms=[ApplicationConfig.JWT_ALGORITHM],
        )
    except JWTError:
        return None
