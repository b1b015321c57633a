from datetime import UTC, datetime, timedelta
from typing import Optional

from jose import JWTError, jwt

DEFAULT_TOKEN_TTL = timedelta(days=7)


def generate_jwt(
    user_id: str, secret: str, expires_delta: timedelta = DEFAULT_TOKEN_TTL
) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User id, the only identity claim
        secret: HS256 signing secret
        expires_delta: Token lifetime (7 days by default)

    Returns:
        JWT token string
    """
    now = datetime.now(UTC)
    payload = {
        "id": user_id,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def verify_jwt(token: str, secret: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string
        secret: HS256 signing secret

    Returns:
        Decoded payload dict or None if invalid or expired
    """
    try:
        return jwt.decode(token, secret, algorithms=["HS256"])
    except JWTError:
        return None
