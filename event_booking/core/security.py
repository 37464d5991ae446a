from datetime import datetime, timedelta, timezone

import bcrypt
import jwt

from event_booking.core.config import ACCESS_TOKEN_EXPIRE_HOURS, JWT_ALGORITHM, JWT_SECRET
from event_booking.core.errors import InvalidTokenError


def hash_password(plain_password: str) -> str:
    """Hash password using bcrypt with a fresh salt."""
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), bcrypt.gensalt())
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))


def create_access_token(user_id: int, expires_delta: timedelta | None = None) -> str:
    """Issue a signed token whose only application claim is the user id."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS))
    payload = {"id": user_id, "exp": expire}
    return jwt.encode(payload, JWT_SECRET, algorithm=JWT_ALGORITHM)


def decode_access_token(token: str) -> int:
    """Verify signature and expiry, returning the user id carried by the token.

    Raises:
        InvalidTokenError: If the token is malformed, tampered, expired or
            does not carry a user id.
    """
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[JWT_ALGORITHM], options={"require": ["exp"]})
    except jwt.PyJWTError:
        raise InvalidTokenError()

    user_id = payload.get("id")
    if not isinstance(user_id, int):
        raise InvalidTokenError()
    return user_id
