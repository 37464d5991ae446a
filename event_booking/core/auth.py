from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from event_booking.core.errors import ForbiddenError, UnauthenticatedError
from event_booking.core.security import decode_access_token
from event_booking.database.db import get_db
from event_booking.models.users import User

bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> int:
    """Resolve the bearer token on the request to the caller's user id."""
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError()
    return decode_access_token(credentials.credentials)


def require_admin(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    user = db.get(User, user_id)
    if user is None or not user.is_admin:
        raise ForbiddenError()
    return user
