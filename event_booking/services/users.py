from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from event_booking.core.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NotFoundError,
    UserNotFoundError,
)
from event_booking.core.security import create_access_token, hash_password, verify_password
from event_booking.models.bookings import Booking
from event_booking.models.users import User
from event_booking.services.bookings import list_user_bookings


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.scalar(select(User).where(User.email == email))


def signup(db: Session, *, username: str, email: str, password: str) -> User:
    """Register a new user. The unique email constraint decides duplicates."""
    user = User(username=username, email=email, password=hash_password(password), is_admin=False)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Signup rejected, email already registered: {email}")
        raise DuplicateEmailError(email)

    db.refresh(user)
    logger.info(f"User {user.id} registered")
    return user


def login(db: Session, *, email: str, password: str) -> str:
    """Check credentials and return a freshly issued access token."""
    user = get_user_by_email(db, email)
    if user is None:
        raise UserNotFoundError()
    if not verify_password(password, user.password):
        raise InvalidCredentialsError()

    logger.info(f"User {user.id} logged in")
    return create_access_token(user.id)


def get_user(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def get_profile(db: Session, user_id: int) -> tuple[User, list[Booking]]:
    return get_user(db, user_id), list_user_bookings(db, user_id)


def update_profile(
    db: Session,
    user_id: int,
    *,
    username: str | None = None,
    email: str | None = None,
    password: str | None = None,
) -> User:
    """Apply only the non-empty fields; a new password is re-hashed."""
    user = get_user(db, user_id)

    if username:
        user.username = username
    if email:
        user.email = email
    if password:
        user.password = hash_password(password)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Profile update for user {user_id} rejected, email already registered: {email}")
        raise DuplicateEmailError(email or "")

    db.refresh(user)
    logger.info(f"User {user_id} updated profile")
    return user
