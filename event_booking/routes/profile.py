from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from event_booking.core.auth import get_current_user_id
from event_booking.database.db import get_db
from event_booking.schemas.bookings import ProfileOut
from event_booking.schemas.users import ProfileUpdate, ProfileUpdateOut
from event_booking.services import users

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=ProfileOut)
def get_profile(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """Profile plus booking history."""
    try:
        user, bookings = users.get_profile(db, user_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch profile")
        raise HTTPException(status_code=500, detail="Failed to fetch profile")
    return {"user": user, "bookings": bookings}


@router.put("", response_model=ProfileUpdateOut)
def update_profile(
    payload: ProfileUpdate,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        user = users.update_profile(
            db, user_id, username=payload.username, email=payload.email, password=payload.password
        )
    except SQLAlchemyError:
        logger.exception("Failed to update profile")
        raise HTTPException(status_code=500, detail="Failed to update profile")
    return {"message": "Profile updated successfully", "user": user}
