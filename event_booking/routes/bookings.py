from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from event_booking.core.auth import get_current_user_id
from event_booking.database.db import get_db
from event_booking.schemas.bookings import (
    BookingCreatedOut,
    BookingWithEventOut,
    BookRequest,
    PaymentOut,
)
from event_booking.services.bookings import create_booking, list_user_bookings, pay_booking
from event_booking.tasks import enqueue_receipt

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingCreatedOut)
def book_seats(
    payload: BookRequest,
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        booking = create_booking(db, user_id=user_id, event_id=payload.event_id, seats=payload.seats)
    except SQLAlchemyError:
        logger.exception("Booking failed")
        raise HTTPException(status_code=500, detail="Booking failed")
    return {"message": "Booking created. Proceed to payment.", "booking": booking}


@router.get("/my", response_model=list[BookingWithEventOut])
def my_bookings(user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    try:
        return list_user_bookings(db, user_id)
    except SQLAlchemyError:
        logger.exception("Failed to fetch bookings")
        raise HTTPException(status_code=500, detail="Failed to fetch bookings")


@router.post("/{booking_id}/pay", response_model=PaymentOut)
def pay(booking_id: int, user_id: int = Depends(get_current_user_id), db: Session = Depends(get_db)):
    """Checkout simulation: flips the paid flag once and issues a receipt."""
    try:
        booking = pay_booking(db, user_id=user_id, booking_id=booking_id)
    except SQLAlchemyError:
        logger.exception("Payment failed")
        raise HTTPException(status_code=500, detail="Payment failed")

    enqueue_receipt(booking.id)
    return {"message": "Payment successful", "booking": booking}
