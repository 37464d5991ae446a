from loguru import logger
from sqlalchemy import select, update
from sqlalchemy.orm import Session, selectinload

from event_booking.core.errors import AlreadyPaidError, CapacityExceededError, NotFoundError
from event_booking.models.bookings import Booking
from event_booking.models.events import Event


def create_booking(db: Session, *, user_id: int, event_id: int, seats: int = 1) -> Booking:
    """
    Reserve ``seats`` on an event for a user.

    The capacity decrement is a conditional update, committed together with
    the booking insert, so two requests racing for the last seats cannot
    both succeed and capacity never drops below zero.
    """
    try:
        booking = _create_booking_in_transaction(db, user_id, event_id, seats)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(booking)
    logger.info(f"Booking {booking.id} created: user={user_id} event={event_id} seats={seats}")
    return booking


def _create_booking_in_transaction(db: Session, user_id: int, event_id: int, seats: int) -> Booking:
    """Internal function to create booking within a transaction."""
    event = db.get(Event, event_id)
    if event is None:
        raise NotFoundError("Event not found")
    if event.capacity < seats:
        raise CapacityExceededError(event_id, seats)

    # Check capacity and decrement it in a single statement
    stmt = (
        update(Event)
        .where(Event.id == event_id)
        .where(Event.capacity >= seats)
        .values(capacity=Event.capacity - seats)
        .execution_options(synchronize_session=False)
    )
    res = db.execute(stmt)
    if res.rowcount != 1:  # type: ignore
        raise CapacityExceededError(event_id, seats)

    booking = Booking(event_id=event_id, user_id=user_id, seats=seats, paid=False)
    db.add(booking)
    db.flush()  # gets booking.id
    return booking


def list_user_bookings(db: Session, user_id: int) -> list[Booking]:
    stmt = (
        select(Booking)
        .where(Booking.user_id == user_id)
        .options(selectinload(Booking.event))
        .order_by(Booking.created_at.asc(), Booking.id.asc())
    )
    return list(db.scalars(stmt))


def get_user_booking(db: Session, *, user_id: int, booking_id: int) -> Booking:
    """Load a booking only if it belongs to ``user_id``."""
    stmt = (
        select(Booking)
        .where(Booking.id == booking_id, Booking.user_id == user_id)
        .options(selectinload(Booking.event))
    )
    booking = db.scalar(stmt)
    if booking is None:
        raise NotFoundError("Booking not found")
    return booking


def pay_booking(db: Session, *, user_id: int, booking_id: int) -> Booking:
    """Mark an owned, unpaid booking as paid. Payment itself is simulated."""
    booking = get_user_booking(db, user_id=user_id, booking_id=booking_id)
    if booking.paid:
        raise AlreadyPaidError(booking_id)

    stmt = (
        update(Booking)
        .where(Booking.id == booking_id, Booking.user_id == user_id, Booking.paid.is_(False))
        .values(paid=True)
        .execution_options(synchronize_session=False)
    )
    try:
        res = db.execute(stmt)
        if res.rowcount != 1:  # type: ignore
            raise AlreadyPaidError(booking_id)
        db.commit()
    except Exception:
        db.rollback()
        raise

    db.refresh(booking)
    logger.info(f"Booking {booking_id} paid by user {user_id}")
    return booking
