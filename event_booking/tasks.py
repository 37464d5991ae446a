from kombu.exceptions import OperationalError
from loguru import logger
from redis.exceptions import RedisError
from sqlalchemy.orm import selectinload

from event_booking.core.celery_config import celery_app
from event_booking.database.db import SessionLocal
from event_booking.models.bookings import Booking


@celery_app.task(bind=True, ignore_result=True)
def issue_receipt_task(self, booking_id: int):
    """Issue the (simulated) payment receipt for a paid booking."""
    db = SessionLocal()
    try:
        booking = db.get(Booking, booking_id, options=[selectinload(Booking.event)])
        if booking is None:
            logger.warning(f"Receipt skipped, booking {booking_id} not found")
            return None
        if not booking.paid:
            logger.warning(f"Receipt skipped, booking {booking_id} is not paid")
            return None

        amount = round(booking.seats * booking.event.price, 2)
        logger.info(
            f"Receipt issued: booking={booking.id} user={booking.user_id} "
            f"event={booking.event.title!r} seats={booking.seats} amount={amount:.2f}"
        )
        return {"booking_id": booking.id, "amount": amount}
    finally:
        db.close()


def enqueue_receipt(booking_id: int) -> None:
    """Hand the receipt to the worker; a broker outage must not fail the payment."""
    try:
        issue_receipt_task.delay(booking_id)
    except (OperationalError, RedisError, OSError):
        logger.opt(exception=True).warning(f"Could not enqueue receipt for booking {booking_id}")
