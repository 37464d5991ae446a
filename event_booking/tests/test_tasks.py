"""
Test Celery tasks.
"""
import time
from unittest.mock import patch

from kombu.exceptions import OperationalError
from redis.exceptions import ConnectionError as RedisConnectionError
from sqlalchemy.orm import Session

from event_booking.core.celery_config import celery_app
from event_booking.models.bookings import Booking
from event_booking.models.users import User
from event_booking.tasks import enqueue_receipt, issue_receipt_task


class TestReceiptTask:
    """Test receipt task functionality."""

    def test_receipt_for_paid_booking(self, db_session: Session, session_factory, user: User, make_event):
        event = make_event(title="Opera", price=25.5)
        booking = Booking(event_id=event.id, user_id=user.id, seats=2, paid=True)
        db_session.add(booking)
        db_session.commit()
        db_session.refresh(booking)

        # Call the task function directly (not through Celery)
        with patch("event_booking.tasks.SessionLocal", session_factory):
            result = issue_receipt_task.run(booking.id)

        assert result == {"booking_id": booking.id, "amount": 51.0}

    def test_receipt_skipped_for_unpaid_booking(self, db_session: Session, session_factory, user: User, make_event):
        event = make_event()
        booking = Booking(event_id=event.id, user_id=user.id, seats=1, paid=False)
        db_session.add(booking)
        db_session.commit()
        db_session.refresh(booking)

        with patch("event_booking.tasks.SessionLocal", session_factory):
            assert issue_receipt_task.run(booking.id) is None

    def test_receipt_for_nonexistent_booking(self, session_factory):
        with patch("event_booking.tasks.SessionLocal", session_factory):
            # Should not raise an exception
            assert issue_receipt_task.run(99999) is None


class TestEnqueueReceipt:

    def test_enqueue_receipt_uses_delay(self):
        with patch("event_booking.tasks.issue_receipt_task") as mock_task:
            enqueue_receipt(7)

        mock_task.delay.assert_called_once_with(7)

    def test_enqueue_receipt_survives_broker_outage(self):
        with patch("event_booking.tasks.issue_receipt_task") as mock_task:
            mock_task.delay.side_effect = OperationalError("broker unreachable")
            enqueue_receipt(7)

        mock_task.delay.assert_called_once_with(7)

    def test_enqueue_receipt_survives_redis_connection_error(self):
        with patch("event_booking.tasks.issue_receipt_task") as mock_task:
            mock_task.delay.side_effect = RedisConnectionError("Connection refused")
            enqueue_receipt(7)

        mock_task.delay.assert_called_once_with(7)

    def test_enqueue_receipt_with_unreachable_broker(self):
        """The real .delay against a dead broker gives up quickly and quietly."""
        assert celery_app.conf.broker_url.endswith(":6399/0")

        started = time.monotonic()
        enqueue_receipt(7)

        assert time.monotonic() - started < 10

    def test_receipts_do_not_use_a_result_backend(self):
        assert issue_receipt_task.ignore_result is True
        assert celery_app.conf.task_ignore_result is True
        assert not celery_app.conf.result_backend
