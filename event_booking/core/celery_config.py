from celery import Celery

from event_booking.core.config import CELERY_TASK_ALWAYS_EAGER, get_redis_url


def make_celery(app_name: str = "event_booking") -> Celery:
    """Broker-only Celery app; receipts are fire-and-forget so no result backend."""
    celery = Celery(app_name, broker=get_redis_url())
    celery.conf.update(
        task_serializer="json",
        accept_content=["json"],
        task_ignore_result=True,
        task_always_eager=CELERY_TASK_ALWAYS_EAGER,
        # Give up quickly when the broker is unreachable
        task_publish_retry=False,
        broker_connection_timeout=2,
        broker_transport_options={"max_retries": 1, "interval_start": 0, "interval_step": 0.2, "interval_max": 0.5},
    )
    return celery


celery_app = make_celery()
