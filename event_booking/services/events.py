from datetime import datetime, timedelta

from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from event_booking.core.errors import NotFoundError
from event_booking.models.events import Event


def start_of_day(now: datetime | None = None) -> datetime:
    """Local midnight of the day containing ``now``."""
    now = now or datetime.now()
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def list_events(db: Session) -> list[Event]:
    return list(db.scalars(select(Event).order_by(Event.date.asc(), Event.id.asc())))


def list_upcoming_events(db: Session, now: datetime | None = None) -> list[Event]:
    """Events dated strictly after the start of today."""
    today = start_of_day(now)
    stmt = select(Event).where(Event.date > today).order_by(Event.date.asc(), Event.id.asc())
    return list(db.scalars(stmt))


def list_live_events(db: Session, now: datetime | None = None) -> list[Event]:
    """Events dated within [today 00:00, tomorrow 00:00)."""
    today = start_of_day(now)
    tomorrow = today + timedelta(days=1)
    stmt = (
        select(Event)
        .where(Event.date >= today, Event.date < tomorrow)
        .order_by(Event.date.asc(), Event.id.asc())
    )
    return list(db.scalars(stmt))


def get_event(db: Session, event_id: int) -> Event:
    event = db.get(Event, event_id)
    if event is None:
        raise NotFoundError("Event not found")
    return event


def create_event(db: Session, **fields) -> Event:
    event = Event(**fields)
    db.add(event)
    db.commit()
    db.refresh(event)
    logger.info(f"Event {event.id} created with capacity {event.capacity}")
    return event
