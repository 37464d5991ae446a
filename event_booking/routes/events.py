from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from event_booking.core.auth import get_current_user_id, require_admin
from event_booking.database.db import get_db
from event_booking.schemas.events import EventCreate, EventOut
from event_booking.services import events

router = APIRouter(prefix="/events", tags=["events"], dependencies=[Depends(get_current_user_id)])


# Fixed paths are declared before /{event_id}
@router.get("/upcoming", response_model=list[EventOut])
def upcoming_events(db: Session = Depends(get_db)):
    try:
        return events.list_upcoming_events(db)
    except SQLAlchemyError:
        logger.exception("Failed to fetch upcoming events")
        raise HTTPException(status_code=500, detail="Failed to fetch upcoming events")


@router.get("/live", response_model=list[EventOut])
def live_events(db: Session = Depends(get_db)):
    try:
        return events.list_live_events(db)
    except SQLAlchemyError:
        logger.exception("Failed to fetch live events")
        raise HTTPException(status_code=500, detail="Failed to fetch live events")


@router.get("", response_model=list[EventOut])
def all_events(db: Session = Depends(get_db)):
    try:
        return events.list_events(db)
    except SQLAlchemyError:
        logger.exception("Failed to fetch events")
        raise HTTPException(status_code=500, detail="Failed to fetch events")


@router.post("", response_model=EventOut, dependencies=[Depends(require_admin)])
def create_event(payload: EventCreate, db: Session = Depends(get_db)):
    try:
        return events.create_event(db, **payload.model_dump())
    except SQLAlchemyError:
        logger.exception("Failed to create event")
        raise HTTPException(status_code=500, detail="Failed to create event")


@router.get("/{event_id}", response_model=EventOut)
def event_detail(event_id: int, db: Session = Depends(get_db)):
    try:
        return events.get_event(db, event_id)
    except SQLAlchemyError:
        logger.exception(f"Failed to fetch event {event_id}")
        raise HTTPException(status_code=500, detail="Failed to fetch event")
