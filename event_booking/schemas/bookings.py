from datetime import datetime

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from event_booking.schemas.events import EventOut
from event_booking.schemas.users import MessageOut, UserOut


class BookRequest(BaseModel):
    event_id: int = Field(ge=1)
    seats: int = Field(default=1, ge=1)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class BookingOut(BaseModel):
    id: int
    event_id: int
    user_id: int
    seats: int
    paid: bool
    created_at: datetime | None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class BookingWithEventOut(BookingOut):
    event: EventOut


class BookingCreatedOut(MessageOut):
    booking: BookingOut


class PaymentOut(MessageOut):
    booking: BookingWithEventOut


class ProfileOut(BaseModel):
    user: UserOut
    bookings: list[BookingWithEventOut]
