from datetime import datetime

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


# ---------- Event ----------
class EventCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    venue: str | None = Field(default=None, max_length=200)
    date: datetime
    start_time: str | None = Field(default=None, max_length=16)
    end_time: str | None = Field(default=None, max_length=16)
    price: float = Field(default=0, ge=0)
    capacity: int = Field(default=100, ge=0)

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @field_validator("date")
    @classmethod
    def to_local_naive(cls, value: datetime) -> datetime:
        # Event dates are stored naive in local time, matching the day windows
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value


class EventOut(BaseModel):
    id: int
    title: str
    description: str | None
    venue: str | None
    date: datetime
    start_time: str | None
    end_time: str | None
    price: float
    capacity: int
    created_at: datetime | None

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
