import datetime as dt
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from typing import Literal, Optional

"""
BOOKING SCHEMA

Shared by the public booking route and the booking form client, so both
layers enforce exactly the same field rules. Wire names are camelCase.
"""


EventTypeValue = Literal[
    "wedding",
    "reception",
    "engagement",
    "birthday",
    "corporate",
    "anniversary",
    "other",
]

TimeSlotId = Literal["morning", "afternoon", "evening", "fullday"]

BookingStatus = Literal["pending", "confirmed", "cancelled"]

MIN_GUESTS = 1
MAX_GUESTS = 500


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


#Payload submitted by the public booking form
class BookingCreate(CamelModel):
    name: str = Field(min_length=2, max_length=100)
    email: EmailStr
    phone: str = Field(min_length=10, max_length=20)
    event_type: EventTypeValue
    date: dt.date
    time_slot: TimeSlotId
    guests: int = Field(ge=MIN_GUESTS, le=MAX_GUESTS)
    special_requests: Optional[str] = Field(None, max_length=2000)
    estimated_price: Optional[int] = Field(None, ge=0)

    @field_validator("name", "phone")
    @classmethod
    def strip_whitespace(cls, v: str):
        return v.strip()

    @field_validator("date")
    @classmethod
    def date_not_in_past(cls, v: dt.date):
        if v < dt.date.today():
            raise ValueError("Event date cannot be in the past")
        return v


#Response model representing a booking in the admin dashboard
class BookingOut(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    name: str
    email: str
    phone: str
    event_type: str
    date: dt.date
    time_slot: str
    guests: int
    special_requests: Optional[str]
    estimated_price: int
    status: BookingStatus
    created_at: Optional[dt.datetime]


#Admin payload applying a workflow transition
class BookingStatusUpdate(BaseModel):
    status: Literal["confirmed", "cancelled"]


#Response of the public price estimate lookup
class PriceEstimateOut(CamelModel):
    time_slot: Optional[str]
    guests: Optional[int]
    estimated_price: Optional[int]
