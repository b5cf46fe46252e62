from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List

from venuebook.schemas.booking import BookingOut
from venuebook.schemas.contact import ContactOut

"""
ADMIN DASHBOARD SCHEMA
"""


#Aggregate figures shown on the dashboard cards
class DashboardStats(BaseModel):
    total_bookings: int
    pending_bookings: int
    confirmed_bookings: int
    total_revenue: int
    monthly_revenue: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StatsResponse(BaseModel):
    success: bool = True
    stats: DashboardStats


class BookingListResponse(BaseModel):
    success: bool = True
    bookings: List[BookingOut]


class ContactListResponse(BaseModel):
    success: bool = True
    contacts: List[ContactOut]


class BookingStatusResponse(BaseModel):
    success: bool = True
    message: str
    booking: BookingOut
