from fastapi import APIRouter
from typing import List

from venuebook.core.catalog import (
    BUSINESS_INFO,
    EVENT_TYPES,
    FACILITIES,
    MENU_CATEGORIES,
    TIME_SLOTS,
)
from venuebook.core.config import settings
from venuebook.schemas.public import (
    EventTypeOut,
    FacilityOut,
    MenuCategoryOut,
    TimeSlotOut,
)

router = APIRouter(
    prefix="/public",
    tags=["Public"],
)
"""
PUBLIC ROUTES => STATIC VENUE CATALOG

No auth, no rate limiting. Everything here is read-only data the
site renders: venue details, slots with prices, event types,
facilities and the catering menu.
"""

#get public business info
@router.get("/business")
def get_public_business():
    return {**BUSINESS_INFO, "email": settings.NOTIFY_EMAIL}


@router.get("/time-slots", response_model=List[TimeSlotOut])
def get_time_slots():
    return list(TIME_SLOTS)


@router.get("/event-types", response_model=List[EventTypeOut])
def get_event_types():
    return list(EVENT_TYPES)


@router.get("/facilities", response_model=List[FacilityOut])
def get_facilities():
    return FACILITIES


@router.get("/menu", response_model=List[MenuCategoryOut])
def get_menu():
    return MENU_CATEGORIES
