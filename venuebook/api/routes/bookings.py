import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from sqlalchemy.orm import Session
from typing import Optional

from venuebook.db.session import get_db
from venuebook.db.models import Booking
from venuebook.schemas.booking import BookingCreate, PriceEstimateOut
from venuebook.schemas.public import SubmissionResponse
from venuebook.core.config import RATE_LIMITS
from venuebook.core.pricing import estimate_price
from venuebook.core.security import rate_limit, make_key
from venuebook.core.workflow import PENDING
from venuebook.services.audit import log_action
from venuebook.services.email import send_booking_request_notification

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bookings",
    tags=["Bookings"],
)


"""
BOOKING ROUTES => PUBLIC BOOKING REQUESTS

Visitors submit booking requests which always start as pending.
The stored price is recomputed here; the client estimate is advisory.
"""


#Submit a booking request from the public booking form
@router.post("", response_model=SubmissionResponse)
def create_booking(
    payload: BookingCreate,
    request: Request,
    db: Session = Depends(get_db),
):
    limit, window = RATE_LIMITS["booking"]
    if not rate_limit(make_key(request, "booking"), limit, window):
        raise HTTPException(status_code=429, detail="Too many booking attempts")

    price = estimate_price(payload.time_slot, payload.guests)

    if payload.estimated_price is not None and payload.estimated_price != price:
        logger.warning(
            "Client estimate %s differs from server estimate %s (%s, %s guests)",
            payload.estimated_price,
            price,
            payload.time_slot,
            payload.guests,
        )

    booking = Booking(
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        event_type=payload.event_type,
        date=payload.date,
        time_slot=payload.time_slot,
        guests=payload.guests,
        special_requests=payload.special_requests,
        estimated_price=price,
        status=PENDING,
        ip_address=request.client.host if request.client else None,
    )

    db.add(booking)
    db.commit()
    db.refresh(booking)

    log_action(
        db=db,
        actor_type="system",
        actor_id=None,
        action="public.booking_requested",
        details=f"booking_id={booking.id}",
    )

    send_booking_request_notification(booking)

    return {
        "success": True,
        "message": "Booking request submitted successfully! We will contact you soon.",
    }


#Live price estimate for the booking form
@router.get("/estimate", response_model=PriceEstimateOut)
def get_estimate(
    time_slot: Optional[str] = Query(None, alias="timeSlot"),
    guests: Optional[int] = Query(None),
):
    return {
        "time_slot": time_slot,
        "guests": guests,
        "estimated_price": estimate_price(time_slot, guests),
    }
