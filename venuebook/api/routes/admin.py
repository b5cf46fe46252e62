import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import Optional, Literal

from venuebook.db.session import get_db
from venuebook.db.models import Booking, ContactMessage, User
from venuebook.api.deps import get_current_admin
from venuebook.core import workflow
from venuebook.schemas.booking import BookingStatusUpdate
from venuebook.schemas.public import SubmissionResponse
from venuebook.schemas.admin import (
    StatsResponse,
    BookingListResponse,
    ContactListResponse,
    BookingStatusResponse,
)
from venuebook.services.audit import log_action
from venuebook.services.email import send_booking_status_customer
from venuebook.services.stats import compute_dashboard_stats

logger = logging.getLogger(__name__)

# 🔒 ALL endpoints in this router are ADMIN-ONLY
router = APIRouter(
    prefix="/admin",
    tags=["Admin"],
    dependencies=[Depends(get_current_admin)],
)


"""
ADMIN ROUTES => DASHBOARD, BOOKING WORKFLOW & CONTACT INBOX

Reads always return the full current state. Status changes go through
the booking workflow; confirm/cancel are only accepted while pending.
"""


def _get_booking_or_404(db: Session, booking_id: int) -> Booking:
    booking = db.get(Booking, booking_id)
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


#Dashboard aggregate figures
@router.get("/stats", response_model=StatsResponse)
def get_stats(db: Session = Depends(get_db)):
    return {"success": True, "stats": compute_dashboard_stats(db)}


#All bookings, newest first, optionally filtered by status
@router.get("/bookings", response_model=BookingListResponse)
def list_bookings(
    status: Optional[Literal["pending", "confirmed", "cancelled"]] = Query(None),
    db: Session = Depends(get_db),
):
    query = db.query(Booking)

    if status:
        query = query.filter(Booking.status == status)

    bookings = query.order_by(Booking.created_at.desc(), Booking.id.desc()).all()
    return {"success": True, "bookings": bookings}


#All contact messages, newest first
@router.get("/contacts", response_model=ContactListResponse)
def list_contacts(db: Session = Depends(get_db)):
    contacts = (
        db.query(ContactMessage)
        .order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc())
        .all()
    )
    return {"success": True, "contacts": contacts}


#Confirm or cancel a pending booking
@router.patch("/bookings/{booking_id}/status", response_model=BookingStatusResponse)
def update_booking_status(
    booking_id: int,
    payload: BookingStatusUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    booking = _get_booking_or_404(db, booking_id)
    action = workflow.ACTION_FOR_STATUS[payload.status]

    try:
        booking.status = workflow.apply(booking.status, action)
    except workflow.InvalidTransition as e:
        logger.info("Rejected %s on booking %s: %s", action, booking_id, e)
        raise HTTPException(status_code=409, detail=str(e))

    db.commit()
    db.refresh(booking)

    log_action(
        db=db,
        actor_type="admin",
        actor_id=admin.id,
        action=f"booking.{booking.status}",
        details=f"booking_id={booking.id}",
    )

    send_booking_status_customer(booking)

    return {
        "success": True,
        "message": f"Booking {booking.status} successfully",
        "booking": booking,
    }


#Permanently remove a booking in any status
@router.delete("/bookings/{booking_id}", response_model=SubmissionResponse)
def delete_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    booking = _get_booking_or_404(db, booking_id)

    workflow.apply(booking.status, workflow.DELETE)
    previous_status = booking.status

    db.delete(booking)
    db.commit()

    log_action(
        db=db,
        actor_type="admin",
        actor_id=admin.id,
        action="booking.deleted",
        details=f"booking_id={booking_id},status={previous_status}",
    )

    return {"success": True, "message": "Booking deleted successfully"}
