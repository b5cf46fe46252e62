import logging
import sib_api_v3_sdk
import urllib3
from sib_api_v3_sdk.rest import ApiException
from datetime import date
from typing import Any

from venuebook.core.config import settings
from venuebook.core.catalog import BUSINESS_INFO, TIME_SLOTS_BY_ID

logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Brevo client setup (only when a key is configured)
# -------------------------------------------------------------------
brevo = None

if settings.BREVO_API_KEY:
    config = sib_api_v3_sdk.Configuration()
    config.api_key["api-key"] = settings.BREVO_API_KEY

    client = sib_api_v3_sdk.ApiClient(config)
    brevo = sib_api_v3_sdk.TransactionalEmailsApi(client)


# -------------------------------------------------------------------
# Internal helper (ONLY place that talks to Brevo)
# -------------------------------------------------------------------
def _send_email(*, to: str, subject: str, body: str, params: dict[str, Any] | None = None) -> bool:
    """
    Send a plain-text transactional email.

    Notifications are best effort: a missing key or a Brevo error is
    logged and reported as False, never raised to the request handler.
    """
    if brevo is None:
        logger.info("BREVO_API_KEY not set, skipping email to %s: %s", to, subject)
        return False

    try:
        email = sib_api_v3_sdk.SendSmtpEmail(
            to=[{"email": to}],
            sender={"name": BUSINESS_INFO["name"], "email": settings.NOTIFY_EMAIL},
            subject=subject,
            text_content=body,
            params=params,
        )
        brevo.send_transac_email(email)
        return True

    except (ApiException, urllib3.exceptions.HTTPError):
        logger.exception("Brevo email to %s failed: %s", to, subject)
        return False


#Format booking date and slot consistently for email bodies
def _format_booking_time(event_date: date, time_slot: str) -> tuple[str, str]:
    slot = TIME_SLOTS_BY_ID.get(time_slot)
    return (
        event_date.strftime("%A, %d %B %Y"),
        slot.label if slot else time_slot,
    )


# -------------------------------------------------------------------
# Public API
# -------------------------------------------------------------------
def send_booking_request_notification(booking) -> bool:
    formatted_date, formatted_slot = _format_booking_time(booking.date, booking.time_slot)

    return _send_email(
        to=settings.NOTIFY_EMAIL,
        subject=f"New booking request from {booking.name}",
        body=f"""
New booking request

Name: {booking.name}
Email: {booking.email}
Phone: {booking.phone}
Event: {booking.event_type}
Date: {formatted_date}
Slot: {formatted_slot}
Guests: {booking.guests}
Estimated price: {booking.estimated_price}

Special requests:
{booking.special_requests or "-"}
""",
    )


def send_booking_status_customer(booking) -> bool:
    formatted_date, formatted_slot = _format_booking_time(booking.date, booking.time_slot)

    return _send_email(
        to=booking.email,
        subject=f"Your booking at {BUSINESS_INFO['name']} is {booking.status}",
        body=f"""
Hello {booking.name},

Your {booking.event_type} booking on {formatted_date} ({formatted_slot})
has been {booking.status}.

For any questions call us on {BUSINESS_INFO['phone']}.
""",
    )


def send_contact_notification(message) -> bool:
    return _send_email(
        to=settings.NOTIFY_EMAIL,
        subject=f"New contact message: {message.subject}",
        body=f"""
New contact submission

Name: {message.name}
Email: {message.email}
Phone: {message.phone}

Message:
{message.message}
""",
    )
