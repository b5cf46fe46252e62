from fastapi import APIRouter, Depends, Request, HTTPException
from sqlalchemy.orm import Session

from venuebook.db.session import get_db
from venuebook.db.models import ContactMessage
from venuebook.schemas.contact import ContactCreate
from venuebook.schemas.public import SubmissionResponse
from venuebook.core.config import RATE_LIMITS
from venuebook.core.security import rate_limit, make_key
from venuebook.services.email import send_contact_notification

router = APIRouter(
    prefix="/contact",
    tags=["Contact"],
)

# =========================
# 🔓 PUBLIC: submit contact
# =========================
@router.post("", response_model=SubmissionResponse)
def submit_contact(
    payload: ContactCreate,
    request: Request,
    db: Session = Depends(get_db),
):
    limit, window = RATE_LIMITS["contact"]
    if not rate_limit(make_key(request, "contact"), limit, window):
        raise HTTPException(
            status_code=429,
            detail="Too many requests. Please wait a moment.",
        )

    msg = ContactMessage(
        name=payload.name,
        email=payload.email,
        phone=payload.phone,
        subject=payload.subject,
        message=payload.message,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )
    db.add(msg)
    db.commit()
    db.refresh(msg)

    send_contact_notification(msg)

    return {
        "success": True,
        "message": "Message sent successfully! We will get back to you soon.",
    }
