from datetime import date

from sqlalchemy import func
from sqlalchemy.orm import Session

from venuebook.db.models import Booking
from venuebook.core.workflow import PENDING, CONFIRMED


#Aggregate dashboard figures straight from the bookings table
def compute_dashboard_stats(db: Session, today: date | None = None) -> dict:
    """
    Revenue counts confirmed bookings only, at their stored estimated
    price. Monthly revenue is restricted to events held in the current
    calendar month.
    """
    today = today or date.today()
    month_start = today.replace(day=1)
    if month_start.month == 12:
        next_month = month_start.replace(year=month_start.year + 1, month=1)
    else:
        next_month = month_start.replace(month=month_start.month + 1)

    counts = dict(
        db.query(Booking.status, func.count(Booking.id))
        .group_by(Booking.status)
        .all()
    )

    confirmed = db.query(Booking).filter(Booking.status == CONFIRMED)

    total_revenue = (
        confirmed.with_entities(func.coalesce(func.sum(Booking.estimated_price), 0))
        .scalar()
    )
    monthly_revenue = (
        confirmed.filter(Booking.date >= month_start, Booking.date < next_month)
        .with_entities(func.coalesce(func.sum(Booking.estimated_price), 0))
        .scalar()
    )

    return {
        "total_bookings": sum(counts.values()),
        "pending_bookings": counts.get(PENDING, 0),
        "confirmed_bookings": counts.get(CONFIRMED, 0),
        "total_revenue": int(total_revenue),
        "monthly_revenue": int(monthly_revenue),
    }
