from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    DateTime,
    Enum,
    Index,
    CheckConstraint,
    Text,
)
from sqlalchemy.sql import func
from venuebook.db.base import Base
from venuebook.core.catalog import EVENT_TYPE_VALUES, TIME_SLOTS
from venuebook.core.workflow import STATUSES


# =========================================================
# SHARED ENUMS (centralised to avoid duplication issues):
# =========================================================


#Lifecycle state for bookings
BookingStatusEnum = Enum(*STATUSES, name="booking_status_enum")


#Kinds of event the venue can be booked for
EventTypeEnum = Enum(*EVENT_TYPE_VALUES, name="event_type_enum")


#Bookable time slots
TimeSlotEnum = Enum(*(slot.id for slot in TIME_SLOTS), name="time_slot_enum")


#Account role
RoleEnum = Enum("admin", "user", name="role_enum")


#Actor type used in audit logging
ActorTypeEnum = Enum("system", "admin", name="actor_type_enum")


# =========================================================
# BOOKINGS (event reservations):
# =========================================================


#A visitor's booking request and its admin-driven status
class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True)

    #Customer contact details
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=False)

    #Event details
    event_type = Column(EventTypeEnum, nullable=False)
    date = Column(Date, nullable=False, index=True)
    time_slot = Column(TimeSlotEnum, nullable=False)
    guests = Column(Integer, nullable=False)
    special_requests = Column(Text, nullable=True)

    #Price computed server-side at submission time
    estimated_price = Column(Integer, nullable=False)

    #Booking lifecycle status
    status = Column(BookingStatusEnum, nullable=False, default="pending", index=True)

    #Request metadata
    ip_address = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=True, onupdate=func.now())

    __table_args__ = (
        Index("ix_booking_date_slot", "date", "time_slot"),
        CheckConstraint("guests >= 1 AND guests <= 500", name="ck_booking_guests_range"),
    )


# =========================================================
# CONTACT MESSAGES (site-level contact form):
# =========================================================


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    #Contact form submission details
    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=False)
    subject = Column(String, nullable=False)
    message = Column(Text, nullable=False)

    #Optional metadata for moderation
    ip_address = Column(String, nullable=True)
    user_agent = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())


# =========================================================
# USERS (site accounts, admins manage bookings):
# =========================================================


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    hashed_password = Column(String, nullable=False)
    role = Column(RoleEnum, nullable=False, default="user")


# =========================================================
# AUDIT LOGS (immutable security trail):
# =========================================================


#Immutable audit log entry for security-sensitive actions
class AuditLog(Base):
    __tablename__ = "audit_logs"

    id = Column(Integer, primary_key=True)
    actor_type = Column(ActorTypeEnum, nullable=False)
    actor_id = Column(Integer, nullable=True, index=True)
    action = Column(String, nullable=False)
    details = Column(String, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
