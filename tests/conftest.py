import os
from datetime import date, timedelta

os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["ADMIN_EMAIL"] = "admin@venuebook.in"
os.environ["ADMIN_PASSWORD"] = "admin-password"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.pop("BREVO_API_KEY", None)

import pytest
from fastapi.testclient import TestClient

from venuebook.main import app
from venuebook.db.base import Base
from venuebook.db.session import engine, SessionLocal
from venuebook.db.models import Booking, User
from venuebook.db.seed import seed_admin
from venuebook.core.security import hash_password, reset_rate_limits

ADMIN_EMAIL = os.environ["ADMIN_EMAIL"]
ADMIN_PASSWORD = os.environ["ADMIN_PASSWORD"]


# ------------------ database ------------------
@pytest.fixture(autouse=True)
def fresh_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    reset_rate_limits()

    db = SessionLocal()
    try:
        seed_admin(db)
    finally:
        db.close()

    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


# ------------------ clients ------------------
@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_token(client):
    response = client.post(
        "/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def guest_user(db):
    user = User(
        name="Regular Guest",
        email="guest@venuebook.in",
        hashed_password=hash_password("guest-password"),
        role="user",
    )
    db.add(user)
    db.commit()
    return user


# ------------------ data ------------------
def future_date(days: int = 30) -> date:
    return date.today() + timedelta(days=days)


@pytest.fixture
def booking_payload():
    return {
        "name": "Asha Patil",
        "email": "asha.patil@gmail.com",
        "phone": "9876543210",
        "eventType": "wedding",
        "date": future_date().isoformat(),
        "timeSlot": "evening",
        "guests": 250,
        "specialRequests": "Stage decoration with marigolds",
        "estimatedPrice": 30000,
    }


@pytest.fixture
def make_booking(db):
    def _make(status="pending", **overrides):
        fields = {
            "name": "Ravi Deshmukh",
            "email": "ravi@gmail.com",
            "phone": "9123456780",
            "event_type": "birthday",
            "date": future_date(),
            "time_slot": "morning",
            "guests": 120,
            "estimated_price": 15000,
            "status": status,
        }
        fields.update(overrides)
        booking = Booking(**fields)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    return _make
