from datetime import date, timedelta

import pytest

from venuebook.db.models import AuditLog, Booking


def test_create_booking(client, db, booking_payload):
    response = client.post("/bookings", json=booking_payload)

    assert response.status_code == 200
    assert response.json()["success"] is True

    booking = db.query(Booking).one()
    assert booking.status == "pending"
    assert booking.name == "Asha Patil"
    assert booking.event_type == "wedding"
    assert booking.time_slot == "evening"
    assert booking.guests == 250
    assert booking.estimated_price == 25000 + 50 * 100


def test_server_recomputes_estimate(client, db, booking_payload):
    booking_payload["estimatedPrice"] = 1
    response = client.post("/bookings", json=booking_payload)

    assert response.status_code == 200
    assert db.query(Booking).one().estimated_price == 30000


def test_estimate_is_optional(client, db, booking_payload):
    del booking_payload["estimatedPrice"]
    del booking_payload["specialRequests"]

    response = client.post("/bookings", json=booking_payload)

    assert response.status_code == 200
    booking = db.query(Booking).one()
    assert booking.estimated_price == 30000
    assert booking.special_requests is None


def test_booking_for_today_is_accepted(client, booking_payload):
    booking_payload["date"] = date.today().isoformat()
    assert client.post("/bookings", json=booking_payload).status_code == 200


@pytest.mark.parametrize("guests", [0, 501, -5])
def test_guest_count_out_of_range(client, db, booking_payload, guests):
    booking_payload["guests"] = guests

    response = client.post("/bookings", json=booking_payload)

    assert response.status_code == 422
    assert db.query(Booking).count() == 0


def test_past_date_rejected(client, db, booking_payload):
    booking_payload["date"] = (date.today() - timedelta(days=1)).isoformat()

    response = client.post("/bookings", json=booking_payload)

    assert response.status_code == 422
    assert "past" in response.text
    assert db.query(Booking).count() == 0


@pytest.mark.parametrize(
    "field, value",
    [
        ("name", "A"),
        ("email", "not-an-email"),
        ("phone", "12345"),
        ("eventType", "funeral"),
        ("timeSlot", "midnight"),
    ],
)
def test_invalid_fields_rejected(client, booking_payload, field, value):
    booking_payload[field] = value
    assert client.post("/bookings", json=booking_payload).status_code == 422


def test_missing_date_rejected(client, booking_payload):
    del booking_payload["date"]
    assert client.post("/bookings", json=booking_payload).status_code == 422


def test_booking_request_is_audited(client, db, booking_payload):
    client.post("/bookings", json=booking_payload)

    log = db.query(AuditLog).filter(AuditLog.action == "public.booking_requested").one()
    assert log.details == f"booking_id={db.query(Booking).one().id}"


def test_booking_rate_limit(client, booking_payload):
    for _ in range(5):
        assert client.post("/bookings", json=booking_payload).status_code == 200

    response = client.post("/bookings", json=booking_payload)
    assert response.status_code == 429


def test_estimate_endpoint(client):
    response = client.get("/bookings/estimate", params={"timeSlot": "morning", "guests": 250})

    assert response.status_code == 200
    assert response.json() == {
        "timeSlot": "morning",
        "guests": 250,
        "estimatedPrice": 20000,
    }


def test_estimate_endpoint_incomplete_input(client):
    response = client.get("/bookings/estimate", params={"timeSlot": "morning"})

    assert response.status_code == 200
    assert response.json()["estimatedPrice"] is None

    response = client.get("/bookings/estimate", params={"timeSlot": "nope", "guests": 10})
    assert response.json()["estimatedPrice"] is None
