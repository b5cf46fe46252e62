from datetime import date, timedelta

import pytest

from venuebook.client.api import ApiClient, RemoteCallError
from venuebook.client.forms import (
    BookingForm,
    ContactForm,
    FormValidationError,
    SubmissionInProgress,
)
from venuebook.db.models import Booking

from conftest import future_date


class RecordingApi:
    def __init__(self, response=None, error=None):
        self.calls = []
        self.response = response if response is not None else {"success": True}
        self.error = error

    def post(self, path, **kwargs):
        self.calls.append((path, kwargs))
        if self.error:
            raise self.error
        return self.response


@pytest.fixture
def filled_form():
    def _fill(api):
        form = BookingForm(api)
        form.set(
            name="Asha Patil",
            email="asha.patil@gmail.com",
            phone="9876543210",
            event_type="reception",
            date=future_date(),
            time_slot="afternoon",
            guests=150,
        )
        return form

    return _fill


def test_estimate_follows_inputs():
    form = BookingForm(RecordingApi())
    assert form.estimated_price is None

    form.set(time_slot="morning")
    assert form.estimated_price is None

    form.set(guests=250)
    assert form.estimated_price == 20000

    form.set(guests=180)
    assert form.estimated_price == 15000


def test_prefilled_values_feed_estimate():
    form = BookingForm(RecordingApi(), prefilled={"time_slot": "fullday", "guests": 500})
    assert form.estimated_price == 75000


def test_submit_sends_wire_payload(filled_form):
    api = RecordingApi()
    form = filled_form(api)

    result = form.submit()

    assert result == {"success": True}
    [(path, kwargs)] = api.calls
    assert path == "/bookings"
    assert kwargs["json"] == {
        "name": "Asha Patil",
        "email": "asha.patil@gmail.com",
        "phone": "9876543210",
        "eventType": "reception",
        "date": future_date().isoformat(),
        "timeSlot": "afternoon",
        "guests": 150,
        "estimatedPrice": 20000,
    }


def test_successful_submit_resets_form(filled_form):
    form = filled_form(RecordingApi())
    form.submit()

    assert form.values == {}
    assert form.estimated_price is None
    assert form.submitting is False


@pytest.mark.parametrize("guests", [0, 501])
def test_guest_count_rejected_before_remote_call(filled_form, guests):
    api = RecordingApi()
    form = filled_form(api)
    form.set(guests=guests)

    with pytest.raises(FormValidationError) as exc:
        form.submit()

    assert "guests" in exc.value.errors
    assert api.calls == []


def test_past_date_rejected_before_remote_call(filled_form):
    api = RecordingApi()
    form = filled_form(api)
    form.set(date=date.today() - timedelta(days=1))

    with pytest.raises(FormValidationError) as exc:
        form.submit()

    assert "past" in exc.value.errors["date"]
    assert api.calls == []


def test_missing_date_has_friendly_message(filled_form):
    api = RecordingApi()
    form = filled_form(api)
    del form.values["date"]

    with pytest.raises(FormValidationError) as exc:
        form.submit()

    assert exc.value.errors["date"] == "Please select a date"
    assert api.calls == []


def test_errors_keyed_by_field_name():
    form = BookingForm(RecordingApi())
    form.set(name="A", email="nope", guests=10, time_slot="morning")

    with pytest.raises(FormValidationError):
        form.validate()

    assert {"name", "email", "phone", "event_type", "date"} <= set(form.errors)

    form.set(name="Asha")
    assert "name" not in form.errors


def test_remote_failure_keeps_values_and_clears_flag(filled_form):
    api = RecordingApi(error=RemoteCallError("Server down", status_code=503))
    form = filled_form(api)

    with pytest.raises(RemoteCallError):
        form.submit()

    assert form.submitting is False
    assert form.values["name"] == "Asha Patil"
    assert form.estimated_price == 20000


def test_duplicate_submit_refused(filled_form):
    api = RecordingApi()
    form = filled_form(api)
    form.submitting = True

    with pytest.raises(SubmissionInProgress):
        form.submit()

    assert api.calls == []


def test_contact_form_submit():
    api = RecordingApi()
    form = ContactForm(api)
    form.set(
        name="Meera Joshi",
        email="meera.joshi@gmail.com",
        phone="9988776655",
        subject="Catering options",
        message="Do you offer a Jain menu for 300 guests?",
    )

    form.submit()

    [(path, kwargs)] = api.calls
    assert path == "/contact"
    assert kwargs["json"]["subject"] == "Catering options"


def test_contact_form_validation():
    api = RecordingApi()
    form = ContactForm(api)
    form.set(name="Meera", email="meera.joshi@gmail.com", phone="9988776655", subject="Hi", message="short")

    with pytest.raises(FormValidationError) as exc:
        form.submit()

    assert set(exc.value.errors) == {"subject", "message"}
    assert api.calls == []


def test_booking_form_against_api(client, db, filled_form):
    api = ApiClient(http=client)
    form = filled_form(api)

    result = form.submit()

    assert result["success"] is True
    booking = db.query(Booking).one()
    assert booking.event_type == "reception"
    assert booking.estimated_price == 20000


def test_text_guest_count_is_coerced(filled_form):
    api = RecordingApi()
    form = filled_form(api)

    form.set(time_slot="morning", guests="250")

    assert form.values["guests"] == 250
    assert form.estimated_price == 20000

    form.submit()
    [(_, kwargs)] = api.calls
    assert kwargs["json"]["guests"] == 250
    assert kwargs["json"]["estimatedPrice"] == 20000


def test_unparseable_guest_count(filled_form):
    api = RecordingApi()
    form = filled_form(api)

    form.set(guests="lots")

    assert form.estimated_price is None
    with pytest.raises(FormValidationError) as exc:
        form.submit()

    assert "guests" in exc.value.errors
    assert api.calls == []
