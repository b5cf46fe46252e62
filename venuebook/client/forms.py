from pydantic import BaseModel, ValidationError

from venuebook.client.api import ApiClient
from venuebook.core.pricing import PriceEstimator
from venuebook.schemas.booking import BookingCreate
from venuebook.schemas.contact import ContactCreate

"""
PUBLIC FORMS

Client side of the booking and contact forms. Field rules come from the
same pydantic schemas the API validates with, and a form that fails them
never reaches the network.
"""


class FormValidationError(Exception):
    def __init__(self, errors: dict[str, str]):
        self.errors = errors
        super().__init__(", ".join(f"{field}: {msg}" for field, msg in errors.items()))


class SubmissionInProgress(Exception):
    pass


#Map pydantic errors to {field: first message}, keyed by python field name
def field_errors(exc: ValidationError, schema: type[BaseModel]) -> dict[str, str]:
    by_alias = {
        (info.alias or name): name for name, info in schema.model_fields.items()
    }
    errors = {}
    for error in exc.errors():
        loc = error["loc"][0] if error["loc"] else "__root__"
        field = by_alias.get(loc, loc)
        errors.setdefault(field, error["msg"])
    return errors


class _Form:
    schema: type[BaseModel]
    endpoint: str

    def __init__(self, api: ApiClient, prefilled: dict | None = None):
        self.api = api
        self.values = {}
        self.errors = {}
        self.submitting = False
        if prefilled:
            self.set(**prefilled)

    def set(self, **fields) -> None:
        self.values.update(fields)
        for name in fields:
            self.errors.pop(name, None)

    def payload(self) -> dict:
        return dict(self.values)

    def validate(self) -> BaseModel:
        try:
            model = self.schema(**self.payload())
        except ValidationError as e:
            self.errors = field_errors(e, self.schema)
            raise FormValidationError(self.errors) from None

        self.errors = {}
        return model

    def submit(self) -> dict:
        """
        Validate, then send exactly one request.

        The submitting flag is held for the duration of the call; a second
        submit while it is set is refused. On failure the form keeps its
        values and the error propagates to the caller.
        """
        if self.submitting:
            raise SubmissionInProgress(f"{self.endpoint} submission already in progress")

        model = self.validate()

        self.submitting = True
        try:
            data = self.api.post(
                self.endpoint,
                json=model.model_dump(by_alias=True, mode="json", exclude_none=True),
            )
        finally:
            self.submitting = False

        self.reset()
        return data

    def reset(self) -> None:
        self.values = {}
        self.errors = {}


#Form inputs arrive as text, digit strings become ints
def _guest_count(value):
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    return value


class BookingForm(_Form):
    schema = BookingCreate
    endpoint = "/bookings"

    def __init__(self, api: ApiClient, prefilled: dict | None = None):
        self.estimator = PriceEstimator()
        super().__init__(api, prefilled)

    def set(self, **fields) -> None:
        if "guests" in fields:
            fields["guests"] = _guest_count(fields["guests"])
        super().set(**fields)
        inputs = {k: fields[k] for k in ("time_slot", "guests") if k in fields}
        if inputs:
            self.estimator.update(**inputs)

    @property
    def estimated_price(self) -> int | None:
        return self.estimator.value

    def payload(self) -> dict:
        payload = super().payload()
        payload["estimated_price"] = self.estimated_price
        return payload

    def validate(self) -> BookingCreate:
        try:
            return super().validate()
        except FormValidationError as e:
            if self.values.get("date") is None:
                e.errors["date"] = "Please select a date"
            raise

    def reset(self) -> None:
        super().reset()
        self.estimator.reset()


class ContactForm(_Form):
    schema = ContactCreate
    endpoint = "/contact"
