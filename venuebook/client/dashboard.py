import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable

from venuebook.client.forms import SubmissionInProgress
from venuebook.client.session import SessionContext
from venuebook.core import workflow

logger = logging.getLogger(__name__)

"""
ADMIN DASHBOARD

Holds one admin's snapshot of stats, bookings and contact messages and
drives booking status changes. The snapshot is never patched locally:
every successful mutation hands back a Reload that re-reads the whole
dataset from the server.
"""


EMPTY_STATS = {
    "totalBookings": 0,
    "pendingBookings": 0,
    "confirmedBookings": 0,
    "totalRevenue": 0,
    "monthlyRevenue": 0,
}


@dataclass
class DashboardSnapshot:
    stats: dict = field(default_factory=lambda: dict(EMPTY_STATS))
    bookings: list = field(default_factory=list)
    contacts: list = field(default_factory=list)

    def booking(self, booking_id: int) -> dict | None:
        return next((b for b in self.bookings if b["id"] == booking_id), None)

    def bookings_with_status(self, status: str = "all") -> list:
        if status == "all":
            return list(self.bookings)
        return [b for b in self.bookings if b["status"] == status]


@dataclass(frozen=True)
class Reload:
    """Re-fetch contract returned by every successful mutation."""

    dashboard: "AdminDashboard"
    reason: str

    def __call__(self) -> DashboardSnapshot:
        return self.dashboard.refresh()


class AdminDashboard:
    def __init__(self, session: SessionContext):
        session.require_admin()
        self.session = session
        self.api = session.api
        self.snapshot = DashboardSnapshot()
        self.busy = set()

    def refresh(self) -> DashboardSnapshot:
        stats = self.api.get("/admin/stats")
        bookings = self.api.get("/admin/bookings")
        contacts = self.api.get("/admin/contacts")

        self.snapshot = DashboardSnapshot(
            stats=stats["stats"],
            bookings=bookings["bookings"],
            contacts=contacts["contacts"],
        )
        return self.snapshot

    def allowed_actions(self, booking_id: int) -> list[str]:
        booking = self._booking(booking_id)
        return workflow.allowed_actions(booking["status"])

    def confirm(self, booking_id: int) -> Reload:
        return self._transition(booking_id, workflow.CONFIRM)

    def cancel(self, booking_id: int) -> Reload:
        return self._transition(booking_id, workflow.CANCEL)

    def delete(self, booking_id: int, confirm: Callable[[str], bool]) -> Reload | None:
        """
        Remove a booking after an explicit yes from `confirm`.

        Returns None, without any remote call, when the operator declines.
        """
        self._booking(booking_id)
        if not confirm("Are you sure you want to delete this booking?"):
            return None

        with self._hold(booking_id):
            self.api.delete(f"/admin/bookings/{booking_id}")

        logger.info("Deleted booking %s", booking_id)
        return Reload(self, reason=f"booking {booking_id} deleted")

    def _transition(self, booking_id: int, action: str) -> Reload:
        booking = self._booking(booking_id)
        target = workflow.apply(booking["status"], action)

        with self._hold(booking_id):
            self.api.patch(
                f"/admin/bookings/{booking_id}/status",
                json={"status": target},
            )

        logger.info("Booking %s %s", booking_id, target)
        return Reload(self, reason=f"booking {booking_id} {target}")

    def _booking(self, booking_id: int) -> dict:
        booking = self.snapshot.booking(booking_id)
        if booking is None:
            raise KeyError(f"Booking {booking_id} is not in the loaded snapshot")
        return booking

    #Disables a booking's controls while its request is outstanding
    @contextmanager
    def _hold(self, booking_id: int):
        if booking_id in self.busy:
            raise SubmissionInProgress(f"Booking {booking_id} already has a request in flight")
        self.busy.add(booking_id)
        try:
            yield
        finally:
            self.busy.discard(booking_id)
