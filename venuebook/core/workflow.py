"""
BOOKING STATUS WORKFLOW

pending --confirm--> confirmed
pending --cancel---> cancelled
any     --delete---> (record removed)

confirmed and cancelled are terminal. Transitions are only ever driven
by an administrator; a booking never changes state on its own.
"""


PENDING = "pending"
CONFIRMED = "confirmed"
CANCELLED = "cancelled"

STATUSES = (PENDING, CONFIRMED, CANCELLED)

CONFIRM = "confirm"
CANCEL = "cancel"
DELETE = "delete"

TRANSITIONS = {
    (PENDING, CONFIRM): CONFIRMED,
    (PENDING, CANCEL): CANCELLED,
}

#Target status requested over the API -> workflow action
ACTION_FOR_STATUS = {
    CONFIRMED: CONFIRM,
    CANCELLED: CANCEL,
}


class InvalidTransition(Exception):
    def __init__(self, status: str, action: str):
        self.status = status
        self.action = action
        super().__init__(f"Cannot {action} a booking that is {status}")


#Apply an action to a status; None means the record is removed
def apply(status: str, action: str) -> str | None:
    if status not in STATUSES:
        raise InvalidTransition(status, action)

    if action == DELETE:
        return None

    try:
        return TRANSITIONS[(status, action)]
    except KeyError:
        raise InvalidTransition(status, action) from None


#Actions an admin may be offered for a booking in this status
def allowed_actions(status: str) -> list[str]:
    actions = [action for (source, action) in TRANSITIONS if source == status]
    actions.append(DELETE)
    return actions
