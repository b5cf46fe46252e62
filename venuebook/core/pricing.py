from venuebook.core.catalog import TIME_SLOTS_BY_ID

"""
PRICE ESTIMATION

Estimated price = base price of the time slot, plus a flat per-guest
surcharge for every guest above the threshold. Range checks on the
guest count belong to the booking schema, not here.
"""


SURCHARGE_THRESHOLD = 200
SURCHARGE_PER_GUEST = 100


#Estimate a booking price, None when the inputs are incomplete or not usable
def estimate_price(time_slot: str | None, guests: int | None) -> int | None:
    slot = TIME_SLOTS_BY_ID.get(time_slot) if isinstance(time_slot, str) else None
    if slot is None or isinstance(guests, bool) or not isinstance(guests, int) or not guests:
        return None

    price = slot.base_price
    if guests > SURCHARGE_THRESHOLD:
        price += (guests - SURCHARGE_THRESHOLD) * SURCHARGE_PER_GUEST

    return price


class PriceEstimator:
    """
    Running estimate for a booking form.

    Inputs are pushed with update(); the estimate is recomputed lazily and
    only when the slot or guest count differs from the last computation.
    """

    def __init__(self, time_slot: str | None = None, guests: int | None = None):
        self.time_slot = time_slot
        self.guests = guests
        self._computed_for = None
        self._value = None

    def update(self, **inputs) -> int | None:
        if "time_slot" in inputs:
            self.time_slot = inputs.pop("time_slot")
        if "guests" in inputs:
            self.guests = inputs.pop("guests")
        if inputs:
            raise TypeError(f"Unknown estimator inputs: {sorted(inputs)}")
        return self.value

    @property
    def value(self) -> int | None:
        key = (self.time_slot, self.guests)
        if key != self._computed_for:
            self._value = estimate_price(self.time_slot, self.guests)
            self._computed_for = key
        return self._value

    def reset(self) -> None:
        self.time_slot = None
        self.guests = None
