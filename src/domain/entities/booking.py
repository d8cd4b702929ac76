from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..exceptions.domain_exceptions import InvalidBookingError
from ..value_objects.booking_id import BookingId


@dataclass
class BookingConfirmation:
    """A confirmed room booking as shown on the confirmation screen."""

    booking_id: BookingId
    hotel: str
    room: str
    check_in: date
    check_out: date
    guests: int
    price_per_night: float
    nights: Optional[int] = None
    total: Optional[float] = None

    def __post_init__(self) -> None:
        span = (self.check_out - self.check_in).days
        if span < 1:
            raise InvalidBookingError("Check-out must be after check-in")
        if self.nights is None:
            self.nights = span
        if self.nights < 1 or self.nights > span:
            raise InvalidBookingError(
                f"Stay of {self.nights} nights does not fit between "
                f"{self.check_in.isoformat()} and {self.check_out.isoformat()}"
            )
        if self.guests < 1:
            raise InvalidBookingError("A booking needs at least one guest")
        if self.price_per_night < 0:
            raise InvalidBookingError("Price per night cannot be negative")
        if self.total is None:
            self.total = self.subtotal

    @property
    def subtotal(self) -> float:
        return (self.nights or 0) * self.price_per_night
