import re
from dataclasses import dataclass

from .chat_id import now_millis
from ..exceptions.domain_exceptions import InvalidBookingIdError


@dataclass(frozen=True)
class BookingId:
    """Immutable value object representing a hotel booking reference."""

    value: str

    PREFIX = "EDW"
    PATTERN = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_\-]{0,63}$")

    def __post_init__(self) -> None:
        if not self.PATTERN.match(self.value):
            raise InvalidBookingIdError(f"Invalid booking ID: {self.value!r}")

    @classmethod
    def generate(cls) -> "BookingId":
        """Generate an EDW-<millis> reference."""
        return cls(value=f"{cls.PREFIX}-{now_millis()}")

    def __str__(self) -> str:
        return self.value
