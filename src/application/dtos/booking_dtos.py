from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.booking import BookingConfirmation


class BookingConfirmationRequest(BaseModel):
    """Request DTO for recording a confirmed booking."""

    booking_id: Optional[str] = None  # generated as EDW-<millis> when missing
    hotel: str = "Hotel Edelweiss Obertauern"
    room: str
    check_in: date
    check_out: date
    guests: int = Field(ge=1)
    nights: Optional[int] = Field(default=None, ge=1)
    price_per_night: float = Field(ge=0)
    total: Optional[float] = Field(default=None, ge=0)

    model_config = {
        "json_schema_extra": {
            "example": {
                "room": "Deluxe Zimmer mit Bergblick",
                "check_in": "2025-12-17",
                "check_out": "2025-12-24",
                "guests": 2,
                "price_per_night": 180,
            }
        }
    }


class BookingConfirmationDTO(BaseModel):
    """Response DTO backing the booking confirmation screen."""

    booking_id: str
    hotel: str
    room: str
    check_in: str  # dd.mm.yyyy
    check_out: str
    guests: int
    nights: int
    price_per_night: float
    subtotal: float
    total: float
    next_steps: List[str]


def booking_to_dto(
    booking: BookingConfirmation, next_steps: List[str]
) -> BookingConfirmationDTO:
    """Map a BookingConfirmation entity to its DTO."""
    return BookingConfirmationDTO(
        booking_id=str(booking.booking_id),
        hotel=booking.hotel,
        room=booking.room,
        check_in=booking.check_in.strftime("%d.%m.%Y"),
        check_out=booking.check_out.strftime("%d.%m.%Y"),
        guests=booking.guests,
        nights=booking.nights or 0,
        price_per_night=booking.price_per_night,
        subtotal=booking.subtotal,
        total=booking.total if booking.total is not None else booking.subtotal,
        next_steps=next_steps,
    )
