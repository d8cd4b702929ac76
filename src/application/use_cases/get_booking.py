from dataclasses import dataclass
from datetime import date

from src.domain.entities.booking import BookingConfirmation
from src.domain.repositories.i_booking_repository import IBookingRepository
from src.domain.value_objects.booking_id import BookingId
from src.domain.value_objects.language import Language
from src.domain.exceptions.domain_exceptions import BookingNotFoundError
from src.application.content import BOOKING_NEXT_STEPS
from src.application.dtos.booking_dtos import BookingConfirmationDTO, booking_to_dto


def demo_booking() -> BookingConfirmation:
    """The sample stay the confirmation screen shows without a real booking."""
    return BookingConfirmation(
        booking_id=BookingId("EDW-DEMO"),
        hotel="Hotel Edelweiss Obertauern",
        room="Deluxe Zimmer mit Bergblick",
        check_in=date(2025, 12, 17),
        check_out=date(2025, 12, 24),
        guests=2,
        nights=7,
        price_per_night=180,
        total=1260,
    )


@dataclass
class GetBookingUseCase:
    """Use case for the booking confirmation screen."""

    booking_repository: IBookingRepository

    async def execute(
        self,
        booking_id: str,
        language: Language = Language.DE,
    ) -> BookingConfirmationDTO:
        """Get a booking confirmation by ID.

        Raises:
            BookingNotFoundError: If no booking was recorded under the ID
        """
        bid = BookingId(booking_id)
        booking = await self.booking_repository.get_by_id(bid)

        if not booking:
            raise BookingNotFoundError(f"Booking {booking_id} not found")

        return booking_to_dto(booking, BOOKING_NEXT_STEPS[language])

    def demo(self, language: Language = Language.DE) -> BookingConfirmationDTO:
        return booking_to_dto(demo_booking(), BOOKING_NEXT_STEPS[language])
