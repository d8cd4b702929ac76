import logging
from dataclasses import dataclass

from src.domain.entities.booking import BookingConfirmation
from src.domain.repositories.i_booking_repository import IBookingRepository
from src.domain.value_objects.booking_id import BookingId
from src.domain.value_objects.language import Language
from src.application.content import BOOKING_NEXT_STEPS
from src.application.dtos.booking_dtos import (
    BookingConfirmationDTO,
    BookingConfirmationRequest,
    booking_to_dto,
)

logger = logging.getLogger(__name__)


@dataclass
class RecordBookingUseCase:
    """Use case for storing a booking the assistant has completed."""

    booking_repository: IBookingRepository

    async def execute(
        self,
        request: BookingConfirmationRequest,
        language: Language = Language.DE,
    ) -> BookingConfirmationDTO:
        """Validate and persist a booking confirmation.

        Raises:
            InvalidBookingIdError: If a supplied booking ID is malformed
            InvalidBookingError: If the dates, nights or prices are inconsistent
        """
        booking_id = (
            BookingId(request.booking_id) if request.booking_id else BookingId.generate()
        )

        booking = BookingConfirmation(
            booking_id=booking_id,
            hotel=request.hotel,
            room=request.room,
            check_in=request.check_in,
            check_out=request.check_out,
            guests=request.guests,
            price_per_night=request.price_per_night,
            nights=request.nights,
            total=request.total,
        )

        await self.booking_repository.save(booking)
        logger.info("Recorded booking %s (%d nights)", booking.booking_id, booking.nights)

        return booking_to_dto(booking, BOOKING_NEXT_STEPS[language])
