from abc import ABC, abstractmethod
from typing import Optional

from ..entities.booking import BookingConfirmation
from ..value_objects.booking_id import BookingId


class IBookingRepository(ABC):
    """Abstract repository interface for booking confirmations."""

    @abstractmethod
    async def get_by_id(self, booking_id: BookingId) -> Optional[BookingConfirmation]:
        pass

    @abstractmethod
    async def save(self, booking: BookingConfirmation) -> None:
        pass
