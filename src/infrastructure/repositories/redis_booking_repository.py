import json
from datetime import date
from typing import Any, Optional

import redis.asyncio as aioredis

from src.domain.entities.booking import BookingConfirmation
from src.domain.repositories.i_booking_repository import IBookingRepository
from src.domain.value_objects.booking_id import BookingId


class RedisBookingRepository(IBookingRepository):
    """Redis-based repository for booking confirmations."""

    def __init__(self, redis_url: str):
        self._redis_url = redis_url
        self._client: Any = None

    async def _get_client(self) -> Any:
        if self._client is None:
            self._client = aioredis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    def _serialize_booking(self, booking: BookingConfirmation) -> str:
        """Serialize booking to JSON."""
        return json.dumps(
            {
                "booking_id": str(booking.booking_id),
                "hotel": booking.hotel,
                "room": booking.room,
                "check_in": booking.check_in.isoformat(),
                "check_out": booking.check_out.isoformat(),
                "guests": booking.guests,
                "nights": booking.nights,
                "price_per_night": booking.price_per_night,
                "total": booking.total,
            }
        )

    def _deserialize_booking(self, data: str) -> BookingConfirmation:
        """Deserialize booking from JSON."""
        obj = json.loads(data)
        return BookingConfirmation(
            booking_id=BookingId(obj["booking_id"]),
            hotel=obj["hotel"],
            room=obj["room"],
            check_in=date.fromisoformat(obj["check_in"]),
            check_out=date.fromisoformat(obj["check_out"]),
            guests=obj["guests"],
            nights=obj.get("nights"),
            price_per_night=obj["price_per_night"],
            total=obj.get("total"),
        )

    async def get_by_id(self, booking_id: BookingId) -> Optional[BookingConfirmation]:
        """Retrieve a booking confirmation by its ID."""
        client = await self._get_client()
        data = await client.get(f"booking:{booking_id}")
        if data:
            return self._deserialize_booking(data)
        return None

    async def save(self, booking: BookingConfirmation) -> None:
        """Persist a booking confirmation."""
        client = await self._get_client()
        await client.set(
            f"booking:{booking.booking_id}",
            self._serialize_booking(booking),
        )

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._client:
            await self._client.aclose()
            self._client = None
