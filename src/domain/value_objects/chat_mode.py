from enum import Enum


class ChatMode(str, Enum):
    """Which front-end surface a conversation comes from."""

    CHAT = "chat"
    HOTEL = "hotel"

    @classmethod
    def from_value(cls, value: str | None) -> "ChatMode":
        """Resolve a request's type field, treating anything unknown as chat."""
        if value == cls.HOTEL.value:
            return cls.HOTEL
        return cls.CHAT
