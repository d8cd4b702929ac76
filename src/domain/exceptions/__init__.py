from .domain_exceptions import (
    DomainError,
    InvalidChatIdError,
    InvalidClientIdError,
    InvalidBookingIdError,
    InvalidBookingError,
    ChatNotFoundError,
    ReadOnlyChatError,
    BookingNotFoundError,
)

__all__ = [
    "DomainError",
    "InvalidChatIdError",
    "InvalidClientIdError",
    "InvalidBookingIdError",
    "InvalidBookingError",
    "ChatNotFoundError",
    "ReadOnlyChatError",
    "BookingNotFoundError",
]
