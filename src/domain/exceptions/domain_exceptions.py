class DomainError(Exception):
    """Base exception for all domain-level errors."""

    pass


class InvalidChatIdError(DomainError):
    """Raised when a chat ID does not follow the chat-<millis> format."""

    pass


class InvalidClientIdError(DomainError):
    """Raised when a client ID is empty or contains unsupported characters."""

    pass


class InvalidBookingIdError(DomainError):
    """Raised when a booking ID is empty or malformed."""

    pass


class InvalidBookingError(DomainError):
    """Raised when booking confirmation details are inconsistent."""

    pass


class ChatNotFoundError(DomainError):
    """Raised when a requested chat does not exist."""

    pass


class ReadOnlyChatError(DomainError):
    """Raised when trying to modify one of the built-in example chats."""

    pass


class BookingNotFoundError(DomainError):
    """Raised when a requested booking confirmation does not exist."""

    pass
