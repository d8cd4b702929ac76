"""
Unit tests for domain entities.
"""

import pytest
from datetime import date
from freezegun import freeze_time

from src.domain.entities.message import Message, MessageRole
from src.domain.entities.chat import Chat
from src.domain.entities.booking import BookingConfirmation
from src.domain.value_objects.chat_id import ChatId
from src.domain.value_objects.booking_id import BookingId
from src.domain.exceptions.domain_exceptions import (
    InvalidBookingError,
    ReadOnlyChatError,
)


class TestMessage:
    """Tests for Message entity."""

    def test_user_message(self):
        message = Message.user_message("Hallo")
        assert message.role == MessageRole.USER
        assert message.content == "Hallo"

    def test_assistant_message(self):
        message = Message.assistant_message("Gerne!")
        assert message.role == MessageRole.ASSISTANT

    def test_to_dict(self):
        """Test the shape forwarded to the chat proxy."""
        assert Message.user_message("Hi").to_dict() == {"role": "user", "content": "Hi"}


class TestChat:
    """Tests for Chat entity."""

    @freeze_time("2025-01-01 00:00:00")
    def test_start_new_chat(self):
        """Test opening a chat from the first message."""
        chat = Chat.start(Message.user_message("Ich suche ein Zimmer für zwei Nächte"))

        assert chat.id == ChatId("chat-1735689600000")
        assert chat.title == "Ich suche ein Zimmer für zwei "
        assert len(chat.title) == 30
        assert chat.timestamp == 1735689600000
        assert chat.message_count == 1

    def test_short_title_kept_whole(self):
        chat = Chat.start(Message.user_message("Hallo"))
        assert chat.title == "Hallo"

    def test_add_message(self, test_chat: Chat):
        test_chat.add_message(Message.user_message("15. bis 22. Dezember"))
        assert test_chat.message_count == 3
        assert test_chat.messages[-1].content == "15. bis 22. Dezember"

    def test_example_chat_is_read_only(self):
        """Test that example chats reject new messages."""
        chat = Chat(id=ChatId.example(1), title="Beispiel")

        with pytest.raises(ReadOnlyChatError):
            chat.add_message(Message.user_message("Hallo"))
        assert chat.messages == []

    def test_conversation_history(self, test_chat: Chat):
        history = test_chat.get_conversation_history()
        assert history == [
            {"role": "user", "content": "Ich brauche ein Zimmer im Dezember"},
            {"role": "assistant", "content": "Gerne! Für welchen Zeitraum genau?"},
        ]


class TestBookingConfirmation:
    """Tests for BookingConfirmation entity."""

    def _booking(self, **overrides) -> BookingConfirmation:
        data = dict(
            booking_id=BookingId("EDW-1"),
            hotel="Hotel Edelweiss Obertauern",
            room="Deluxe Zimmer mit Bergblick",
            check_in=date(2025, 12, 17),
            check_out=date(2025, 12, 24),
            guests=2,
            price_per_night=180,
        )
        data.update(overrides)
        return BookingConfirmation(**data)

    def test_nights_derived_from_dates(self, test_booking: BookingConfirmation):
        assert test_booking.nights == 7

    def test_total_defaults_to_subtotal(self, test_booking: BookingConfirmation):
        assert test_booking.subtotal == 1260
        assert test_booking.total == 1260

    def test_explicit_total_kept(self):
        """Test that a total including fees is not overwritten."""
        booking = self._booking(total=1300)
        assert booking.subtotal == 1260
        assert booking.total == 1300

    def test_shorter_stay_within_span(self):
        booking = self._booking(nights=5)
        assert booking.subtotal == 900

    def test_check_out_before_check_in(self):
        with pytest.raises(InvalidBookingError):
            self._booking(check_out=date(2025, 12, 17))

    def test_nights_longer_than_span(self):
        with pytest.raises(InvalidBookingError):
            self._booking(nights=8)

    def test_zero_nights(self):
        with pytest.raises(InvalidBookingError):
            self._booking(nights=0)

    def test_no_guests(self):
        with pytest.raises(InvalidBookingError):
            self._booking(guests=0)

    def test_negative_price(self):
        with pytest.raises(InvalidBookingError):
            self._booking(price_per_night=-1)
