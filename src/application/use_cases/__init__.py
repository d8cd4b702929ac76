from .proxy_chat import ProxyChatUseCase, ModeConfig
from .send_message import SendMessageUseCase
from .list_chats import ListChatsUseCase
from .get_chat import GetChatUseCase
from .delete_chat import DeleteChatUseCase
from .hotel_chat import HotelChatUseCase
from .record_booking import RecordBookingUseCase
from .get_booking import GetBookingUseCase
from .get_dashboard import GetDashboardUseCase

__all__ = [
    "ProxyChatUseCase",
    "ModeConfig",
    "SendMessageUseCase",
    "ListChatsUseCase",
    "GetChatUseCase",
    "DeleteChatUseCase",
    "HotelChatUseCase",
    "RecordBookingUseCase",
    "GetBookingUseCase",
    "GetDashboardUseCase",
]
