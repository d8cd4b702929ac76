from .edge_dtos import EdgeChatRequest, EdgeChatResponse, EdgeMessageDTO, ToolUseDTO
from .chat_dtos import (
    MessageDTO,
    SendMessageRequest,
    SendMessageResponse,
    ChatDTO,
    ChatListResponse,
    LookingPreviewDTO,
    HotelChatRequest,
    HotelChatResponse,
)
from .booking_dtos import BookingConfirmationRequest, BookingConfirmationDTO
from .analytics_dtos import AnalyticsSummaryDTO, DashboardDTO

__all__ = [
    "EdgeChatRequest",
    "EdgeChatResponse",
    "EdgeMessageDTO",
    "ToolUseDTO",
    "MessageDTO",
    "SendMessageRequest",
    "SendMessageResponse",
    "ChatDTO",
    "ChatListResponse",
    "LookingPreviewDTO",
    "HotelChatRequest",
    "HotelChatResponse",
    "BookingConfirmationRequest",
    "BookingConfirmationDTO",
    "AnalyticsSummaryDTO",
    "DashboardDTO",
]
