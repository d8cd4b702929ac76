from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from src.domain.entities.chat import Chat


class MessageDTO(BaseModel):
    """DTO representing a single chat message."""

    role: Literal["user", "assistant"]
    content: str


class SendMessageRequest(BaseModel):
    """Request DTO for sending a message from the chat page."""

    message: str
    chat_id: Optional[str] = None  # None starts a new chat

    @field_validator("message")
    @classmethod
    def message_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Message must not be empty")
        return value

    model_config = {
        "json_schema_extra": {
            "example": {
                "message": "/looking Zimmer für 2 Erwachsene vom 17.12. bis 24.12.2025",
                "chat_id": None,
            }
        }
    }


class ChatDTO(BaseModel):
    """DTO representing a chat in the sidebar."""

    id: str
    title: str
    timestamp: int
    message_count: int
    is_example: bool = False
    messages: Optional[List[MessageDTO]] = None


class ChatListResponse(BaseModel):
    """Response DTO for the chat sidebar."""

    examples: List[ChatDTO]
    chats: List[ChatDTO]
    total: int


class SendMessageResponse(BaseModel):
    """Response DTO after a message round-trip.

    ``delivered`` is False when the assistant could not be reached and
    ``reply`` holds the fallback apology instead of a model answer.
    """

    chat: ChatDTO
    reply: MessageDTO
    delivered: bool = True


class LookingPreviewDTO(BaseModel):
    show: bool
    suggestion: Optional[str] = None


class HotelChatRequest(BaseModel):
    """Conversation held by the hotel page widget."""

    messages: List[MessageDTO] = Field(min_length=1)


class HotelChatResponse(BaseModel):
    messages: List[MessageDTO]
    reply: MessageDTO
    delivered: bool = True


def chat_to_dto(chat: Chat, include_messages: bool = True) -> ChatDTO:
    """Map a Chat entity to its DTO."""
    messages = None
    if include_messages:
        messages = [
            MessageDTO(role=msg.role.value, content=msg.content)
            for msg in chat.messages
        ]
    return ChatDTO(
        id=str(chat.id),
        title=chat.title,
        timestamp=chat.timestamp,
        message_count=chat.message_count,
        is_example=chat.is_example,
        messages=messages,
    )
