from dataclasses import dataclass, field
from typing import List

from .message import Message
from ..exceptions.domain_exceptions import ReadOnlyChatError
from ..value_objects.chat_id import ChatId, now_millis

TITLE_LENGTH = 30


@dataclass
class Chat:
    """A conversation shown in the chat sidebar."""

    id: ChatId
    title: str
    messages: List[Message] = field(default_factory=list)
    timestamp: int = field(default_factory=now_millis)

    @classmethod
    def start(cls, first_message: Message) -> "Chat":
        """Open a new chat titled after the first user message."""
        return cls(
            id=ChatId.generate(),
            title=first_message.content[:TITLE_LENGTH],
            messages=[first_message],
        )

    @property
    def is_example(self) -> bool:
        return self.id.is_example

    def add_message(self, message: Message) -> None:
        if self.is_example:
            raise ReadOnlyChatError(f"Chat {self.id} is a read-only example")
        self.messages.append(message)

    def get_conversation_history(self) -> List[dict]:
        """Returns messages in the shape the chat proxy forwards."""
        return [msg.to_dict() for msg in self.messages]

    @property
    def message_count(self) -> int:
        return len(self.messages)
