from dataclasses import dataclass
from enum import Enum


class MessageRole(Enum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class Message:
    """Represents a single message in a chat conversation."""

    role: MessageRole
    content: str

    @classmethod
    def user_message(cls, content: str) -> "Message":
        return cls(role=MessageRole.USER, content=content)

    @classmethod
    def assistant_message(cls, content: str) -> "Message":
        return cls(role=MessageRole.ASSISTANT, content=content)

    def to_dict(self) -> dict:
        return {"role": self.role.value, "content": self.content}
