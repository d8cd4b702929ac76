import re
import time
from dataclasses import dataclass

from ..exceptions.domain_exceptions import InvalidChatIdError


def now_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class ChatId:
    """Immutable value object identifying a stored or example chat."""

    value: str

    PATTERN = re.compile(r"^(chat|example)-\d+$")

    def __post_init__(self) -> None:
        if not self.PATTERN.match(self.value):
            raise InvalidChatIdError(f"Invalid chat ID format: {self.value}")

    @classmethod
    def generate(cls) -> "ChatId":
        """Generate a chat ID from the current timestamp."""
        return cls(value=f"chat-{now_millis()}")

    @classmethod
    def example(cls, number: int) -> "ChatId":
        return cls(value=f"example-{number}")

    @property
    def is_example(self) -> bool:
        return self.value.startswith("example-")

    def __str__(self) -> str:
        return self.value
