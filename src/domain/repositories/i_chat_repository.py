from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.chat import Chat
from ..value_objects.chat_id import ChatId
from ..value_objects.client_id import ClientId


class IChatRepository(ABC):
    """Abstract repository interface for a client's stored chats."""

    @abstractmethod
    async def get_by_id(self, client_id: ClientId, chat_id: ChatId) -> Optional[Chat]:
        """Retrieve a stored chat by its ID."""
        pass

    @abstractmethod
    async def save(self, client_id: ClientId, chat: Chat) -> None:
        """Persist a chat, prepending it when it is new."""
        pass

    @abstractmethod
    async def delete(self, client_id: ClientId, chat_id: ChatId) -> None:
        """Delete a stored chat."""
        pass

    @abstractmethod
    async def list_all(self, client_id: ClientId) -> List[Chat]:
        """List the client's stored chats, newest first."""
        pass
