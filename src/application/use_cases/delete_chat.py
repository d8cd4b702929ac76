from dataclasses import dataclass

from src.domain.repositories.i_chat_repository import IChatRepository
from src.domain.value_objects.chat_id import ChatId
from src.domain.value_objects.client_id import ClientId


@dataclass
class DeleteChatUseCase:
    """Use case for removing a chat from the sidebar.

    Example chats cannot be deleted; asking to is a no-op, as is deleting
    a chat that is already gone.
    """

    chat_repository: IChatRepository

    async def execute(self, client_id: ClientId, chat_id: str) -> None:
        cid = ChatId(chat_id)
        if cid.is_example:
            return
        await self.chat_repository.delete(client_id, cid)
