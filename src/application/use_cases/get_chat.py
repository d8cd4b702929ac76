from dataclasses import dataclass

from src.domain.repositories.i_chat_repository import IChatRepository
from src.domain.value_objects.chat_id import ChatId
from src.domain.value_objects.client_id import ClientId
from src.domain.value_objects.language import Language
from src.domain.exceptions.domain_exceptions import ChatNotFoundError
from src.application.content import example_chats
from src.application.dtos.chat_dtos import ChatDTO, chat_to_dto


@dataclass
class GetChatUseCase:
    """Use case for opening a stored or example chat."""

    chat_repository: IChatRepository

    async def execute(
        self,
        client_id: ClientId,
        chat_id: str,
        language: Language = Language.DE,
    ) -> ChatDTO:
        """Get a chat by ID.

        Raises:
            ChatNotFoundError: If the chat doesn't exist
        """
        cid = ChatId(chat_id)

        if cid.is_example:
            for example in example_chats(language):
                if example.id == cid:
                    return chat_to_dto(example)
            raise ChatNotFoundError(f"Chat {chat_id} not found")

        chat = await self.chat_repository.get_by_id(client_id, cid)
        if not chat:
            raise ChatNotFoundError(f"Chat {chat_id} not found")

        return chat_to_dto(chat)
