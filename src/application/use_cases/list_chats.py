from dataclasses import dataclass

from src.domain.repositories.i_chat_repository import IChatRepository
from src.domain.value_objects.client_id import ClientId
from src.domain.value_objects.language import Language
from src.application.content import example_chats
from src.application.dtos.chat_dtos import ChatListResponse, chat_to_dto


@dataclass
class ListChatsUseCase:
    """Use case for building the chat sidebar."""

    chat_repository: IChatRepository

    async def execute(
        self,
        client_id: ClientId,
        language: Language = Language.DE,
    ) -> ChatListResponse:
        chats = await self.chat_repository.list_all(client_id)

        return ChatListResponse(
            examples=[
                chat_to_dto(c, include_messages=False) for c in example_chats(language)
            ],
            chats=[chat_to_dto(c, include_messages=False) for c in chats],
            total=len(chats),
        )
