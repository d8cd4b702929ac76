import logging
from dataclasses import dataclass

from src.domain.entities.chat import Chat
from src.domain.entities.message import Message
from src.domain.repositories.i_chat_repository import IChatRepository
from src.domain.value_objects.chat_id import ChatId
from src.domain.value_objects.chat_mode import ChatMode
from src.domain.value_objects.client_id import ClientId
from src.domain.exceptions.domain_exceptions import (
    ChatNotFoundError,
    ReadOnlyChatError,
)
from src.application.content import CHAT_ERROR_REPLY
from src.application.dtos.chat_dtos import (
    MessageDTO,
    SendMessageRequest,
    SendMessageResponse,
    chat_to_dto,
)
from src.application.dtos.edge_dtos import EdgeChatRequest
from src.application.exceptions import LLMProviderError
from src.application.use_cases.proxy_chat import ProxyChatUseCase

logger = logging.getLogger(__name__)


@dataclass
class SendMessageUseCase:
    """Use case for sending a message from the chat page."""

    chat_repository: IChatRepository
    proxy: ProxyChatUseCase

    async def execute(
        self,
        client_id: ClientId,
        request: SendMessageRequest,
    ) -> SendMessageResponse:
        """Process a user message and generate a response.

        1. Open a new chat or load the existing one
        2. Append the user message
        3. Forward the whole conversation through the chat proxy
        4. Append the reply and persist the chat

        If the proxy fails, the apology reply is appended but the chat is
        not persisted.

        Raises:
            ChatNotFoundError: If chat_id names a chat the client does not have
            ReadOnlyChatError: If chat_id names an example chat
        """
        user_message = Message.user_message(request.message)

        if request.chat_id:
            chat_id = ChatId(request.chat_id)
            if chat_id.is_example:
                raise ReadOnlyChatError(f"Chat {chat_id} is a read-only example")
            chat = await self.chat_repository.get_by_id(client_id, chat_id)
            if not chat:
                raise ChatNotFoundError(f"Chat {chat_id} not found")
            chat.add_message(user_message)
        else:
            chat = Chat.start(user_message)

        try:
            reply = await self.proxy.execute(
                EdgeChatRequest(
                    messages=chat.get_conversation_history(),
                    type=ChatMode.CHAT.value,
                )
            )
        except LLMProviderError as e:
            logger.error("Chat error for %s: %s", chat.id, e)
            chat.add_message(Message.assistant_message(CHAT_ERROR_REPLY))
            return SendMessageResponse(
                chat=chat_to_dto(chat),
                reply=MessageDTO(role="assistant", content=CHAT_ERROR_REPLY),
                delivered=False,
            )

        chat.add_message(Message.assistant_message(reply.message))
        await self.chat_repository.save(client_id, chat)

        return SendMessageResponse(
            chat=chat_to_dto(chat),
            reply=MessageDTO(role="assistant", content=reply.message),
        )
