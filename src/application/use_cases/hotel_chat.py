import logging
from dataclasses import dataclass

from src.domain.value_objects.chat_mode import ChatMode
from src.domain.value_objects.language import Language
from src.application.content import HOTEL_WELCOME
from src.application.dtos.chat_dtos import HotelChatRequest, HotelChatResponse, MessageDTO
from src.application.dtos.edge_dtos import EdgeChatRequest
from src.application.exceptions import LLMProviderError
from src.application.use_cases.proxy_chat import ProxyChatUseCase

logger = logging.getLogger(__name__)


def hotel_welcome(language: Language = Language.DE) -> MessageDTO:
    """Opening assistant message of the hotel page widget."""
    return MessageDTO(role="assistant", content=HOTEL_WELCOME[language])


@dataclass
class HotelChatUseCase:
    """Use case for the booking widget on the hotel page.

    The widget keeps its conversation client-side; nothing is stored here.
    """

    proxy: ProxyChatUseCase

    async def execute(
        self,
        request: HotelChatRequest,
        language: Language = Language.DE,
    ) -> HotelChatResponse:
        delivered = True
        try:
            reply = await self.proxy.execute(
                EdgeChatRequest(
                    messages=[m.model_dump() for m in request.messages],
                    type=ChatMode.HOTEL.value,
                )
            )
            answer = MessageDTO(role="assistant", content=reply.message)
        except LLMProviderError as e:
            logger.error("Hotel chat error: %s", e)
            # The widget falls back to its greeting rather than an apology.
            answer = hotel_welcome(language)
            delivered = False

        return HotelChatResponse(
            messages=[*request.messages, answer],
            reply=answer,
            delivered=delivered,
        )
