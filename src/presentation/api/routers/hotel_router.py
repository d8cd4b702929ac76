"""
Hotel Router - The booking widget on the hotel page.
"""

from fastapi import APIRouter

from src.application.dtos.chat_dtos import HotelChatRequest, HotelChatResponse, MessageDTO
from src.application.use_cases.hotel_chat import hotel_welcome
from src.domain.value_objects.language import Language
from src.presentation.api.dependencies import HotelChatUseCaseDep

router = APIRouter(prefix="/hotel", tags=["hotel"])


@router.get(
    "/chat/welcome",
    response_model=MessageDTO,
    summary="Widget greeting",
)
async def welcome(language: Language = Language.DE):
    return hotel_welcome(language)


@router.post(
    "/chat",
    response_model=HotelChatResponse,
    summary="Chat with the booking widget",
    description="Forward the widget's conversation and append the assistant reply.",
)
async def hotel_chat(
    request: HotelChatRequest,
    use_case: HotelChatUseCaseDep,
    language: Language = Language.DE,
):
    """Nothing is stored; the widget sends its whole conversation each time."""
    return await use_case.execute(request=request, language=language)
