"""
Chats Router - Endpoints behind the chat page.
"""

from fastapi import APIRouter, HTTPException, Query, status

from src.application.content import LOOKING_PREVIEW
from src.application.dtos.chat_dtos import (
    ChatDTO,
    ChatListResponse,
    LookingPreviewDTO,
    SendMessageRequest,
    SendMessageResponse,
)
from src.domain.exceptions.domain_exceptions import (
    ChatNotFoundError,
    InvalidChatIdError,
    ReadOnlyChatError,
)
from src.domain.value_objects.language import Language
from src.domain.value_objects.looking_command import should_show_looking_preview
from src.presentation.api.dependencies import (
    ClientIdDep,
    DeleteChatUseCaseDep,
    GetChatUseCaseDep,
    ListChatsUseCaseDep,
    SendMessageUseCaseDep,
)

router = APIRouter(prefix="/chats", tags=["chats"])


@router.get(
    "",
    response_model=ChatListResponse,
    summary="List chats",
    description="Example chats plus the client's stored chats, newest first.",
)
async def list_chats(
    client_id: ClientIdDep,
    use_case: ListChatsUseCaseDep,
    language: Language = Language.DE,
):
    return await use_case.execute(client_id=client_id, language=language)


@router.get(
    "/looking-preview",
    response_model=LookingPreviewDTO,
    summary="Looking command preview",
    description="Whether to suggest the /looking command for the text typed so far.",
)
async def looking_preview(
    text: str = Query(""),
    language: Language = Language.DE,
):
    show = should_show_looking_preview(text)
    return LookingPreviewDTO(
        show=show,
        suggestion=LOOKING_PREVIEW[language] if show else None,
    )


@router.post(
    "/messages",
    response_model=SendMessageResponse,
    summary="Send a message",
    description="Start a chat or continue one and get the assistant's reply.",
)
async def send_message(
    request: SendMessageRequest,
    client_id: ClientIdDep,
    use_case: SendMessageUseCaseDep,
):
    try:
        return await use_case.execute(client_id=client_id, request=request)
    except ChatNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (ReadOnlyChatError, InvalidChatIdError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.get(
    "/{chat_id}",
    response_model=ChatDTO,
    summary="Get a chat",
    description="Retrieve a stored or example chat with its messages.",
)
async def get_chat(
    chat_id: str,
    client_id: ClientIdDep,
    use_case: GetChatUseCaseDep,
    language: Language = Language.DE,
):
    try:
        return await use_case.execute(
            client_id=client_id,
            chat_id=chat_id,
            language=language,
        )
    except ChatNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except InvalidChatIdError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete(
    "/{chat_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a chat",
    description="Remove a stored chat. Example chats are left untouched.",
)
async def delete_chat(
    chat_id: str,
    client_id: ClientIdDep,
    use_case: DeleteChatUseCaseDep,
):
    try:
        await use_case.execute(client_id=client_id, chat_id=chat_id)
    except InvalidChatIdError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
