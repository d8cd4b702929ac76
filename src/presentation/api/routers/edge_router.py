"""
Edge Router - The chat proxy both chat surfaces call.
"""

import logging

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.application.dtos.edge_dtos import EdgeChatRequest, EdgeChatResponse
from src.application.exceptions import LLMProviderError
from src.presentation.api.dependencies import ProxyChatUseCaseDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions", tags=["edge"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


@router.options("/chat", include_in_schema=False)
async def chat_preflight():
    """Answer browser preflight requests."""
    return Response(content="ok", headers=CORS_HEADERS)


@router.post(
    "/chat",
    response_model=EdgeChatResponse,
    response_model_exclude_none=True,
    summary="Proxy a chat",
    description="Forward a conversation to the LLM with the hotel MCP server attached.",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": EdgeChatRequest.model_json_schema()}
            },
        }
    },
)
async def proxy_chat(
    request: Request,
    use_case: ProxyChatUseCaseDep,
):
    """Forward the messages and return the shaped reply.

    Every failure, malformed JSON included, answers with the
    ``{"error", "details"}`` body the browser clients read.
    """
    try:
        payload = EdgeChatRequest.model_validate_json(await request.body())
    except ValidationError as e:
        logger.warning("Rejected chat request: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Invalid request body",
                "details": e.errors(
                    include_url=False, include_context=False, include_input=False
                ),
            },
        )

    try:
        return await use_case.execute(payload)
    except LLMProviderError as e:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e), "details": e.status_code},
        )
    except Exception as e:
        logger.exception("Error in chat function")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(e) or "Unknown error", "details": type(e).__name__},
        )
