from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class EdgeMessageDTO(BaseModel):
    """A message exactly as the browser forwards it to the chat function."""

    role: Literal["user", "assistant"]
    content: Union[str, List[Any]]


class EdgeChatRequest(BaseModel):
    """Request body of the chat edge function."""

    messages: List[EdgeMessageDTO] = Field(min_length=1)
    type: Optional[str] = "chat"

    model_config = {
        "json_schema_extra": {
            "example": {
                "messages": [
                    {"role": "user", "content": "/looking Zimmer für 2 Erwachsene"}
                ],
                "type": "hotel",
            }
        }
    }


class ToolUseDTO(BaseModel):
    name: str
    id: str


class EdgeChatResponse(BaseModel):
    """Shaped model reply returned by the chat edge function."""

    message: str
    stop_reason: Optional[str] = None
    tools_used: Optional[List[ToolUseDTO]] = None
