import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List

from src.domain.value_objects.chat_mode import ChatMode
from src.application.dtos.edge_dtos import EdgeChatRequest, EdgeChatResponse, ToolUseDTO
from src.application.interfaces.i_llm_client import ILLMClient, MCPServerSpec

logger = logging.getLogger(__name__)

TOOL_USE_BLOCK_TYPES = ("tool_use", "mcp_tool_use")


@dataclass(frozen=True)
class ModeConfig:
    """Model settings for one chat surface.

    ``system_prompt`` may contain a ``{today}`` placeholder that is filled
    with the current date (dd.mm.yyyy) on every request.
    """

    model: str
    max_tokens: int
    system_prompt: str

    def render_system_prompt(self, today: date) -> str:
        return self.system_prompt.format(today=today.strftime("%d.%m.%Y"))


def shape_reply(data: Dict[str, Any]) -> EdgeChatResponse:
    """Reduce a raw vendor response to the message, stop reason and tools used."""
    content = data.get("content")

    if isinstance(content, list):
        message = "\n\n".join(
            block.get("text", "")
            for block in content
            if isinstance(block, dict) and block.get("type") == "text"
        )
    elif isinstance(content, str):
        message = content
    else:
        message = ""

    tools_used: List[ToolUseDTO] | None = None
    if isinstance(content, list):
        tool_blocks = [
            block
            for block in content
            if isinstance(block, dict) and block.get("type") in TOOL_USE_BLOCK_TYPES
        ]
        if tool_blocks:
            tools_used = [
                ToolUseDTO(name=block.get("name", ""), id=block.get("id", ""))
                for block in tool_blocks
            ]

    return EdgeChatResponse(
        message=message,
        stop_reason=data.get("stop_reason"),
        tools_used=tools_used,
    )


@dataclass
class ProxyChatUseCase:
    """Forward a conversation to the LLM with the hotel MCP server attached."""

    llm_client: ILLMClient
    modes: Dict[ChatMode, ModeConfig]
    mcp_server: MCPServerSpec

    async def execute(self, request: EdgeChatRequest) -> EdgeChatResponse:
        """Send the messages to the model configured for the request's type.

        Raises:
            LLMProviderError: If the vendor call fails
        """
        mode = ChatMode.from_value(request.type)
        config = self.modes[mode]

        logger.info(
            "Calling LLM (%s) with %d messages", mode.value, len(request.messages)
        )

        data = await self.llm_client.create_message(
            model=config.model,
            max_tokens=config.max_tokens,
            system=config.render_system_prompt(date.today()),
            messages=[
                {"role": msg.role, "content": msg.content} for msg in request.messages
            ],
            mcp_servers=[self.mcp_server],
        )

        reply = shape_reply(data)
        logger.info(
            "LLM replied (stop_reason=%s, tools_used=%d)",
            reply.stop_reason,
            len(reply.tools_used or []),
        )
        return reply
