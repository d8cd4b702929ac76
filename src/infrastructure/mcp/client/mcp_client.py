"""
MCP Client.

Connects to the hotel MCP server the LLM vendor calls during a booking
conversation, so operators can see which tools the model can reach.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List

from mcp import ClientSession
from mcp.client.streamable_http import streamablehttp_client

from src.application.exceptions import MCPConnectionError
from src.application.interfaces.i_mcp_client import IMCPClient, MCPTool

logger = logging.getLogger(__name__)


class RemoteMCPClient(IMCPClient):
    """Client for a remote MCP server over streamable HTTP."""

    def __init__(self, url: str, name: str = "hotel-mcp"):
        self.url = url
        self.name = name

    @asynccontextmanager
    async def _connect(self) -> AsyncIterator[ClientSession]:
        """Context manager for a server session."""
        async with streamablehttp_client(self.url) as (read, write, _):
            async with ClientSession(read, write) as session:
                await session.initialize()
                yield session

    async def list_tools(self) -> List[MCPTool]:
        """List tools from the server."""
        try:
            async with self._connect() as session:
                result = await session.list_tools()
        except Exception as e:
            logger.error("MCP server %s unreachable: %s", self.name, e)
            raise MCPConnectionError(
                f"Could not list tools from MCP server '{self.name}': {e}"
            ) from e

        return [
            MCPTool(
                name=tool.name,
                description=tool.description or "",
                parameters=tool.inputSchema,
            )
            for tool in result.tools
        ]
