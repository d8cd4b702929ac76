from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List


@dataclass
class MCPTool:
    """Represents an MCP tool available from a server."""

    name: str
    description: str
    parameters: dict


class IMCPClient(ABC):
    """Interface for inspecting the hotel MCP server.

    Tool calls during a conversation are made by the LLM vendor, not by this
    service. The client only lets operators see what the model can reach.
    """

    @abstractmethod
    async def list_tools(self) -> List[MCPTool]:
        """List available tools from the server.

        Raises:
            MCPConnectionError: If the server cannot be reached
        """
        pass
