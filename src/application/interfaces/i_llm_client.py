from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List


@dataclass(frozen=True)
class MCPServerSpec:
    """A remote MCP server the LLM vendor should call on our behalf."""

    name: str
    url: str

    def to_dict(self) -> dict:
        return {"type": "url", "url": self.url, "name": self.name}


class ILLMClient(ABC):
    """Interface for the hosted chat-completion API."""

    @abstractmethod
    async def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        system: str,
        messages: List[dict],
        mcp_servers: List[MCPServerSpec],
    ) -> dict[str, Any]:
        """Send a conversation and return the vendor's raw JSON response.

        Raises:
            LLMProviderError: If the vendor rejects the request or cannot be reached
        """
        pass
