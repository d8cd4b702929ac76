"""
Anthropic Messages API client with remote MCP support.

The hotel MCP server is passed to Anthropic as a URL; Anthropic connects to
it and runs the room search and booking tools while generating the reply.
"""

import logging
from typing import Any, List, Sequence

import anthropic
from anthropic import AsyncAnthropic

from src.application.exceptions import LLMProviderError
from src.application.interfaces.i_llm_client import ILLMClient, MCPServerSpec

logger = logging.getLogger(__name__)


class AnthropicLLMClient(ILLMClient):
    """ILLMClient backed by the Anthropic Python SDK."""

    def __init__(
        self,
        api_key: str,
        anthropic_version: str = "2023-06-01",
        betas: Sequence[str] = ("mcp-client-2025-04-04",),
    ):
        self._api_key = api_key
        self._anthropic_version = anthropic_version
        self._betas = list(betas)
        self._client: AsyncAnthropic | None = None

    def _get_client(self) -> AsyncAnthropic:
        if self._client is None:
            if not self._api_key:
                raise LLMProviderError("ANTHROPIC_API_KEY is not configured")
            self._client = AsyncAnthropic(
                api_key=self._api_key,
                default_headers={"anthropic-version": self._anthropic_version},
            )
        return self._client

    async def create_message(
        self,
        *,
        model: str,
        max_tokens: int,
        system: str,
        messages: List[dict],
        mcp_servers: List[MCPServerSpec],
    ) -> dict[str, Any]:
        client = self._get_client()

        try:
            response = await client.beta.messages.create(
                model=model,
                max_tokens=max_tokens,
                system=system,
                messages=messages,
                mcp_servers=[server.to_dict() for server in mcp_servers],
                betas=self._betas,
            )
        except anthropic.APIStatusError as e:
            body = e.response.text
            logger.error("Anthropic API error: %s %s", e.status_code, body)
            raise LLMProviderError(
                f"API error: {e.status_code} - {body}", status_code=e.status_code
            ) from e
        except anthropic.APIError as e:
            logger.error("Anthropic API unreachable: %s", e)
            raise LLMProviderError(f"API error: {e}") from e

        data = response.model_dump(mode="json")
        logger.debug("Anthropic API response: %s", data)
        return data

    async def close(self) -> None:
        if self._client:
            await self._client.close()
            self._client = None
