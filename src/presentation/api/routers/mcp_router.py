"""
MCP Router - Inspect the hotel MCP server.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from src.application.exceptions import MCPConnectionError
from src.presentation.api.dependencies import MCPClientDep

router = APIRouter(prefix="/mcp", tags=["mcp"])


class MCPToolDTO(BaseModel):
    name: str
    description: str
    parameters: dict


@router.get(
    "/tools",
    response_model=List[MCPToolDTO],
    summary="List MCP tools",
    description="Tools the hotel MCP server offers to the LLM.",
)
async def list_tools(mcp_client: MCPClientDep):
    try:
        tools = await mcp_client.list_tools()
    except MCPConnectionError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        )
    return [
        MCPToolDTO(name=t.name, description=t.description, parameters=t.parameters)
        for t in tools
    ]
