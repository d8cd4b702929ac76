from .i_llm_client import ILLMClient, MCPServerSpec
from .i_analytics_client import IAnalyticsClient
from .i_cache_service import ICacheService
from .i_mcp_client import IMCPClient, MCPTool

__all__ = [
    "ILLMClient",
    "MCPServerSpec",
    "IAnalyticsClient",
    "ICacheService",
    "IMCPClient",
    "MCPTool",
]
