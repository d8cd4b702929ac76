from .edge_router import router as edge_router
from .chats_router import router as chats_router
from .hotel_router import router as hotel_router
from .booking_router import router as booking_router
from .analytics_router import router as analytics_router
from .mcp_router import router as mcp_router

__all__ = [
    "edge_router",
    "chats_router",
    "hotel_router",
    "booking_router",
    "analytics_router",
    "mcp_router",
]
