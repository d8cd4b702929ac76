"""
Shared pytest fixtures for all tests.
"""

import pytest
from datetime import date
from unittest.mock import AsyncMock

from src.domain.value_objects.chat_id import ChatId
from src.domain.value_objects.client_id import ClientId
from src.domain.value_objects.booking_id import BookingId
from src.domain.value_objects.chat_mode import ChatMode
from src.domain.entities.chat import Chat
from src.domain.entities.booking import BookingConfirmation
from src.domain.entities.message import Message
from src.domain.repositories.i_chat_repository import IChatRepository
from src.domain.repositories.i_booking_repository import IBookingRepository
from src.application.interfaces.i_llm_client import ILLMClient, MCPServerSpec
from src.application.interfaces.i_analytics_client import IAnalyticsClient
from src.application.interfaces.i_cache_service import ICacheService
from src.application.use_cases.proxy_chat import ModeConfig, ProxyChatUseCase


MCP_URL = "https://mcp.example.test/mcp/capcorn"


# ============================================================================
# Value Object Fixtures
# ============================================================================


@pytest.fixture
def test_client_id() -> ClientId:
    return ClientId("browser-123")


@pytest.fixture
def test_chat_id() -> ChatId:
    return ChatId("chat-1700000000000")


# ============================================================================
# Entity Fixtures
# ============================================================================


@pytest.fixture
def test_user_message() -> Message:
    return Message.user_message("Ich brauche ein Zimmer im Dezember")


@pytest.fixture
def test_assistant_message() -> Message:
    return Message.assistant_message("Gerne! Für welchen Zeitraum genau?")


@pytest.fixture
def test_chat(test_chat_id: ChatId, test_user_message, test_assistant_message) -> Chat:
    return Chat(
        id=test_chat_id,
        title="Ich brauche ein Zimmer im Deze",
        messages=[test_user_message, test_assistant_message],
        timestamp=1700000000000,
    )


@pytest.fixture
def test_booking() -> BookingConfirmation:
    return BookingConfirmation(
        booking_id=BookingId("EDW-1700000000000"),
        hotel="Hotel Edelweiss Obertauern",
        room="Deluxe Zimmer mit Bergblick",
        check_in=date(2025, 12, 17),
        check_out=date(2025, 12, 24),
        guests=2,
        price_per_night=180,
    )


# ============================================================================
# Mock Repository Fixtures
# ============================================================================


@pytest.fixture
def mock_chat_repository() -> AsyncMock:
    """Mock IChatRepository."""
    mock = AsyncMock(spec=IChatRepository)
    mock.get_by_id.return_value = None
    mock.save.return_value = None
    mock.delete.return_value = None
    mock.list_all.return_value = []
    return mock


@pytest.fixture
def mock_booking_repository() -> AsyncMock:
    """Mock IBookingRepository."""
    mock = AsyncMock(spec=IBookingRepository)
    mock.get_by_id.return_value = None
    mock.save.return_value = None
    return mock


# ============================================================================
# Mock Service Fixtures
# ============================================================================


@pytest.fixture
def llm_response() -> dict:
    """A raw vendor reply with text and a remote tool call."""
    return {
        "id": "msg_01",
        "type": "message",
        "role": "assistant",
        "content": [
            {"type": "text", "text": "Ich suche verfügbare Zimmer."},
            {
                "type": "mcp_tool_use",
                "id": "mcptoolu_01",
                "name": "search_rooms",
                "server_name": "hotel-mcp",
                "input": {"adults": 2},
            },
            {"type": "text", "text": "Ich habe 3 Zimmer gefunden."},
        ],
        "stop_reason": "end_turn",
    }


@pytest.fixture
def mock_llm_client(llm_response) -> AsyncMock:
    """Mock ILLMClient."""
    mock = AsyncMock(spec=ILLMClient)
    mock.create_message.return_value = llm_response
    return mock


@pytest.fixture
def mock_analytics_client() -> AsyncMock:
    """Mock IAnalyticsClient."""
    mock = AsyncMock(spec=IAnalyticsClient)
    mock.fetch_summary.return_value = {}
    return mock


@pytest.fixture
def mock_cache_service() -> AsyncMock:
    """Mock ICacheService."""
    mock = AsyncMock(spec=ICacheService)
    mock.get.return_value = None
    mock.set.return_value = None
    return mock


@pytest.fixture
def mode_configs() -> dict:
    return {
        ChatMode.CHAT: ModeConfig(
            model="claude-sonnet-4-20250514",
            max_tokens=8192,
            system_prompt="Heute ist der {today}.",
        ),
        ChatMode.HOTEL: ModeConfig(
            model="claude-sonnet-4-5",
            max_tokens=8192,
            system_prompt="Heute ist der {today}.",
        ),
    }


@pytest.fixture
def proxy_use_case(mock_llm_client, mode_configs) -> ProxyChatUseCase:
    return ProxyChatUseCase(
        llm_client=mock_llm_client,
        modes=mode_configs,
        mcp_server=MCPServerSpec(name="hotel-mcp", url=MCP_URL),
    )


# ============================================================================
# Analytics Payload Fixtures
# ============================================================================


@pytest.fixture
def analytics_summary() -> dict:
    return {
        "total_searches": 40,
        "total_reservations": 5,
        "conversion_rate": 12.5,
        "total_revenue": 1234.5,
        "average_booking_value": 246.9,
        "popular_durations": {"7": 3, "3": 2},
        "searches": [
            {
                "data": {
                    "adults": 2,
                    "children": [8, 12],
                    "timespan": {"from_date": "2025-12-17", "to_date": "2025-12-24"},
                    "duration": 7,
                },
                "results_count": 4,
            }
        ],
        "reservations": [
            {
                "reservation_id": 991,
                "guest": {"given_name": "Anna", "surname": "Huber"},
                "arrival": "2025-12-17",
                "departure": "2025-12-24",
                "room_type_code": "DZB",
                "total_amount": 1260,
            }
        ],
    }


# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "e2e: mark test as an end-to-end test"
    )
