"""
Integration tests for infrastructure components.

These tests verify that infrastructure implementations work correctly.
Redis, Anthropic and MCP clients are mocked; the analytics client runs
against an httpx mock transport.
"""

import asyncio
import pytest
import json
import httpx
import anthropic
from contextlib import asynccontextmanager
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

from src.infrastructure.repositories.redis_chat_repository import RedisChatRepository
from src.infrastructure.repositories.redis_booking_repository import (
    RedisBookingRepository,
)
from src.infrastructure.cache.redis_cache import RedisCacheService
from src.infrastructure.analytics.http_analytics_client import HttpAnalyticsClient
from src.infrastructure.llm.anthropic_client import AnthropicLLMClient
from src.infrastructure.llm.prompts import BOOKING_ASSISTANT_PROMPT
from src.infrastructure.mcp.client.mcp_client import RemoteMCPClient
from src.application.interfaces.i_llm_client import MCPServerSpec
from src.application.exceptions import (
    AnalyticsBackendError,
    LLMProviderError,
    MCPConnectionError,
)
from src.domain.entities.chat import Chat
from src.domain.entities.message import Message, MessageRole
from src.domain.value_objects.booking_id import BookingId
from src.domain.value_objects.chat_id import ChatId


def _stored_chat(chat_id: str, content: str = "Hallo") -> dict:
    return {
        "id": chat_id,
        "title": content,
        "timestamp": 1700000000000,
        "messages": [{"role": "user", "content": content}],
    }


class OptimisticRedis:
    """In-memory Redis double with WATCH/MULTI/EXEC conflict detection.

    Each read inside a transaction yields to the event loop, so concurrent
    writers interleave the way they would against a real server.
    """

    def __init__(self, data: dict | None = None):
        self.data = dict(data or {})
        self.versions: dict = {}
        self.retries = 0

    async def get(self, key):
        return self.data.get(key)

    async def transaction(self, func, *watches):
        while True:
            pipe = _OptimisticPipeline(self, watches)
            await func(pipe)
            if pipe.execute():
                return
            self.retries += 1


class _OptimisticPipeline:
    def __init__(self, redis, watches):
        self._redis = redis
        self._watched = {key: redis.versions.get(key, 0) for key in watches}
        self._queued = []

    async def get(self, key):
        value = self._redis.data.get(key)
        await asyncio.sleep(0)
        return value

    def multi(self):
        pass

    def set(self, key, value):
        self._queued.append((key, value))

    def execute(self) -> bool:
        for key, version in self._watched.items():
            if self._redis.versions.get(key, 0) != version:
                return False
        for key, value in self._queued:
            self._redis.data[key] = value
            self._redis.versions[key] = self._redis.versions.get(key, 0) + 1
        return True


@pytest.mark.asyncio
class TestRedisChatRepository:
    """Tests for RedisChatRepository."""

    @pytest.fixture
    def mock_redis_client(self):
        """Create a mock Redis client that is its own transaction pipeline."""
        client = AsyncMock()
        client.get = AsyncMock(return_value=None)
        client.set = MagicMock()
        client.multi = MagicMock()

        async def transaction(func, *watches):
            await func(client)

        client.transaction = AsyncMock(side_effect=transaction)
        return client

    @pytest.fixture
    def repository(self, mock_redis_client):
        """Create repository with mock client."""
        repo = RedisChatRepository(redis_url="redis://localhost:6379")
        repo._client = mock_redis_client
        return repo

    def _stored(self, mock_redis_client) -> list:
        key, value = mock_redis_client.set.call_args.args
        assert key == "looking-chats:browser-123"
        return json.loads(value)

    async def test_save_new_chat_prepends(
        self, repository, mock_redis_client, test_client_id, test_chat
    ):
        """Test that new chats go to the top of the list."""
        mock_redis_client.get.return_value = json.dumps([_stored_chat("chat-1")])

        await repository.save(test_client_id, test_chat)

        stored = self._stored(mock_redis_client)
        assert [c["id"] for c in stored] == ["chat-1700000000000", "chat-1"]
        assert stored[0]["messages"][1] == {
            "role": "assistant",
            "content": "Gerne! Für welchen Zeitraum genau?",
        }

    async def test_save_existing_chat_in_place(
        self, repository, mock_redis_client, test_client_id
    ):
        mock_redis_client.get.return_value = json.dumps(
            [_stored_chat("chat-2"), _stored_chat("chat-1")]
        )
        chat = Chat(
            id=ChatId("chat-1"),
            title="Hallo",
            messages=[Message.user_message("Hallo"), Message.assistant_message("Hi")],
            timestamp=1700000000000,
        )

        await repository.save(test_client_id, chat)

        stored = self._stored(mock_redis_client)
        assert [c["id"] for c in stored] == ["chat-2", "chat-1"]
        assert len(stored[1]["messages"]) == 2

    async def test_get_by_id(self, repository, mock_redis_client, test_client_id):
        mock_redis_client.get.return_value = json.dumps([_stored_chat("chat-1", "Zimmer")])

        chat = await repository.get_by_id(test_client_id, ChatId("chat-1"))

        assert chat.title == "Zimmer"
        assert chat.messages[0].role == MessageRole.USER
        mock_redis_client.get.assert_called_once_with("looking-chats:browser-123")

    async def test_get_by_id_not_found(self, repository, test_client_id):
        assert await repository.get_by_id(test_client_id, ChatId("chat-1")) is None

    async def test_list_all_empty(self, repository, test_client_id):
        assert await repository.list_all(test_client_id) == []

    async def test_list_all_keeps_order(self, repository, mock_redis_client, test_client_id):
        mock_redis_client.get.return_value = json.dumps(
            [_stored_chat("chat-3"), _stored_chat("chat-1")]
        )

        chats = await repository.list_all(test_client_id)

        assert [str(c.id) for c in chats] == ["chat-3", "chat-1"]

    async def test_delete(self, repository, mock_redis_client, test_client_id):
        mock_redis_client.get.return_value = json.dumps(
            [_stored_chat("chat-2"), _stored_chat("chat-1")]
        )

        await repository.delete(test_client_id, ChatId("chat-2"))

        assert [c["id"] for c in self._stored(mock_redis_client)] == ["chat-1"]

    async def test_delete_unknown_is_noop(self, repository, mock_redis_client, test_client_id):
        mock_redis_client.get.return_value = json.dumps([_stored_chat("chat-1")])

        await repository.delete(test_client_id, ChatId("chat-9"))

        mock_redis_client.set.assert_not_called()

    async def test_custom_prefix(self, mock_redis_client, test_client_id):
        repo = RedisChatRepository(redis_url="redis://localhost:6379", key_prefix="chats")
        repo._client = mock_redis_client

        await repo.list_all(test_client_id)

        mock_redis_client.get.assert_called_once_with("chats:browser-123")

    async def test_save_watches_client_key(
        self, repository, mock_redis_client, test_client_id, test_chat
    ):
        await repository.save(test_client_id, test_chat)

        mock_redis_client.transaction.assert_called_once()
        assert mock_redis_client.transaction.call_args.args[1:] == (
            "looking-chats:browser-123",
        )
        mock_redis_client.multi.assert_called_once()

    async def test_concurrent_saves_keep_both_chats(self, test_client_id):
        """Two tabs saving at once must not overwrite each other."""
        repo = RedisChatRepository(redis_url="redis://localhost:6379")
        repo._client = OptimisticRedis()
        first = Chat(
            id=ChatId("chat-1"),
            title="Zimmer im Dezember",
            messages=[Message.user_message("Zimmer im Dezember")],
            timestamp=1700000000000,
        )
        second = Chat(
            id=ChatId("chat-2"),
            title="Zimmer im Januar",
            messages=[Message.user_message("Zimmer im Januar")],
            timestamp=1700000000001,
        )

        await asyncio.gather(
            repo.save(test_client_id, first),
            repo.save(test_client_id, second),
        )

        chats = await repo.list_all(test_client_id)
        assert sorted(str(c.id) for c in chats) == ["chat-1", "chat-2"]
        assert repo._client.retries == 1

    async def test_concurrent_delete_and_save(self, test_client_id):
        repo = RedisChatRepository(redis_url="redis://localhost:6379")
        repo._client = OptimisticRedis(
            {"looking-chats:browser-123": json.dumps([_stored_chat("chat-1")])}
        )
        chat = Chat(
            id=ChatId("chat-2"),
            title="Neue Anfrage",
            messages=[Message.user_message("Neue Anfrage")],
            timestamp=1700000000001,
        )

        await asyncio.gather(
            repo.delete(test_client_id, ChatId("chat-1")),
            repo.save(test_client_id, chat),
        )

        chats = await repo.list_all(test_client_id)
        assert [str(c.id) for c in chats] == ["chat-2"]

    async def test_close(self, repository, mock_redis_client):
        await repository.close()

        mock_redis_client.aclose.assert_called_once()
        assert repository._client is None


@pytest.mark.asyncio
class TestRedisBookingRepository:
    """Tests for RedisBookingRepository."""

    @pytest.fixture
    def mock_redis_client(self):
        client = AsyncMock()
        client.get = AsyncMock(return_value=None)
        client.set = AsyncMock()
        return client

    @pytest.fixture
    def repository(self, mock_redis_client):
        repo = RedisBookingRepository(redis_url="redis://localhost:6379")
        repo._client = mock_redis_client
        return repo

    async def test_save_and_load(self, repository, mock_redis_client, test_booking):
        """Test that a saved booking reads back unchanged."""
        await repository.save(test_booking)

        key, data = mock_redis_client.set.call_args.args
        assert key == "booking:EDW-1700000000000"
        assert json.loads(data)["check_in"] == "2025-12-17"

        mock_redis_client.get.return_value = data
        loaded = await repository.get_by_id(BookingId("EDW-1700000000000"))

        assert loaded == test_booking

    async def test_not_found(self, repository):
        assert await repository.get_by_id(BookingId("EDW-1")) is None


@pytest.mark.asyncio
class TestRedisCacheService:
    """Tests for RedisCacheService."""

    @pytest.fixture
    def mock_redis_client(self):
        client = AsyncMock()
        client.get = AsyncMock(return_value=None)
        client.set = AsyncMock()
        client.delete = AsyncMock()
        return client

    @pytest.fixture
    def cache(self, mock_redis_client):
        service = RedisCacheService(redis_url="redis://localhost:6379", default_ttl=900)
        service._client = mock_redis_client
        return service

    async def test_get_json(self, cache, mock_redis_client):
        mock_redis_client.get.return_value = json.dumps({"summary": {}})

        assert await cache.get("analytics:summary:24") == {"summary": {}}
        mock_redis_client.get.assert_called_once_with(
            "looking-cache:analytics:summary:24"
        )

    async def test_get_missing(self, cache):
        assert await cache.get("key") is None

    async def test_undecodable_entry_dropped(self, cache, mock_redis_client):
        mock_redis_client.get.return_value = "{not json"

        assert await cache.get("key") is None
        mock_redis_client.delete.assert_called_once_with("looking-cache:key")

    async def test_set_with_default_ttl(self, cache, mock_redis_client):
        await cache.set("key", {"a": 1})
        mock_redis_client.set.assert_called_once_with(
            "looking-cache:key", '{"a": 1}', ex=900
        )

    async def test_set_with_ttl(self, cache, mock_redis_client):
        await cache.set("key", "value", ttl_seconds=60)
        mock_redis_client.set.assert_called_once_with(
            "looking-cache:key", '"value"', ex=60
        )

    async def test_close(self, cache, mock_redis_client):
        await cache.close()
        mock_redis_client.aclose.assert_called_once()
        assert cache._client is None


@pytest.mark.asyncio
class TestHttpAnalyticsClient:
    """Tests for HttpAnalyticsClient."""

    async def test_fetch_summary(self, analytics_summary):
        """Test the request the dashboard sends."""
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json=analytics_summary)

        client = HttpAnalyticsClient(
            base_url="https://analytics.example.test/",
            transport=httpx.MockTransport(handler),
        )

        result = await client.fetch_summary(168)

        request = seen["request"]
        assert request.method == "GET"
        assert request.url.path == "/api/v1/analytics/summary"
        assert request.url.params["hours"] == "168"
        assert request.headers["accept"] == "application/json"
        assert result["total_searches"] == 40

    async def test_error_status(self):
        client = HttpAnalyticsClient(
            base_url="https://analytics.example.test",
            transport=httpx.MockTransport(
                lambda request: httpx.Response(503, text="maintenance")
            ),
        )

        with pytest.raises(AnalyticsBackendError) as exc_info:
            await client.fetch_summary(24)

        assert str(exc_info.value) == "API returned 503: maintenance"
        assert exc_info.value.status_code == 503

    async def test_unreachable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = HttpAnalyticsClient(
            base_url="https://analytics.example.test",
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(AnalyticsBackendError):
            await client.fetch_summary(24)

    async def test_invalid_json(self):
        client = HttpAnalyticsClient(
            base_url="https://analytics.example.test",
            transport=httpx.MockTransport(
                lambda request: httpx.Response(200, text="<html>")
            ),
        )

        with pytest.raises(AnalyticsBackendError):
            await client.fetch_summary(24)


@pytest.mark.asyncio
class TestAnthropicLLMClient:
    """Tests for AnthropicLLMClient."""

    @pytest.fixture
    def sdk_client(self, llm_response):
        sdk = MagicMock()
        sdk.beta.messages.create = AsyncMock(
            return_value=MagicMock(model_dump=MagicMock(return_value=llm_response))
        )
        return sdk

    @pytest.fixture
    def client(self, sdk_client) -> AnthropicLLMClient:
        llm = AnthropicLLMClient(api_key="test-key")
        llm._client = sdk_client
        return llm

    async def test_create_message(self, client, sdk_client, llm_response):
        """Test that MCP servers and the beta flag are passed through."""
        result = await client.create_message(
            model="claude-sonnet-4-5",
            max_tokens=8192,
            system="prompt",
            messages=[{"role": "user", "content": "Hallo"}],
            mcp_servers=[MCPServerSpec(name="hotel-mcp", url="https://mcp.example.test")],
        )

        assert result == llm_response
        kwargs = sdk_client.beta.messages.create.call_args.kwargs
        assert kwargs["betas"] == ["mcp-client-2025-04-04"]
        assert kwargs["mcp_servers"] == [
            {"type": "url", "url": "https://mcp.example.test", "name": "hotel-mcp"}
        ]
        assert kwargs["model"] == "claude-sonnet-4-5"

    async def test_status_error(self, client, sdk_client):
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        response = httpx.Response(529, text='{"error":"overloaded"}', request=request)
        sdk_client.beta.messages.create.side_effect = anthropic.APIStatusError(
            "overloaded", response=response, body=None
        )

        with pytest.raises(LLMProviderError) as exc_info:
            await client.create_message(
                model="m", max_tokens=1, system="", messages=[], mcp_servers=[]
            )

        assert str(exc_info.value) == 'API error: 529 - {"error":"overloaded"}'
        assert exc_info.value.status_code == 529

    async def test_connection_error(self, client, sdk_client):
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        sdk_client.beta.messages.create.side_effect = anthropic.APIConnectionError(
            request=request
        )

        with pytest.raises(LLMProviderError):
            await client.create_message(
                model="m", max_tokens=1, system="", messages=[], mcp_servers=[]
            )

    async def test_missing_api_key(self):
        client = AnthropicLLMClient(api_key="")

        with pytest.raises(LLMProviderError):
            await client.create_message(
                model="m", max_tokens=1, system="", messages=[], mcp_servers=[]
            )


class TestBookingAssistantPrompt:
    def test_today_placeholder(self):
        rendered = BOOKING_ASSISTANT_PROMPT.format(today="08.11.2025")
        assert "Heute ist der 08.11.2025" in rendered
        assert "hotel-mcp" in rendered
        assert "/looking" in rendered


@pytest.mark.asyncio
class TestRemoteMCPClient:
    """Tests for RemoteMCPClient."""

    @staticmethod
    def _fake_transport(session):
        @asynccontextmanager
        async def fake_streamablehttp_client(url):
            yield ("read", "write", lambda: None)

        @asynccontextmanager
        async def fake_client_session(read, write):
            yield session

        return fake_streamablehttp_client, fake_client_session

    async def test_list_tools(self):
        session = AsyncMock()
        session.list_tools.return_value = SimpleNamespace(
            tools=[
                SimpleNamespace(
                    name="search_rooms",
                    description="Search available rooms",
                    inputSchema={"type": "object"},
                ),
                SimpleNamespace(name="book_room", description=None, inputSchema={}),
            ]
        )
        transport, client_session = self._fake_transport(session)

        with patch(
            "src.infrastructure.mcp.client.mcp_client.streamablehttp_client", transport
        ), patch("src.infrastructure.mcp.client.mcp_client.ClientSession", client_session):
            tools = await RemoteMCPClient(url="https://mcp.example.test").list_tools()

        session.initialize.assert_called_once()
        assert [t.name for t in tools] == ["search_rooms", "book_room"]
        assert tools[0].parameters == {"type": "object"}
        assert tools[1].description == ""

    async def test_connection_failure(self):
        @asynccontextmanager
        async def failing_transport(url):
            raise httpx.ConnectError("connection refused")
            yield

        with patch(
            "src.infrastructure.mcp.client.mcp_client.streamablehttp_client",
            failing_transport,
        ):
            with pytest.raises(MCPConnectionError):
                await RemoteMCPClient(url="https://mcp.example.test").list_tools()
