import json
from typing import Any, Callable, List, Optional

import redis.asyncio as aioredis

from src.domain.entities.chat import Chat
from src.domain.entities.message import Message, MessageRole
from src.domain.repositories.i_chat_repository import IChatRepository
from src.domain.value_objects.chat_id import ChatId
from src.domain.value_objects.client_id import ClientId


class RedisChatRepository(IChatRepository):
    """Redis-based repository for a client's chat list.

    Each client's chats live as one JSON array under ``<prefix>:<client_id>``,
    newest first, the same layout the browser kept in local storage.
    """

    def __init__(self, redis_url: str, key_prefix: str = "looking-chats"):
        self._redis_url = redis_url
        self._key_prefix = key_prefix
        self._client: Any = None

    async def _get_client(self) -> Any:
        if self._client is None:
            self._client = aioredis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        return self._client

    def _key(self, client_id: ClientId) -> str:
        return f"{self._key_prefix}:{client_id}"

    def _serialize_chat(self, chat: Chat) -> dict:
        return {
            "id": str(chat.id),
            "title": chat.title,
            "timestamp": chat.timestamp,
            "messages": [msg.to_dict() for msg in chat.messages],
        }

    def _deserialize_chat(self, obj: dict) -> Chat:
        return Chat(
            id=ChatId(obj["id"]),
            title=obj.get("title", ""),
            messages=[
                Message(role=MessageRole(msg["role"]), content=msg["content"])
                for msg in obj.get("messages", [])
            ],
            timestamp=obj["timestamp"],
        )

    def _decode(self, data: Optional[str]) -> List[Chat]:
        if not data:
            return []
        return [self._deserialize_chat(obj) for obj in json.loads(data)]

    def _encode(self, chats: List[Chat]) -> str:
        return json.dumps([self._serialize_chat(c) for c in chats])

    async def _load(self, client_id: ClientId) -> List[Chat]:
        client = await self._get_client()
        return self._decode(await client.get(self._key(client_id)))

    async def _update(
        self,
        client_id: ClientId,
        change: Callable[[List[Chat]], Optional[List[Chat]]],
    ) -> None:
        """Rewrite the client's list inside a WATCH/MULTI transaction.

        redis-py retries ``apply`` whenever another writer touches the key
        between the read and the EXEC. ``change`` returns None to leave the
        list untouched.
        """
        client = await self._get_client()
        key = self._key(client_id)

        async def apply(pipe: Any) -> None:
            updated = change(self._decode(await pipe.get(key)))
            if updated is None:
                return
            pipe.multi()
            pipe.set(key, self._encode(updated))

        await client.transaction(apply, key)

    async def get_by_id(self, client_id: ClientId, chat_id: ChatId) -> Optional[Chat]:
        """Retrieve a stored chat by its ID."""
        for chat in await self._load(client_id):
            if chat.id == chat_id:
                return chat
        return None

    async def save(self, client_id: ClientId, chat: Chat) -> None:
        """Persist a chat, replacing it in place or prepending it when new."""

        def upsert(chats: List[Chat]) -> List[Chat]:
            for index, existing in enumerate(chats):
                if existing.id == chat.id:
                    chats[index] = chat
                    break
            else:
                chats.insert(0, chat)
            return chats

        await self._update(client_id, upsert)

    async def delete(self, client_id: ClientId, chat_id: ChatId) -> None:
        """Delete a stored chat."""

        def remove(chats: List[Chat]) -> Optional[List[Chat]]:
            remaining = [c for c in chats if c.id != chat_id]
            return remaining if len(remaining) != len(chats) else None

        await self._update(client_id, remove)

    async def list_all(self, client_id: ClientId) -> List[Chat]:
        """List the client's stored chats, newest first."""
        return await self._load(client_id)

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._client:
            await self._client.aclose()
            self._client = None
